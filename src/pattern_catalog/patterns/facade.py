"""Facade pattern - one start() call over CPU, memory and disk subsystems."""
from typing import List

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample

BOOT_ADDRESS = 0x0000
BOOT_SECTOR = 0
SECTOR_SIZE = 1024


class CPU:
    def freeze(self) -> str:
        return "CPU: freezing processor"

    def jump(self, position: int) -> str:
        return f"CPU: jumping to 0x{position:04X}"

    def execute(self) -> str:
        return "CPU: executing instructions"


class HardDrive:
    def read(self, lba: int, size: int) -> str:
        return f"HardDrive: reading {size} bytes from sector {lba}"


class Memory:
    def load(self, position: int, data: str) -> str:
        return f"Memory: loading {data} at 0x{position:04X}"


class ComputerFacade:
    """
    Single entry point owning the three subsystems.

    ``start`` sequences the boot steps across all of them and returns the
    step messages in the order they ran.
    """

    def __init__(self) -> None:
        self.cpu = CPU()
        self.memory = Memory()
        self.hard_drive = HardDrive()

    def start(self) -> List[str]:
        steps = [self.cpu.freeze()]
        steps.append(self.hard_drive.read(BOOT_SECTOR, SECTOR_SIZE))
        steps.append(self.memory.load(BOOT_ADDRESS, "boot data"))
        steps.append(self.cpu.jump(BOOT_ADDRESS))
        steps.append(self.cpu.execute())
        return steps


@pattern_example
class FacadeExample(PatternExample):
    unit = PatternUnit(
        key="facade",
        name="Facade",
        category=PatternCategory.STRUCTURAL,
        description=(
            "Provides a single simplified interface to a set of subsystems. The "
            "facade owns the subsystems and sequences calls across them, so "
            "clients perform a complex operation with one call."
        ),
        advantages=[
            "Hides subsystem complexity behind one simple operation",
            "Reduces coupling between clients and subsystems",
            "Subsystems remain available for clients that need fine control",
        ],
        disadvantages=[
            "The facade can grow into a god object coupled to everything",
            "Clients that need more flexibility bypass it anyway",
        ],
        sample_output=[
            "CPU: freezing processor",
            "HardDrive: reading 1024 bytes from sector 0",
            "Memory: loading boot data at 0x0000",
            "CPU: jumping to 0x0000",
            "CPU: executing instructions",
            "Computer started (5 steps)",
        ],
    )

    def run(self, output: OutputSink) -> None:
        computer = ComputerFacade()
        steps = computer.start()
        for step in steps:
            output(step)
        output(f"Computer started ({len(steps)} steps)")


def main() -> None:
    FacadeExample().run(print)


if __name__ == "__main__":
    main()
