"""Tests for the Facade pattern unit."""
import pytest

from pattern_catalog.patterns.facade import CPU, ComputerFacade, FacadeExample, HardDrive, Memory


@pytest.mark.unit
class TestComputerFacade:
    def test_start_runs_steps_in_boot_order(self):
        steps = ComputerFacade().start()
        assert steps == [
            "CPU: freezing processor",
            "HardDrive: reading 1024 bytes from sector 0",
            "Memory: loading boot data at 0x0000",
            "CPU: jumping to 0x0000",
            "CPU: executing instructions",
        ]

    def test_facade_owns_subsystems(self):
        computer = ComputerFacade()
        assert isinstance(computer.cpu, CPU)
        assert isinstance(computer.memory, Memory)
        assert isinstance(computer.hard_drive, HardDrive)

    def test_subsystems_usable_directly(self):
        assert CPU().jump(0x7C00) == "CPU: jumping to 0x7C00"
        assert HardDrive().read(2, 512) == "HardDrive: reading 512 bytes from sector 2"


@pytest.mark.unit
def test_facade_example_output():
    lines = FacadeExample().render()
    assert lines[-1] == "Computer started (5 steps)"
    assert len(lines) == 6
