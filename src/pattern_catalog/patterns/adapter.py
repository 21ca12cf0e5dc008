"""Adapter pattern - one play() interface over incompatible media players.

AudioPlayer plays mp3 natively and hands every other format to MediaAdapter,
which picks an advanced player by type tag. Formats no player understands are
ignored on purpose: the example shows the trade-off, it does not harden it.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class MediaPlayer(ABC):
    """Target interface expected by clients."""

    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> None:
        pass


class AdvancedMediaPlayer(ABC):
    """Adaptee interface: one method per format."""

    def __init__(self, output: OutputSink = print):
        self._output = output

    @abstractmethod
    def play_vlc(self, file_name: str) -> None:
        pass

    @abstractmethod
    def play_mp4(self, file_name: str) -> None:
        pass


class VlcPlayer(AdvancedMediaPlayer):
    def play_vlc(self, file_name: str) -> None:
        self._output(f"Playing vlc file: {file_name}")

    def play_mp4(self, file_name: str) -> None:
        pass


class Mp4Player(AdvancedMediaPlayer):
    def play_vlc(self, file_name: str) -> None:
        pass

    def play_mp4(self, file_name: str) -> None:
        self._output(f"Playing mp4 file: {file_name}")


class MediaAdapter(MediaPlayer):
    """Makes an AdvancedMediaPlayer usable through the MediaPlayer interface."""

    _players: Dict[str, Type[AdvancedMediaPlayer]] = {
        "vlc": VlcPlayer,
        "mp4": Mp4Player,
    }

    def __init__(self, audio_type: str, output: OutputSink = print):
        self._audio_type = audio_type.lower()
        player_class = self._players.get(self._audio_type)
        self._advanced_player: Optional[AdvancedMediaPlayer] = (
            player_class(output) if player_class else None
        )

    @property
    def is_supported(self) -> bool:
        return self._advanced_player is not None

    def play(self, audio_type: str, file_name: str) -> None:
        audio_type = audio_type.lower()
        # An adapter only plays the type it was built for
        if self._advanced_player is None or audio_type != self._audio_type:
            logger.debug("Unsupported media type ignored", audio_type=audio_type, file_name=file_name)
            return
        if self._audio_type == "vlc":
            self._advanced_player.play_vlc(file_name)
        elif self._audio_type == "mp4":
            self._advanced_player.play_mp4(file_name)


class AudioPlayer(MediaPlayer):
    def __init__(self, output: OutputSink = print):
        self._output = output

    def play(self, audio_type: str, file_name: str) -> None:
        if audio_type.lower() == "mp3":
            self._output(f"Playing mp3 file: {file_name}")
            return
        MediaAdapter(audio_type, self._output).play(audio_type, file_name)


@pattern_example
class AdapterExample(PatternExample):
    unit = PatternUnit(
        key="adapter",
        name="Adapter",
        category=PatternCategory.STRUCTURAL,
        description=(
            "Converts the interface of a class into another interface clients "
            "expect. The adapter selects one of several incompatible "
            "implementations by type tag and normalizes them behind a single call."
        ),
        advantages=[
            "Reuses existing classes whose interfaces do not match",
            "Client code depends on one narrow interface only",
            "Interface translation lives in one place",
        ],
        disadvantages=[
            "Adds an extra layer between client and implementation",
            "Unsupported inputs are silently ignored unless handled explicitly",
        ],
        sample_output=[
            "Playing mp3 file: beyond_the_horizon.mp3",
            "Playing vlc file: far_far_away.vlc",
            "Playing mp4 file: alone.mp4",
        ],
    )

    def run(self, output: OutputSink) -> None:
        player = AudioPlayer(output)

        player.play("mp3", "beyond_the_horizon.mp3")
        player.play("vlc", "far_far_away.vlc")
        player.play("mp4", "alone.mp4")
        player.play("avi", "mind_me.avi")


def main() -> None:
    AdapterExample().run(print)


if __name__ == "__main__":
    main()
