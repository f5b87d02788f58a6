"""
Application orchestrator for one run of the media player.

Builds every component from a PlayerConfig and triggers their announcements
in a fixed order:

    1. configuration summary
    2. media source load
    3. renderer + base player
    4. feature decorators (subtitles, equalizer, watermark)
    5. remote stream proxy (remote sources only)
    6. playlist details
    7. playback of the decorated player

The remote proxy is exercised on its own and is not part of the player
chain built in steps 3 and 4.
"""

import logging
from typing import Optional

import click

from patternplayer.exceptions import ErrorContext
from patternplayer.media import RemoteMediaProxy, create_renderer, create_source
from patternplayer.models import PlayerConfig, Playlist, Song
from patternplayer.playback import BasePlayer, apply_features
from patternplayer.protocols import Emitter, MediaSource, Player

logger = logging.getLogger(__name__)

SUMMARY_HEADER = "=== Simulated User Configuration ==="
SUMMARY_FOOTER = "==================================="
PLAYLIST_HEADER = "--- Playlist Details ---"
NOW_PLAYING_HEADER = "--- Now Playing ---"


def _applied(enabled: bool) -> str:
    return "Applied" if enabled else "Not Applied"


def format_config_summary(config: PlayerConfig) -> list[str]:
    """
    Render the configuration summary block.

    Args:
        config: Configuration to describe

    Returns:
        Summary lines, ending with a blank separator line
    """
    # The hardware line reports the subtitles flag; "No " keeps its trailing space.
    hardware_status = "Yes" if config.enable_subtitles else "No "
    return [
        SUMMARY_HEADER,
        f"Source Type: {config.source_type}",
        f"File Name: {config.file_name}",
        f"Hardware Rendering: {hardware_status}",
        f"Subtitles: {_applied(config.enable_subtitles)}",
        f"Equalizer: {_applied(config.enable_equalizer)}",
        f"Watermark: {_applied(config.enable_watermark)}",
        SUMMARY_FOOTER,
        "",
    ]


def build_playlist(file_name: str) -> Playlist:
    """
    Build the demo playlist: the configured file, a follow-up track and a
    nested "Mixed Hits" playlist.
    """
    mix = Playlist(name="Mixed Hits")
    mix.add(Song(name="Mixed Hit1.mp3")).add(Song(name="Mixed Hit2.mp3"))

    playlist = Playlist(name="My Favorites")
    playlist.add(Song(name=file_name)).add(Song(name="NextTrack.mp3")).add(mix)
    return playlist


class Orchestrator:
    """
    Top-level orchestrator for the media player.

    Architecture:
        Orchestrator (this class)
        ├── source: MediaSource adapter for the configured backend
        ├── player: BasePlayer(renderer) wrapped in feature decorators
        ├── proxy: RemoteMediaProxy (remote sources only)
        └── playlist: Playlist tree shown before playback
    """

    def __init__(self, config: PlayerConfig, emit: Emitter = click.echo):
        """
        Initialize the orchestrator.

        Args:
            config: Player configuration
            emit: Output sink shared by every component
        """
        self.config = config
        self._emit = emit

        # Built by run()
        self.source: Optional[MediaSource] = None
        self.player: Optional[Player] = None
        self.proxy: Optional[RemoteMediaProxy] = None
        self.playlist: Optional[Playlist] = None

    def _step(self, operation: str) -> ErrorContext:
        """Log one step of the run at INFO; failures are logged here, once."""
        return ErrorContext(operation, logger_instance=logger, log_level=logging.INFO)

    def build_player(self) -> Player:
        """Create the renderer and base player, then stack enabled features."""
        renderer = create_renderer(self.config.use_hardware, self._emit)
        player = BasePlayer(self.config.file_name, renderer, self._emit)
        subtitles, equalizer, watermark = self.config.feature_flags()
        return apply_features(
            player,
            subtitles=subtitles,
            equalizer=equalizer,
            watermark=watermark,
            emit=self._emit,
        )

    def run(self) -> None:
        """Run every step once, in order."""
        config = self.config
        logger.info(
            f"Starting run: source={config.source_type!r}, file={config.file_name!r}, "
            f"renderer={config.renderer_kind.value}"
        )

        with self._step("print configuration summary"):
            for line in format_config_summary(config):
                self._emit(line)

        with self._step("load media source"):
            self.source = create_source(config.resolved_source, self._emit)
            self.source.load(config.file_name)

        with self._step("build player"):
            self.player = self.build_player()

        if config.is_remote:
            with self._step("stream through remote proxy"):
                self.proxy = RemoteMediaProxy(self._emit)
                self.proxy.play_stream(config.file_name)

        with self._step("show playlist"):
            self.playlist = build_playlist(config.file_name)
            self._emit("")
            self._emit(PLAYLIST_HEADER)
            self.playlist.show_details(self._emit)

        with self._step("play"):
            self._emit("")
            self._emit(NOW_PLAYING_HEADER)
            self.player.play()

        self._emit("")
        self._emit("")
        logger.info("Run complete")
