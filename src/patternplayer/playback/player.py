"""Base media player."""

import logging

import click

from patternplayer.protocols import Emitter, Renderer

logger = logging.getLogger(__name__)


class BasePlayer:
    """
    Plays one file through a renderer.

    This is the innermost link of every player chain. The renderer is owned
    by this player and not shared with any other.
    """

    def __init__(self, file_name: str, renderer: Renderer, emit: Emitter = click.echo):
        """
        Initialize the player.

        Args:
            file_name: Media file to play
            renderer: Renderer used to draw the media
            emit: Output sink for playback announcements
        """
        self.file_name = file_name
        self.renderer = renderer
        self._emit = emit

    def play(self) -> None:
        """Render the file, then announce playback."""
        logger.debug(f"Playing {self.file_name} with {type(self.renderer).__name__}")
        self.renderer.render(self.file_name)
        self._emit(f"Playing {self.file_name}...")
