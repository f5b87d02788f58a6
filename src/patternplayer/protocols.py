"""Capability protocols for the media player components.

Each protocol is a single-method capability. Concrete variants live in
patternplayer.media (sources, renderers, remote media), patternplayer.playback
(players) and patternplayer.models (playlist items).

Every component announces what it does through an Emitter: a callable that
takes one line of text. The default emitter is click.echo.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

Emitter = Callable[[str], None]


@runtime_checkable
class MediaSource(Protocol):
    """A backend that media can be loaded from (local disk, HLS, remote API)."""

    def load(self, file_name: str) -> None:
        """
        Announce which backend would be contacted for file_name.

        Args:
            file_name: Name of the media file to load
        """
        ...


@runtime_checkable
class Renderer(Protocol):
    """Implementation side of playback: how media is drawn."""

    def render(self, file_name: str) -> None:
        """Announce rendering of file_name."""
        ...


@runtime_checkable
class Player(Protocol):
    """Anything that can play: a base player or a decorator around one."""

    def play(self) -> None:
        ...


@runtime_checkable
class PlaylistComponent(Protocol):
    """A node in a playlist tree (song leaf or nested playlist)."""

    def show_details(self, emit: Emitter = ...) -> None:
        """Print this node and, for containers, all descendants in pre-order."""
        ...


@runtime_checkable
class RemoteMedia(Protocol):
    """A remote stream endpoint."""

    def play_stream(self, file_name: str) -> None:
        ...
