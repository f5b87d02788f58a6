"""Media source adapters.

Each backend is wrapped behind the same `load(file_name)` call so the rest
of the player does not care where media comes from.
"""

import logging

import click

from patternplayer.models.enums import SourceType
from patternplayer.protocols import Emitter, MediaSource

logger = logging.getLogger(__name__)


class LocalFilePlayer:
    """Loads media from the local file system."""

    source_type = SourceType.LOCAL

    def __init__(self, emit: Emitter = click.echo):
        self._emit = emit

    def load(self, file_name: str) -> None:
        self._emit(f"Loading local file: {file_name}")


class HLSStreamPlayer:
    """Connects to an HTTP live stream."""

    source_type = SourceType.HLS

    def __init__(self, emit: Emitter = click.echo):
        self._emit = emit

    def load(self, file_name: str) -> None:
        self._emit(f"Connecting to HLS stream: {file_name}")


class RemoteAPIPlayer:
    """Fetches media through a remote API."""

    source_type = SourceType.REMOTE

    def __init__(self, emit: Emitter = click.echo):
        self._emit = emit

    def load(self, file_name: str) -> None:
        self._emit(f"Getting remote media via API: {file_name}")


_SOURCES: dict[SourceType, type] = {
    cls.source_type: cls for cls in (LocalFilePlayer, HLSStreamPlayer, RemoteAPIPlayer)
}


def create_source(source_type: SourceType | str, emit: Emitter = click.echo) -> MediaSource:
    """
    Create the media source adapter for a source type.

    Args:
        source_type: SourceType or raw tag; unknown tags resolve to a local source
        emit: Output sink for the adapter's announcements

    Returns:
        LocalFilePlayer, HLSStreamPlayer or RemoteAPIPlayer
    """
    if not isinstance(source_type, SourceType):
        source_type = SourceType.from_tag(source_type)

    source = _SOURCES[source_type](emit)
    logger.debug(f"Selected media source {type(source).__name__} ({source.source_type.value})")
    return source
