"""Remote media streaming behind a caching proxy."""

import logging
from typing import Optional

import click

from patternplayer.protocols import Emitter

logger = logging.getLogger(__name__)


class RealRemoteMedia:
    """Streams a file from the remote endpoint."""

    def __init__(self, emit: Emitter = click.echo):
        self._emit = emit

    def play_stream(self, file_name: str) -> None:
        self._emit(f"Streaming remote media: {file_name}")


class RemoteMediaProxy:
    """
    Caching proxy in front of RealRemoteMedia.

    Keeps a single cache slot keyed by the last streamed file name:

    - Empty, or cached for another file: announce caching, construct a new
      RealRemoteMedia and remember the file name.
    - Cached for the same file: announce the cache hit and reuse the
      existing RealRemoteMedia.

    Either way playback is delegated to the real media object. The proxy is
    single-threaded; callers must not share it across threads.
    """

    def __init__(self, emit: Emitter = click.echo):
        self._emit = emit
        self._real_media: Optional[RealRemoteMedia] = None
        self._cached_file: Optional[str] = None

    @property
    def cached_file(self) -> Optional[str]:
        """File name of the current cached stream (None before first use)."""
        return self._cached_file

    @property
    def real_media(self) -> Optional[RealRemoteMedia]:
        return self._real_media

    def play_stream(self, file_name: str) -> None:
        """Stream file_name, reusing the cached remote media when possible."""
        if self._real_media is None or self._cached_file != file_name:
            logger.debug(f"Remote cache miss for {file_name!r} (cached: {self._cached_file!r})")
            self._emit(f"Caching remote stream for: {file_name}")
            self._real_media = RealRemoteMedia(self._emit)
            self._cached_file = file_name
        else:
            logger.debug(f"Remote cache hit for {file_name!r}")
            self._emit(f"Using cached version for: {file_name}")

        self._real_media.play_stream(file_name)
