"""Data models for the media player."""

from .config import PlayerConfig
from .enums import RendererKind, SourceType
from .playlist import Playlist, Song

__all__ = [
    "PlayerConfig",
    # Playlist tree
    "Playlist",
    "Song",
    # Enums
    "RendererKind",
    "SourceType",
]
