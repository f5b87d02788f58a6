"""Enumerations for the media player."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class SourceType(str, Enum):
    """Media source backends."""

    LOCAL = "local"  # File on local disk (also the fallback)
    HLS = "hls"  # HTTP live stream
    REMOTE = "remote"  # Remote media API

    @classmethod
    def from_tag(cls, tag: str) -> "SourceType":
        """
        Resolve a source-type tag, case-insensitively.

        Unrecognized tags fall back to LOCAL rather than being rejected.

        Args:
            tag: Source type as configured (e.g. "remote", "HLS", "ftp")

        Returns:
            The matching SourceType, or SourceType.LOCAL
        """
        try:
            return cls(tag.lower())
        except ValueError:
            logger.debug(f"Unknown source type {tag!r}, falling back to {cls.LOCAL.value}")
            return cls.LOCAL


class RendererKind(str, Enum):
    """Rendering implementations."""

    HARDWARE = "hardware"
    SOFTWARE = "software"

    @classmethod
    def from_flag(cls, use_hardware: bool) -> "RendererKind":
        """Map the hardware rendering flag to a renderer kind."""
        return cls.HARDWARE if use_hardware else cls.SOFTWARE
