"""CLI commands for patternplayer."""

from .config import config

__all__ = ["config"]
