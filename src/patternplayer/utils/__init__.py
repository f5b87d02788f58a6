"""Utility helpers."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
