"""Players and player decorators."""

from .decorators import (
    EqualizerDecorator,
    PlayerDecorator,
    SubtitleDecorator,
    WatermarkDecorator,
    apply_features,
    unwrap,
)
from .player import BasePlayer

__all__ = [
    "BasePlayer",
    # Decorators
    "EqualizerDecorator",
    "PlayerDecorator",
    "SubtitleDecorator",
    "WatermarkDecorator",
    "apply_features",
    "unwrap",
]
