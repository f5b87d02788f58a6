"""Player decorators that stack optional features onto a player.

Each decorator plays its inner player first and then announces its own
feature. Wrapping order therefore equals announcement order: with every
feature enabled a play prints render, play, subtitles, equalizer, watermark.
"""

import logging

import click

from patternplayer.protocols import Emitter, Player

logger = logging.getLogger(__name__)


class PlayerDecorator:
    """Wraps exactly one inner player and forwards play() to it."""

    announcement = ""

    def __init__(self, player: Player, emit: Emitter = click.echo):
        self.inner = player
        self._emit = emit

    def play(self) -> None:
        self.inner.play()
        if self.announcement:
            self._emit(self.announcement)


class SubtitleDecorator(PlayerDecorator):
    announcement = "Subtitles enabled."


class EqualizerDecorator(PlayerDecorator):
    announcement = "Equalizer effect applied."


class WatermarkDecorator(PlayerDecorator):
    announcement = "Watermark applied."


# Wrapping order for feature flags
FEATURE_DECORATORS: tuple[type[PlayerDecorator], ...] = (
    SubtitleDecorator,
    EqualizerDecorator,
    WatermarkDecorator,
)


def apply_features(
    player: Player,
    subtitles: bool = False,
    equalizer: bool = False,
    watermark: bool = False,
    emit: Emitter = click.echo,
) -> Player:
    """
    Wrap a player with the enabled features.

    Subtitles wrap first, then the equalizer, then the watermark, so the
    chain length equals the number of enabled flags.

    Args:
        player: Player to wrap (normally a BasePlayer)
        subtitles: Add SubtitleDecorator
        equalizer: Add EqualizerDecorator
        watermark: Add WatermarkDecorator
        emit: Output sink for the decorators' announcements

    Returns:
        The outermost player of the chain (player itself if nothing is enabled)
    """
    for decorator_cls, enabled in zip(FEATURE_DECORATORS, (subtitles, equalizer, watermark)):
        if enabled:
            player = decorator_cls(player, emit)
            logger.debug(f"Wrapped player with {decorator_cls.__name__}")
    return player


def unwrap(player: Player) -> list[Player]:
    """
    List a player chain from the outermost player down to the base.

    Args:
        player: Outermost player of a chain

    Returns:
        Players in outer-to-inner order; the last item is never a decorator
    """
    chain = [player]
    while isinstance(player, PlayerDecorator):
        player = player.inner
        chain.append(player)
    return chain
