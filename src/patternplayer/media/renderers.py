"""Renderers: the implementation half of the player/renderer bridge.

A BasePlayer holds any Renderer, so switching between hardware and software
rendering never touches player logic.
"""

import logging

import click

from patternplayer.models.enums import RendererKind
from patternplayer.protocols import Emitter, Renderer

logger = logging.getLogger(__name__)


class HardwareRenderer:
    """Renders on the GPU / hardware decoder."""

    kind = RendererKind.HARDWARE

    def __init__(self, emit: Emitter = click.echo):
        self._emit = emit

    def render(self, file_name: str) -> None:
        self._emit(f"Rendering {file_name} using Hardware.")


class SoftwareRenderer:
    """Renders on the CPU."""

    kind = RendererKind.SOFTWARE

    def __init__(self, emit: Emitter = click.echo):
        self._emit = emit

    def render(self, file_name: str) -> None:
        self._emit(f"Rendering {file_name} using software mode.")


_RENDERERS: dict[RendererKind, type] = {
    cls.kind: cls for cls in (HardwareRenderer, SoftwareRenderer)
}


def create_renderer(use_hardware: bool, emit: Emitter = click.echo) -> Renderer:
    """
    Select a renderer from the hardware rendering flag.

    Args:
        use_hardware: True for HardwareRenderer, False for SoftwareRenderer
        emit: Output sink for the renderer's announcements
    """
    renderer = _RENDERERS[RendererKind.from_flag(use_hardware)](emit)
    logger.debug(f"Selected renderer {type(renderer).__name__} ({renderer.kind.value})")
    return renderer
