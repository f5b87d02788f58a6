"""Media sources, renderers and remote streaming."""

from .remote import RealRemoteMedia, RemoteMediaProxy
from .renderers import HardwareRenderer, SoftwareRenderer, create_renderer
from .sources import HLSStreamPlayer, LocalFilePlayer, RemoteAPIPlayer, create_source

__all__ = [
    # Sources
    "HLSStreamPlayer",
    "LocalFilePlayer",
    "RemoteAPIPlayer",
    "create_source",
    # Renderers
    "HardwareRenderer",
    "SoftwareRenderer",
    "create_renderer",
    # Remote
    "RealRemoteMedia",
    "RemoteMediaProxy",
]
