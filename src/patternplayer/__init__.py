"""Pattern Player: a media player composed from structural design patterns."""

__version__ = "0.1.0"

from .models import PlayerConfig
from .orchestration import Orchestrator

__all__ = [
    "Orchestrator",
    "PlayerConfig",
]
