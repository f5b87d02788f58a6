"""Player configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from patternplayer.models.enums import RendererKind, SourceType
from patternplayer.utils.persistence import PydanticPersistence


class PlayerConfig(BaseModel):
    """Settings for one run of the player.

    The defaults are the built-in demo configuration: a remote stream of
    ChillBeats.mp3 on the hardware renderer, with subtitles and the
    equalizer enabled.
    """

    source_type: str = Field(
        default="remote",
        description=(
            "Media source backend: local, hls or remote (case-insensitive). "
            "Anything else is loaded as a local file."
        ),
    )
    file_name: str = Field(
        default="ChillBeats.mp3",
        min_length=1,
        description="Media file to load, render and play",
    )
    use_hardware: bool = Field(default=True, description="Render with hardware instead of software")

    # Player features, applied in this order
    enable_subtitles: bool = Field(default=True, description="Wrap the player with subtitles")
    enable_equalizer: bool = Field(default=True, description="Wrap the player with the equalizer")
    enable_watermark: bool = Field(default=False, description="Wrap the player with a watermark")

    @property
    def resolved_source(self) -> SourceType:
        """Source backend for source_type, with the local fallback applied."""
        return SourceType.from_tag(self.source_type)

    @property
    def renderer_kind(self) -> RendererKind:
        return RendererKind.from_flag(self.use_hardware)

    @property
    def is_remote(self) -> bool:
        """Check if the remote stream proxy should be exercised."""
        return self.resolved_source is SourceType.REMOTE

    def feature_flags(self) -> tuple[bool, bool, bool]:
        """Decorator flags in wrapping order: (subtitles, equalizer, watermark)."""
        return self.enable_subtitles, self.enable_equalizer, self.enable_watermark

    @classmethod
    def load(cls, path: Path) -> "PlayerConfig":
        """
        Load configuration from a JSON file.

        Args:
            path: Path to the config file

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is empty or has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json(path, cls)

    def save(self, path: Path) -> None:
        """Save configuration to a JSON file (existing file is backed up)."""
        PydanticPersistence.save_json(self, path)
