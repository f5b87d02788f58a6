"""Unit tests for the configuration model and enums."""

import pytest
from pydantic import ValidationError

from patternplayer.exceptions import ConfigFileInvalidError, ConfigValidationError
from patternplayer.models import PlayerConfig, RendererKind, SourceType


class TestSourceType:
    """Test source type resolution."""

    @pytest.mark.unit
    @pytest.mark.parametrize("tag,expected", [
        ("local", SourceType.LOCAL),
        ("LOCAL", SourceType.LOCAL),
        ("hls", SourceType.HLS),
        ("Hls", SourceType.HLS),
        ("remote", SourceType.REMOTE),
        ("REMOTE", SourceType.REMOTE),
    ])
    def test_from_tag(self, tag, expected):
        assert SourceType.from_tag(tag) is expected

    @pytest.mark.unit
    def test_unknown_falls_back_to_local(self):
        assert SourceType.from_tag("youtube") is SourceType.LOCAL

    @pytest.mark.unit
    @pytest.mark.parametrize("tag", [" remote ", "remote ", "hls\n", " HLS", "\tlocal"])
    def test_padded_tags_are_not_trimmed(self, tag):
        """Test surrounding whitespace makes a tag unknown, so it resolves to LOCAL."""
        assert SourceType.from_tag(tag) is SourceType.LOCAL

    @pytest.mark.unit
    def test_renderer_kind_from_flag(self):
        assert RendererKind.from_flag(True) is RendererKind.HARDWARE
        assert RendererKind.from_flag(False) is RendererKind.SOFTWARE


class TestPlayerConfig:
    """Test PlayerConfig model."""

    @pytest.mark.unit
    def test_defaults_match_demo_configuration(self, default_config):
        assert default_config.source_type == "remote"
        assert default_config.file_name == "ChillBeats.mp3"
        assert default_config.use_hardware is True
        assert default_config.feature_flags() == (True, True, False)

    @pytest.mark.unit
    def test_resolved_source(self):
        assert PlayerConfig(source_type="HLS").resolved_source is SourceType.HLS
        assert PlayerConfig(source_type="tape").resolved_source is SourceType.LOCAL

    @pytest.mark.unit
    def test_is_remote_is_case_insensitive(self):
        assert PlayerConfig(source_type="ReMoTe").is_remote
        assert not PlayerConfig(source_type="local").is_remote

    @pytest.mark.unit
    def test_renderer_kind(self):
        assert PlayerConfig(use_hardware=False).renderer_kind is RendererKind.SOFTWARE

    @pytest.mark.unit
    def test_empty_file_name_rejected(self):
        with pytest.raises(ValidationError):
            PlayerConfig(file_name="")

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir):
        path = temp_dir / "nested" / "player.json"
        config = PlayerConfig(source_type="hls", file_name="live.m3u8", enable_watermark=True)

        config.save(path)
        assert PlayerConfig.load(path) == config

    @pytest.mark.unit
    def test_save_backs_up_existing_file(self, temp_dir):
        path = temp_dir / "player.json"
        PlayerConfig(file_name="first.mp3").save(path)
        PlayerConfig(file_name="second.mp3").save(path)

        backup = temp_dir / "player.json.bak"
        assert backup.exists()
        assert "first.mp3" in backup.read_text()
        assert PlayerConfig.load(path).file_name == "second.mp3"
        assert not (temp_dir / "player.json.tmp").exists()

    @pytest.mark.unit
    def test_partial_file_uses_defaults(self, config_file):
        path = config_file('{"source_type": "local"}')
        config = PlayerConfig.load(path)
        assert config.source_type == "local"
        assert config.file_name == "ChillBeats.mp3"

    @pytest.mark.unit
    def test_load_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            PlayerConfig.load(temp_dir / "absent.json")

    @pytest.mark.unit
    def test_load_empty_file(self, config_file):
        path = config_file("   ")
        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PlayerConfig.load(path)
        assert exc_info.value.user_message == "Configuration file is empty"

    @pytest.mark.unit
    def test_load_invalid_json(self, config_file):
        path = config_file('{"source_type": "hls",}')
        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PlayerConfig.load(path)
        assert exc_info.value.file_path == str(path)

    @pytest.mark.unit
    def test_load_invalid_value(self, config_file):
        path = config_file('{"enable_watermark": "sometimes"}')
        with pytest.raises(ConfigValidationError) as exc_info:
            PlayerConfig.load(path)

        error = exc_info.value
        assert error.field == "enable_watermark"
        assert error.value == "sometimes"
        assert "true or false" in error.recovery_hint

    @pytest.mark.unit
    def test_load_multiple_invalid_values(self, config_file):
        path = config_file('{"file_name": "", "use_hardware": "gpu"}')
        with pytest.raises(ConfigValidationError) as exc_info:
            PlayerConfig.load(path)
        assert exc_info.value.field == "multiple fields"
        assert "2 validation errors" in exc_info.value.user_message
