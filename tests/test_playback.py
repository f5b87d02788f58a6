"""Tests for the base player and the decorator chain."""

from itertools import product
from unittest.mock import Mock

import pytest

from patternplayer.media import HardwareRenderer, SoftwareRenderer
from patternplayer.playback import (
    BasePlayer,
    EqualizerDecorator,
    PlayerDecorator,
    SubtitleDecorator,
    WatermarkDecorator,
    apply_features,
    unwrap,
)
from patternplayer.protocols import Player, Renderer

ANNOUNCEMENTS = ("Subtitles enabled.", "Equalizer effect applied.", "Watermark applied.")


@pytest.fixture
def base_player(emit):
    return BasePlayer("song.mp3", HardwareRenderer(emit), emit)


@pytest.mark.unit
class TestBasePlayer:
    """Test BasePlayer playback."""

    def test_renders_then_plays(self, base_player, lines):
        base_player.play()
        assert lines == ["Rendering song.mp3 using Hardware.", "Playing song.mp3..."]

    def test_renderer_is_swappable(self, lines, emit):
        """Test the same player logic works with either renderer."""
        BasePlayer("clip.mp4", SoftwareRenderer(emit), emit).play()
        assert lines[0] == "Rendering clip.mp4 using software mode."
        assert lines[1] == "Playing clip.mp4..."

    def test_calls_renderer_with_file_name(self, emit):
        renderer = Mock(spec=Renderer)
        BasePlayer("a.mp3", renderer, emit).play()
        renderer.render.assert_called_once_with("a.mp3")

    def test_satisfies_protocol(self, base_player):
        assert isinstance(base_player, Player)


@pytest.mark.unit
class TestDecorators:
    """Test individual decorators."""

    def test_decorator_plays_inner_first(self, lines, emit):
        inner = Mock(spec=Player)
        inner.play.side_effect = lambda: lines.append("inner")

        SubtitleDecorator(inner, emit).play()

        inner.play.assert_called_once_with()
        assert lines == ["inner", "Subtitles enabled."]

    def test_all_three_in_order(self, base_player, lines, emit):
        player = WatermarkDecorator(EqualizerDecorator(SubtitleDecorator(base_player, emit), emit), emit)
        player.play()

        assert lines == [
            "Rendering song.mp3 using Hardware.",
            "Playing song.mp3...",
            "Subtitles enabled.",
            "Equalizer effect applied.",
            "Watermark applied.",
        ]

    def test_bare_decorator_only_forwards(self, base_player, lines, emit):
        PlayerDecorator(base_player, emit).play()
        assert lines == ["Rendering song.mp3 using Hardware.", "Playing song.mp3..."]


@pytest.mark.unit
class TestApplyFeatures:
    """Test stacking decorators from feature flags."""

    def test_no_features_returns_base(self, base_player, emit):
        assert apply_features(base_player, emit=emit) is base_player

    @pytest.mark.parametrize("flags", list(product([False, True], repeat=3)))
    def test_announcement_order_matches_flags(self, flags, base_player, lines, emit):
        """Test every flag subset announces in subtitle, equalizer, watermark order."""
        subtitles, equalizer, watermark = flags
        player = apply_features(
            base_player, subtitles=subtitles, equalizer=equalizer, watermark=watermark, emit=emit
        )
        player.play()

        expected = [text for text, enabled in zip(ANNOUNCEMENTS, flags) if enabled]
        assert lines[:2] == ["Rendering song.mp3 using Hardware.", "Playing song.mp3..."]
        assert lines[2:] == expected

    @pytest.mark.parametrize("flags", list(product([False, True], repeat=3)))
    def test_chain_length_equals_enabled_flags(self, flags, base_player, emit):
        subtitles, equalizer, watermark = flags
        player = apply_features(
            base_player, subtitles=subtitles, equalizer=equalizer, watermark=watermark, emit=emit
        )

        chain = unwrap(player)
        assert len(chain) == sum(flags) + 1
        assert chain[-1] is base_player

    def test_outermost_is_last_applied(self, base_player, emit):
        player = apply_features(base_player, subtitles=True, equalizer=True, emit=emit)
        chain = unwrap(player)
        assert [type(p) for p in chain] == [EqualizerDecorator, SubtitleDecorator, BasePlayer]
