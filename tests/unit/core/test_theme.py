"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import pytest
import tmexclude.core.theme as theme_module
from rich.theme import Theme
from tmexclude.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_rich_theme,
    get_theme,
    load_theme,
)


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.excluded == "#c1ff62"
        assert colors.failed == "#f53263"

    def test_short_hex_accepted(self) -> None:
        """Three-digit hex codes are valid."""
        assert ThemeColors(skipped="#abc").skipped == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(path="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nsize = "#aabbcc"\n')

        assert _load_toml_colors(theme_file) == {"text": "#000000", "size": "#aabbcc"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files yield None."""
        assert _load_toml_colors(tmp_path / "missing.toml") is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Unparseable files yield None."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("invalid toml [[[")

        assert _load_toml_colors(theme_file) is None

    def test_non_string_values_dropped(self, tmp_path: Path) -> None:
        """Only string values are kept."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nmuted = 3\n')

        assert _load_toml_colors(theme_file) == {"text": "#000000"}


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_loads_bundled_theme(self, config_home: Path) -> None:
        """Loads theme from bundled data file."""
        colors = load_theme()

        assert colors.header == "#69B9A1"
        assert colors.already_excluded == "#0e8ac8"

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled theme values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nexcluded = "#ff0000"\n')

        with patch("tmexclude.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.excluded == "#ff0000"
        assert colors.text == "#ffffff"

    def test_invalid_user_colors_fall_back_to_defaults(self, tmp_path: Path) -> None:
        """An invalid merged theme falls back to the defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nexcluded = "red"\n')

        with patch("tmexclude.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme and get_theme."""

    def test_returns_rich_theme_with_outcome_styles(self) -> None:
        """Every outcome has a style."""
        theme = get_rich_theme(ThemeColors())

        assert isinstance(theme, Theme)
        for name in ("excluded", "already_excluded", "skipped", "failed", "path", "size"):
            assert name in theme.styles

    def test_get_theme_caches(self) -> None:
        """get_theme loads once."""
        with patch.object(theme_module, "_cached_theme", None):
            first = get_theme()
            second = get_theme()

        assert first is second
