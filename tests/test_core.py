"""Tests for core data structures: colors, errors, config."""

import pytest

from ansi_draw.core.color import Color, ColorMode
from ansi_draw.core.config import DrawConfig
from ansi_draw.core.errors import AnsiDrawError, CoordinateError, NonOrthogonalError, check_cell


class TestColor:
    """Tests for Color class."""

    def test_standard_colors(self) -> None:
        assert Color.BLACK.value == 0
        assert Color.RED.value == 1
        assert Color.WHITE.value == 7
        assert Color.BRIGHT_WHITE.value == 15
        assert Color.RED.mode == ColorMode.INDEXED

    def test_indexed(self) -> None:
        color = Color.indexed(196)
        assert color.mode == ColorMode.INDEXED
        assert color.value == 196
        assert Color.from_256(196) == color

    def test_from_rgb(self) -> None:
        color = Color.from_rgb(255, 128, 64)
        assert color.mode == ColorMode.TRUE_COLOR
        assert color.value == (255, 128, 64)
        assert color.is_true_color

    @pytest.mark.parametrize("index", [-1, 256, True])
    def test_indexed_out_of_range(self, index: int) -> None:
        with pytest.raises(ValueError):
            Color.indexed(index)

    def test_rgb_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color.from_rgb(0, 256, 0)

    def test_coerce(self) -> None:
        assert Color.coerce(4) == Color.BLUE
        assert Color.coerce((1, 2, 3)) == Color.from_rgb(1, 2, 3)
        assert Color.coerce(Color.RED) is Color.RED
        with pytest.raises(ValueError):
            Color.coerce((1, 2))

    def test_to_sgr_fg(self) -> None:
        assert Color.RED.to_sgr_fg() == "38;5;1"
        assert Color.from_256(196).to_sgr_fg() == "38;5;196"
        assert Color.from_rgb(255, 0, 0).to_sgr_fg() == "38;2;255;0;0"

    def test_to_sgr_bg(self) -> None:
        assert Color.BLUE.to_sgr_bg() == "48;5;4"
        assert Color.from_rgb(1, 2, 3).to_sgr_bg() == "48;2;1;2;3"

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Color.RED.value = 2  # type: ignore[misc]


class TestNonOrthogonalError:
    """Tests for the orthogonality error."""

    def test_carries_endpoints(self) -> None:
        err = NonOrthogonalError(0, 1, 2, 3)
        assert err.endpoints == ((0, 1), (2, 3))
        assert "(0, 1) -> (2, 3)" in str(err)

    def test_hierarchy(self) -> None:
        err = NonOrthogonalError(0, 0, 1, 1)
        assert isinstance(err, AnsiDrawError)
        assert isinstance(err, ValueError)


class TestCoordinateError:
    """Tests for negative cell coordinates."""

    def test_check_cell(self) -> None:
        check_cell(0, 0)
        with pytest.raises(CoordinateError) as excinfo:
            check_cell(-1, 3)
        assert (excinfo.value.x, excinfo.value.y) == (-1, 3)
        assert isinstance(excinfo.value, AnsiDrawError)
        assert isinstance(excinfo.value, ValueError)


class TestDrawConfig:
    """Tests for DrawConfig."""

    def test_defaults(self) -> None:
        config = DrawConfig()
        assert config.bottom_row == 9998
        assert (config.default_cols, config.default_rows) == (80, 24)
        assert config.auto_flush is False

    def test_from_env(self) -> None:
        config = DrawConfig.from_env({
            "ANSI_DRAW_BOTTOM_ROW": "499",
            "ANSI_DRAW_DEFAULT_COLS": "132",
            "ANSI_DRAW_AUTO_FLUSH": "yes",
            "ANSI_DRAW_LOG_LEVEL": " debug",
        })
        assert config.bottom_row == 499
        assert config.default_cols == 132
        assert config.default_rows == 24
        assert config.auto_flush is True
        assert config.log_level == "DEBUG"

    def test_from_env_empty(self) -> None:
        assert DrawConfig.from_env({}) == DrawConfig()

    def test_from_env_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANSI_DRAW_DEFAULT_ROWS", "50")
        assert DrawConfig.from_env().default_rows == 50

    @pytest.mark.parametrize("env", [
        {"ANSI_DRAW_BOTTOM_ROW": "bottom"},
        {"ANSI_DRAW_DEFAULT_COLS": "-5"},
        {"ANSI_DRAW_AUTO_FLUSH": "maybe"},
        {"ANSI_DRAW_LOG_LEVEL": "bogus"},
    ])
    def test_from_env_invalid(self, env: dict[str, str]) -> None:
        with pytest.raises(ValueError):
            DrawConfig.from_env(env)
