"""Tests for text measurement and thresholded drawing."""

import logging
from pathlib import Path
from unittest import mock

import pytest
from PIL import Image, ImageFont

from halldisplay.epaper.palette import BLACK, RED, WHITE
from halldisplay.rendering import text as text_module
from halldisplay.rendering.text import (
    FontFace,
    draw_text,
    draw_text_bottom_right,
    draw_text_right,
    measure_text,
)
from halldisplay.utils.exceptions import FontError


def canvas() -> Image.Image:
    return Image.new("RGB", (200, 80), WHITE)


class TestFontFace:
    """Test cases for FontFace."""

    def test_at_when_same_size_twice_then_cached(self, font: FontFace) -> None:
        """Sized fonts are created once."""
        assert font.at(24) is font.at(24)
        assert font.at(24) is not font.at(36)

    def test_at_when_font_file_missing_then_falls_back_with_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An unreadable font file falls back to the bundled face."""
        face = FontFace(tmp_path / "missing.ttf")

        with caplog.at_level(logging.WARNING, logger="halldisplay"):
            loaded = face.at(20)

        assert loaded is not None
        assert "Failed to load font" in caplog.text

    def test_at_when_pillow_lacks_freetype_then_font_error(self, font: FontFace) -> None:
        """A fixed-size bitmap fallback font is refused with a clear error."""
        bitmap_font = mock.MagicMock(spec=ImageFont.ImageFont)

        with mock.patch.object(ImageFont, "load_default", return_value=bitmap_font):
            with pytest.raises(FontError, match="FreeType"):
                font.at(24)


class TestMeasureText:
    """Test cases for measure_text."""

    def test_measure_text_when_longer_text_then_wider(self, font: FontFace) -> None:
        """Width grows with content."""
        short_width, _ = measure_text(font, "1", 36)
        long_width, _ = measure_text(font, "1111", 36)

        assert long_width > short_width > 0

    def test_measure_text_when_different_glyphs_then_same_height(self, font: FontFace) -> None:
        """Height is the line height, independent of the characters."""
        _, low_height = measure_text(font, "ace", 36)
        _, tall_height = measure_text(font, "Tg", 36)

        assert low_height == tall_height > 0

    def test_measure_text_when_empty_then_zero_width(self, font: FontFace) -> None:
        """Empty strings have no width but keep the line height."""
        width, height = measure_text(font, "", 24)

        assert width == 0
        assert height > 0


class TestDrawText:
    """Test cases for draw_text and its aligned variants."""

    def test_draw_text_when_drawn_then_only_full_color_pixels(self, font: FontFace) -> None:
        """Thresholding leaves no anti-aliased shades."""
        image = canvas()

        draw_text(image, "Hello 42°", 5, 5, font, 36)

        colors = {color for _count, color in image.getcolors()}
        assert colors == {WHITE, BLACK}

    def test_draw_text_when_colored_then_uses_that_color(self, font: FontFace) -> None:
        """Text color is applied verbatim."""
        image = canvas()

        draw_text(image, "66", 5, 5, font, 36, RED)

        colors = {color for _count, color in image.getcolors()}
        assert colors == {WHITE, RED}

    def test_draw_text_when_empty_then_canvas_untouched(self, font: FontFace) -> None:
        """Nothing is drawn for an empty string."""
        image = canvas()

        draw_text(image, "", 5, 5, font, 36)

        assert image.getcolors() == [(200 * 80, WHITE)]

    def test_draw_text_when_partly_off_canvas_then_clips(self, font: FontFace) -> None:
        """Text hanging off the canvas is clipped without error."""
        image = canvas()

        draw_text(image, "clipped text", 150, 40, font, 36)

        assert image.size == (200, 80)
        assert BLACK in {color for _count, color in image.getcolors()}

    def test_draw_text_when_drawn_then_ink_starts_near_anchor(self, font: FontFace) -> None:
        """Ink lands to the right of and below the anchor."""
        image = canvas()

        draw_text(image, "H", 40, 20, font, 36)

        left, top, _right, _bottom = Image.eval(image.convert("L"), lambda v: 255 - v).getbbox()
        assert 40 <= left < 60
        assert 20 <= top < 60

    def test_draw_text_right_when_called_then_shifts_by_width(self, font: FontFace) -> None:
        """Right alignment subtracts the measured width."""
        image = canvas()
        width, _ = measure_text(font, "5/20  3pm", 36)

        with mock.patch.object(text_module, "draw_text") as mock_draw:
            draw_text_right(image, "5/20  3pm", 190, 10, font, 36)

        mock_draw.assert_called_once_with(image, "5/20  3pm", 190 - width, 10, font, 36, BLACK)

    def test_draw_text_bottom_right_when_called_then_shifts_by_width_and_height(
        self, font: FontFace
    ) -> None:
        """Bottom-right alignment subtracts both extents."""
        image = canvas()
        width, height = measure_text(font, "36", 24)

        with mock.patch.object(text_module, "draw_text") as mock_draw:
            draw_text_bottom_right(image, "36", 40, 70, font, 24, RED)

        mock_draw.assert_called_once_with(image, "36", 40 - width, 70 - height, font, 24, RED)
