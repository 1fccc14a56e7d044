"""Tests for frame buffer packing."""

import logging

import pytest
from PIL import Image

from halldisplay.epaper.packing import buffer_len, pack, split_planes, unpack
from halldisplay.epaper.palette import BLACK, RED, WHITE


def row(*colors: tuple[int, int, int]) -> Image.Image:
    """Single-row image with the given pixel colors."""
    image = Image.new("RGB", (len(colors), 1))
    for x, color in enumerate(colors):
        image.putpixel((x, 0), color)
    return image


class TestBufferLength:
    """Test cases for buffer sizing."""

    @pytest.mark.parametrize(
        ("width", "height", "expected"),
        [(1, 1, 2), (8, 1, 2), (9, 2, 8), (13, 3, 12), (800, 480, 96000)],
    )
    def test_pack_when_any_size_then_length_matches_formula(
        self, width: int, height: int, expected: int
    ) -> None:
        """Length is 2 * ceil(width / 8) * height, including ragged widths."""
        image = Image.new("RGB", (width, height), WHITE)

        assert buffer_len(width, height) == expected
        assert len(pack(image)) == expected


class TestPack:
    """Test cases for pack."""

    def test_pack_when_all_white_then_white_code_everywhere(self) -> None:
        """White sets the bw bit and clears the chromatic bit."""
        assert pack(Image.new("RGB", (8, 1), WHITE)) == bytes([0xFF, 0x00])

    def test_pack_when_black_at_x0_then_msb_cleared(self) -> None:
        """Pixel 0 lives in bit 7."""
        buffer = pack(row(BLACK, *[WHITE] * 7))

        assert buffer == bytes([0x7F, 0x00])

    def test_pack_when_red_at_x1_then_chromatic_bit_6_set(self) -> None:
        """Pixel 1 lives in bit 6 of the chromatic plane."""
        buffer = pack(row(WHITE, RED, *[WHITE] * 6))

        assert buffer == bytes([0xFF, 0x40])

    def test_pack_when_panel_lacks_red_then_red_packed_as_black(self) -> None:
        """Black/white panels show chromatic pixels as black."""
        buffer = pack(row(WHITE, RED, BLACK, *[WHITE] * 5), supports_red=False)

        assert buffer == bytes([0x9F, 0x00])

    def test_pack_when_off_palette_pixel_then_white_code(self) -> None:
        """Stray shades pack as white rather than a corrupt code."""
        buffer = pack(row((128, 128, 128), (254, 0, 0), (1, 0, 0), *[WHITE] * 5))

        assert buffer == bytes([0xFF, 0x00])

    def test_pack_when_width_not_multiple_of_8_then_padding_is_white(self) -> None:
        """Bits past the last pixel of a row hold the white code."""
        buffer = pack(Image.new("RGB", (9, 1), BLACK))

        bw_plane, chromatic_plane = buffer[:2], buffer[2:]
        assert bw_plane == bytes([0x00, 0x7F])
        assert chromatic_plane == bytes([0x00, 0x00])

    def test_pack_when_panel_larger_than_raster_then_rest_is_white(self) -> None:
        """Uncovered panel pixels stay white."""
        buffer = pack(Image.new("RGB", (8, 1), BLACK), width=16, height=2)

        assert len(buffer) == 8
        assert buffer[:4] == bytes([0x00, 0xFF, 0xFF, 0xFF])
        assert buffer[4:] == bytes(4)

    def test_pack_when_panel_smaller_than_raster_then_crops(self) -> None:
        """Raster pixels outside the panel are ignored."""
        buffer = pack(Image.new("RGB", (16, 4), BLACK), width=8, height=1)

        assert buffer == bytes([0x00, 0x00])


class TestSplitAndUnpack:
    """Test cases for split_planes and unpack."""

    def test_split_planes_when_valid_then_returns_halves(self) -> None:
        """The bw plane comes first."""
        assert split_planes(bytes([1, 2, 3, 4]), 8, 2) == (bytes([1, 2]), bytes([3, 4]))

    def test_split_planes_when_wrong_size_then_logs_and_returns_none(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Mismatched buffers are reported."""
        with caplog.at_level(logging.ERROR, logger="halldisplay"):
            assert split_planes(bytes(3), 8, 2) is None

        assert "Invalid buffer size" in caplog.text

    def test_unpack_when_packed_then_restores_palette_image(self) -> None:
        """Unpacking a packed palette image gives the same pixels."""
        image = row(BLACK, RED, WHITE, RED, BLACK, WHITE, WHITE, BLACK, RED, WHITE)

        restored = unpack(pack(image), image.width, image.height)

        assert list(restored.getdata()) == list(image.getdata())

    def test_unpack_when_unassigned_code_then_white(self) -> None:
        """bw bit 0 with chromatic bit 1 decodes as white."""
        restored = unpack(bytes([0x00, 0xFF]), 8, 1)

        assert set(restored.getdata()) == {WHITE}

    def test_unpack_when_wrong_size_then_raises(self) -> None:
        """Buffers of the wrong length are rejected."""
        with pytest.raises(ValueError, match="does not fit"):
            unpack(bytes(5), 8, 1)
