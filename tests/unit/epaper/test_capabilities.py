"""Tests for DisplayCapabilities."""

import pytest

from halldisplay.epaper.capabilities import WAVESHARE_7IN5B_V2, DisplayCapabilities


class TestDisplayCapabilities:
    """Test suite for DisplayCapabilities."""

    def test_init_when_non_positive_size_then_raises(self) -> None:
        """Test panels must have a positive size."""
        with pytest.raises(ValueError, match="positive"):
            DisplayCapabilities(width=0, height=480)

    def test_buffer_size_when_default_panel_then_96000_bytes(self) -> None:
        """Test the 7.5 inch panel buffer size."""
        assert WAVESHARE_7IN5B_V2.buffer_size == 96000

    def test_buffer_size_when_ragged_width_then_rounds_rows_up(self) -> None:
        """Test widths that are not a multiple of 8."""
        assert DisplayCapabilities(width=10, height=3).buffer_size == 12

    def test_to_dict_when_round_tripped_then_equal(self) -> None:
        """Test dictionary conversion preserves every field."""
        # Arrange
        capabilities = DisplayCapabilities(width=400, height=300, supports_red=False)

        # Act
        result = DisplayCapabilities.from_dict(capabilities.to_dict())

        # Assert
        assert result == capabilities
        assert result.supports_red is False
        assert "width=400" in repr(result)

    def test_from_dict_when_optional_fields_missing_then_defaults(self) -> None:
        """Test red support defaults to a tri-color panel."""
        result = DisplayCapabilities.from_dict({"width": 800, "height": 480})

        assert result == WAVESHARE_7IN5B_V2

    def test_from_dict_when_height_missing_then_raises(self) -> None:
        """Test required fields are enforced."""
        with pytest.raises(ValueError, match="height"):
            DisplayCapabilities.from_dict({"width": 800})
