"""Tests for Region class."""

from halldisplay.epaper.region import Region


class TestRegion:
    """Test suite for Region class."""

    def test_init_when_valid_parameters_then_creates_instance(self) -> None:
        """Test initialization with valid parameters."""
        # Arrange & Act
        region = Region(x=50, y=150, width=700, height=200)

        # Assert
        assert region.x == 50
        assert region.y == 150
        assert region.width == 700
        assert region.height == 200

    def test_repr_when_called_then_returns_string_representation(self) -> None:
        """Test string representation of Region."""
        # Arrange
        region = Region(x=10, y=20, width=100, height=200)

        # Act
        result = repr(region)

        # Assert
        assert result == "Region(x=10, y=20, width=100, height=200)"

    def test_edges_when_computed_then_exclusive(self) -> None:
        """Test right and bottom are one past the last pixel."""
        # Arrange
        region = Region(x=50, y=150, width=700, height=200)

        # Act & Assert
        assert region.right == 750
        assert region.bottom == 350

    def test_fits_within_when_inside_canvas_then_returns_true(self) -> None:
        """Test a region touching the canvas edges still fits."""
        # Arrange
        region = Region(x=100, y=280, width=700, height=200)

        # Act & Assert
        assert region.fits_within(800, 480) is True

    def test_fits_within_when_overflowing_or_negative_then_returns_false(self) -> None:
        """Test regions sticking out of the canvas."""
        # Act & Assert
        assert Region(x=101, y=0, width=700, height=200).fits_within(800, 480) is False
        assert Region(x=0, y=281, width=700, height=200).fits_within(800, 480) is False
        assert Region(x=-1, y=0, width=10, height=10).fits_within(800, 480) is False
