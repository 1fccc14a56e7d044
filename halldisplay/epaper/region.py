"""Region model for e-Paper layouts."""


class Region:
    """Represents a rectangular region on the canvas."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        """Initialize a region.

        Args:
            x: X-coordinate of top-left corner
            y: Y-coordinate of top-left corner
            width: Width of region in pixels
            height: Height of region in pixels
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return f"Region(x={self.x}, y={self.y}, width={self.width}, height={self.height})"

    @property
    def right(self) -> int:
        """First x-coordinate past the region."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First y-coordinate past the region."""
        return self.y + self.height

    def fits_within(self, width: int, height: int) -> bool:
        """Check that the region lies entirely inside a width x height canvas."""
        return self.x >= 0 and self.y >= 0 and self.right <= width and self.bottom <= height
