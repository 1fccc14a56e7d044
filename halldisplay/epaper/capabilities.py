"""Panel description for tri-color e-Paper displays."""

from typing import Any

from .utils import row_stride


class DisplayCapabilities:
    """Physical properties of the target panel."""

    def __init__(self, width: int, height: int, supports_red: bool = True) -> None:
        """Initialize display capabilities.

        Args:
            width: Panel width in pixels
            height: Panel height in pixels
            supports_red: Whether the panel shows the chromatic (red) color;
                black/white panels get red content packed as black
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Panel size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.supports_red = supports_red

    def __repr__(self) -> str:
        return (
            f"DisplayCapabilities(width={self.width}, height={self.height}, "
            f"red={self.supports_red})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DisplayCapabilities):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def buffer_size(self) -> int:
        """Size in bytes of one full two-plane frame buffer."""
        return 2 * row_stride(self.width) * self.height

    def to_dict(self) -> dict[str, Any]:
        """Convert capabilities to dictionary.

        Returns:
            Dictionary representation of capabilities
        """
        return {
            "width": self.width,
            "height": self.height,
            "supports_red": self.supports_red,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DisplayCapabilities":
        """Create DisplayCapabilities from dictionary.

        Args:
            data: Dictionary containing capability data

        Returns:
            DisplayCapabilities instance

        Raises:
            ValueError: If required fields are missing
        """
        for field in ("width", "height"):
            if field not in data:
                raise ValueError(f"Missing required field: {field}")

        return cls(
            width=data["width"],
            height=data["height"],
            supports_red=data.get("supports_red", True),
        )


# Waveshare 7.5inch e-Paper (B) V2, black/white/red
WAVESHARE_7IN5B_V2 = DisplayCapabilities(width=800, height=480, supports_red=True)
