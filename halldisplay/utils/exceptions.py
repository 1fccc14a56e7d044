"""Render-pipeline exceptions."""


class HallDisplayError(Exception):
    """Base exception for all halldisplay errors."""


class RenderError(HallDisplayError):
    """Exception raised when a render pass cannot produce an image.

    A render error aborts the whole pass; no partial image or buffer is
    returned. Callers should skip the display update rather than push
    half-drawn content to the panel.
    """


class InsufficientDataError(RenderError):
    """Exception raised when a forecast series is too short to plot."""

    def __init__(self, sample_count: int, required: int = 2) -> None:
        """Initialize InsufficientDataError.

        Args:
            sample_count: Number of samples that were provided
            required: Minimum number of samples needed
        """
        super().__init__(
            f"Forecast needs at least {required} samples, got {sample_count}"
        )
        self.sample_count = sample_count
        self.required = required


class InconsistentStateError(RenderError):
    """Exception raised when derived forecast data is missing an expected entry."""


class FontError(RenderError):
    """Exception raised when no scalable font is available for text rendering."""
