"""Small helpers shared by the e-Paper buffer code."""


def row_stride(width: int) -> int:
    """Bytes per packed row: one bit per pixel, rounded up to whole bytes."""
    return (width + 7) // 8
