"""Canvas rendering: text, lines, the forecast graph and the full-screen layout."""

from .graph import render_graph
from .layout import describe_due_date, format_clock, render
from .text import FontFace, measure_text

__all__ = [
    "FontFace",
    "describe_due_date",
    "format_clock",
    "measure_text",
    "render",
    "render_graph",
]
