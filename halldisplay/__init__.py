"""halldisplay - weather and task status screens for tri-color e-Paper panels.

Turns a forecast series, the current conditions and a task list into an
800x480 white/black/red image and the packed frame buffer the panel
controller consumes.
"""

__version__ = "0.3.0"
__author__ = "halldisplay contributors"
__description__ = "Weather and task status screens for tri-color e-Paper panels"

__all__ = [
    "__author__",
    "__description__",
    "__version__",
]
