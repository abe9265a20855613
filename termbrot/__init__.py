"""Interactive Mandelbrot set explorer for character terminals."""

import logging

from .escape import iterate, iterate_grid
from .render import render
from .viewport import PRESETS, Preset, Viewport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["PRESETS", "Preset", "Viewport", "iterate", "iterate_grid", "render"]
