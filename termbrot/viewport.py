"""Viewport state: which window of the complex plane is on screen."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Constants
# =============================================================================

DEFAULT_CENTER_X = -0.75
DEFAULT_CENTER_Y = 0.0
DEFAULT_ZOOM = 2.5
DEFAULT_MAX_ITER = 100

# Pan distance as a fraction of the visible real-axis span
PAN_FACTOR = 0.2
ZOOM_FACTOR = 2
ITER_STEP = 50
MIN_ITER = 50


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Preset:
    """A named view of a well-known region of the set."""
    name: str
    center_x: float
    center_y: float
    zoom: float
    max_iter: int


PRESETS = [
    Preset("Seahorse Valley", -0.75, -0.1, 0.05, 300),
    Preset("Elephant Valley", 0.28, 0.008, 0.01, 300),
    Preset("Double Spiral", -0.0452, -0.9868, 0.02, 300),
    Preset("Mini Mandelbrot", -1.768, 0.001, 0.02, 500),
    Preset("Lightning", -0.170337, -1.0651, 0.005, 500),
]


# =============================================================================
# Viewport
# =============================================================================

@dataclass
class Viewport:
    """Mutable view state.

    `zoom` is the width of the visible real-axis span, so smaller values are
    more magnified. Every mutator except `toggle_color` and `select_preset`
    leaves `active_preset` cleared.
    """
    center_x: float = DEFAULT_CENTER_X
    center_y: float = DEFAULT_CENTER_Y
    zoom: float = DEFAULT_ZOOM
    max_iter: int = DEFAULT_MAX_ITER
    color_mode: bool = True
    active_preset: Optional[str] = None

    def __post_init__(self):
        if not (self.zoom > 0 and math.isfinite(self.zoom)):
            raise ValueError(f"zoom must be positive and finite, got {self.zoom}")
        if self.max_iter < MIN_ITER:
            raise ValueError(f"max_iter must be at least {MIN_ITER}, got {self.max_iter}")

    def pan(self, direction: Direction):
        step = self.zoom * PAN_FACTOR
        # Row 0 of the frame is the smallest imaginary part, so "up" on
        # screen moves toward smaller y.
        if direction is Direction.UP:
            self.center_y -= step
        elif direction is Direction.DOWN:
            self.center_y += step
        elif direction is Direction.LEFT:
            self.center_x -= step
        elif direction is Direction.RIGHT:
            self.center_x += step
        else:
            raise ValueError(f"Unknown pan direction: {direction}")
        self.active_preset = None

    def zoom_in(self):
        # A step that would underflow to 0 is dropped; zoom stays positive.
        zoom = self.zoom / ZOOM_FACTOR
        if zoom > 0:
            self.zoom = zoom
        self.active_preset = None

    def zoom_out(self):
        zoom = self.zoom * ZOOM_FACTOR
        if math.isfinite(zoom):
            self.zoom = zoom
        self.active_preset = None

    def increase_iter(self):
        self.max_iter += ITER_STEP
        self.active_preset = None

    def decrease_iter(self):
        self.max_iter = max(MIN_ITER, self.max_iter - ITER_STEP)
        self.active_preset = None

    def toggle_color(self):
        self.color_mode = not self.color_mode

    def select_preset(self, index: int):
        """Jump to preset `index`, counted from 1."""
        if not 1 <= index <= len(PRESETS):
            raise ValueError(f"Preset index must be 1-{len(PRESETS)}, got {index}")
        preset = PRESETS[index - 1]
        self.center_x = preset.center_x
        self.center_y = preset.center_y
        self.zoom = preset.zoom
        self.max_iter = preset.max_iter
        self.active_preset = preset.name

    def reset(self):
        self.center_x = DEFAULT_CENTER_X
        self.center_y = DEFAULT_CENTER_Y
        self.zoom = DEFAULT_ZOOM
        self.max_iter = DEFAULT_MAX_ITER
        self.active_preset = None
