"""Frame rendering: viewport + terminal geometry -> text buffer."""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .colors import iteration_to_char, iteration_to_color
from .escape import iterate_grid
from .viewport import Viewport


RESET = "\x1b[0m"
INVERSE = "\x1b[7m"
KEY_HINT = "q r c +-=[] 1-5 arrows"


@dataclass(frozen=True)
class ViewBounds:
    """Window of the complex plane covered by a frame."""
    x_min: float
    x_max: float
    y_min: float
    y_max: float


def clamp_size(width: int, height: int) -> Tuple[int, int]:
    return max(1, width), max(1, height)


def view_bounds(viewport: Viewport, width: int, height: int) -> ViewBounds:
    """Compute the visible window for a `width` x `height` cell grid.

    Terminal cells are roughly twice as tall as wide, so the imaginary span
    is stretched by the inverse of width / (height * 2).
    """
    width, height = clamp_size(width, height)
    aspect = width / (height * 2)
    half_w = viewport.zoom / 2
    half_h = viewport.zoom / (2 * aspect)
    return ViewBounds(
        x_min=viewport.center_x - half_w,
        x_max=viewport.center_x + half_w,
        y_min=viewport.center_y - half_h,
        y_max=viewport.center_y + half_h,
    )


def cell_axes(bounds: ViewBounds, width: int, height: int):
    """Real coordinate of each column and imaginary coordinate of each row."""
    xs = bounds.x_min + (np.arange(width) / width) * (bounds.x_max - bounds.x_min)
    ys = bounds.y_min + (np.arange(height) / height) * (bounds.y_max - bounds.y_min)
    return xs, ys


def render_frame(viewport: Viewport, width: int, height: int) -> str:
    """Render the fractal grid, one newline-terminated line per row."""
    width, height = clamp_size(width, height)
    bounds = view_bounds(viewport, width, height)
    xs, ys = cell_axes(bounds, width, height)

    cx, cy = np.meshgrid(xs, ys)
    counts, zxs, zys = iterate_grid(cx, cy, viewport.max_iter)
    max_iter = viewport.max_iter

    lines: List[str] = []
    for row in range(height):
        cells = []
        for col in range(width):
            n = int(counts[row, col])
            if viewport.color_mode:
                r, g, b = iteration_to_color(
                    n, max_iter, float(zxs[row, col]), float(zys[row, col])
                )
                cells.append(f"\x1b[48;2;{r};{g};{b}m ")
            else:
                cells.append(iteration_to_char(n, max_iter))
        if viewport.color_mode:
            cells.append(RESET)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def status_bar(viewport: Viewport, width: int) -> str:
    """One inverted line: position, zoom, iterations, mode, preset, keys."""
    width = max(1, width)
    mode = "COLOR" if viewport.color_mode else "ASCII"
    preset = f" [{viewport.active_preset}]" if viewport.active_preset else ""
    info = (
        f" ({viewport.center_x:.6f}, {viewport.center_y:.6f})"
        f" z:{viewport.zoom:.2e} i:{viewport.max_iter} {mode}{preset}"
        f"  {KEY_HINT}"
    )
    return f"{INVERSE}{info[:width].ljust(width)}{RESET}"


def render(viewport: Viewport, width: int, height: int) -> str:
    """Full screen contents: the frame followed by the status bar."""
    return render_frame(viewport, width, height) + status_bar(viewport, width)
