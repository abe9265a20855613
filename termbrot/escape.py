"""Escape-time iteration of z -> z^2 + c."""

from typing import Tuple

import numpy as np


ESCAPE_RADIUS_SQ = 4.0


def iterate(cx: float, cy: float, max_iter: int) -> Tuple[int, float, float]:
    """Iterate a single point and return (n, zx, zy) at termination.

    The real and imaginary parts are tracked separately, since
    (zx + zy*i)^2 = (zx^2 - zy^2) + (2*zx*zy)*i. The orbit point is returned
    along with the count because smooth coloring needs its magnitude.
    """
    if max_iter <= 0:
        raise ValueError(f"max_iter must be positive, got {max_iter}")

    zx = 0.0
    zy = 0.0
    n = 0
    while zx * zx + zy * zy <= ESCAPE_RADIUS_SQ and n < max_iter:
        tmp = zx * zx - zy * zy + cx
        zy = 2 * zx * zy + cy
        zx = tmp
        n += 1
    return n, zx, zy


def iterate_grid(cx: np.ndarray, cy: np.ndarray, max_iter: int):
    """Vectorized `iterate` over arrays of coordinates.

    `cx` and `cy` must broadcast to the same shape. Each element stops
    updating once it escapes, so every element matches what `iterate`
    returns for the same point.
    """
    if max_iter <= 0:
        raise ValueError(f"max_iter must be positive, got {max_iter}")

    cx, cy = np.broadcast_arrays(
        np.asarray(cx, dtype=np.float64), np.asarray(cy, dtype=np.float64)
    )
    zx = np.zeros(cx.shape, dtype=np.float64)
    zy = np.zeros(cx.shape, dtype=np.float64)
    n = np.zeros(cx.shape, dtype=np.int64)

    # Orbits of far-away points overflow to inf/nan; those compare False
    # against the radius and drop out like any other escape.
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(max_iter):
            active = zx * zx + zy * zy <= ESCAPE_RADIUS_SQ
            if not active.any():
                break
            ax = zx[active]
            ay = zy[active]
            zx[active] = ax * ax - ay * ay + cx[active]
            zy[active] = 2 * ax * ay + cy[active]
            n[active] += 1

    return n, zx, zy
