"""Path types and the grid-to-image pixel mapping for path points."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Sequence, Tuple

import numpy as np

from .errors import PathOutOfBounds

logger = logging.getLogger(__name__)

# (x, y) in Cartesian grid coordinates, not image coordinates
Point2D = Tuple[float, float]
Path2D = Sequence[Point2D]
PathSet = Sequence[Path2D]


class OutOfBoundsPolicy(Enum):
    """What to do with a path point that falls outside the raster."""
    RAISE = "raise"
    SKIP = "skip"
    CLAMP = "clamp"


def to_pixel(point: Point2D, width: int, height: int) -> tuple[int, int]:
    """Map a Cartesian point to an image ``(row, col)``.

    Coordinates are truncated toward zero; the Y axis is flipped because
    images have their origin at the top-left. No bounds check is done.
    """

    col = int(point[0])
    row = int(point[1])
    return height - row - 1, col


def path_pixels(
    path: Path2D,
    width: int,
    height: int,
    policy: OutOfBoundsPolicy = OutOfBoundsPolicy.RAISE,
) -> tuple[np.ndarray, np.ndarray]:
    """Image row/column index arrays for every drawable point of ``path``.

    All points are checked before anything is returned, so a RAISE leaves
    the caller's buffer untouched.
    """

    rows: list[int] = []
    cols: list[int] = []
    for point in path:
        fx, fy = float(point[0]), float(point[1])
        finite = math.isfinite(fx) and math.isfinite(fy)
        x, y = (int(fx), int(fy)) if finite else (None, None)
        if finite and 0 <= x < width and 0 <= y < height:
            row, col = to_pixel(point, width, height)
        elif policy is OutOfBoundsPolicy.RAISE:
            raise PathOutOfBounds(
                f"Path point {tuple(point)} maps to cell ({x}, {y}) outside the {width}x{height} grid.",
                point=tuple(point),
                pixel=(height - y - 1, x) if finite else None,
                shape=(height, width),
            )
        elif policy is OutOfBoundsPolicy.SKIP:
            logger.warning(f"Skipping path point {tuple(point)} outside the {width}x{height} grid")
            continue
        else:
            if math.isnan(fx) or math.isnan(fy):
                raise PathOutOfBounds(
                    f"Path point {tuple(point)} has no position to clamp.",
                    point=tuple(point),
                    shape=(height, width),
                )
            # clamping before truncation keeps +-inf representable
            x = int(min(max(fx, 0.0), width - 1))
            y = int(min(max(fy, 0.0), height - 1))
            logger.warning(f"Clamping path point {tuple(point)} to cell ({x}, {y})")
            row, col = height - y - 1, x
        rows.append(row)
        cols.append(col)
    return np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp)
