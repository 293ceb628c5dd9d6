"""Building raster buffers from grids.

All functions here are pure with respect to the grid: they only read it.
Buffers are numpy ``uint8`` arrays in image space, shape ``(H, W)`` for
single-channel images and ``(H, W, 3)`` for RGB, with the origin at the
top-left corner.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

import numpy as np

from .errors import DimensionMismatch, PathOutOfBounds
from .grid import Grid, check_2d
from .palettes import DEFAULT_RENDER, PATH_CHANNEL_PAIRS, PATH_LEVEL, PathIndexPolicy, RenderSpec
from .paths import OutOfBoundsPolicy, Path2D, PathSet, path_pixels

logger = logging.getLogger(__name__)


def grid_to_image(cells: np.ndarray, width: int, height: int) -> np.ndarray:
    """Reshape row-major Cartesian samples into image layout.

    ``image[height - row - 1, col] == cells[width * row + col]``
    """

    cells = np.asarray(cells)
    if cells.size != width * height:
        raise DimensionMismatch(
            f"Expected {width * height} cells for a {width}x{height} grid, got {cells.size}.",
            shape=cells.shape,
        )
    return cells.reshape(height, width)[::-1]


def _sample(grid: Grid, query: Callable[[int], float], dtype=float) -> np.ndarray:
    width, height = check_2d(grid)
    count = width * height
    cells = np.fromiter((query(i) for i in range(count)), dtype=dtype, count=count)
    return grid_to_image(cells, width, height)


def occupancy_raster(grid: Grid) -> np.ndarray:
    """Free cells 255, occupied cells 0."""

    occupied = _sample(grid, grid.is_occupied, dtype=bool)
    return np.where(occupied, 0, 255).astype(np.uint8)


def intensity_raster(grid: Grid) -> np.ndarray:
    """Occupancy scaled to 0-255, not inverted."""

    occupancy = _sample(grid, grid.occupancy)
    return _to_bytes(occupancy * 255.0)


def value_raster(grid: Grid) -> np.ndarray:
    """Cell values normalised against the grid's current maximum.

    A maximum that is zero, negative or not finite gives an all-zero image.
    """

    width, height = check_2d(grid)
    max_val = float(grid.max_value())
    if not np.isfinite(max_val) or max_val <= 0.0:
        logger.warning(f"Degenerate value range (max={max_val}), rendering an all-zero field")
        return np.zeros((height, width), dtype=np.uint8)

    values = _sample(grid, grid.value)
    return _to_bytes(values / max_val * 255.0)


def _to_bytes(samples: np.ndarray) -> np.ndarray:
    # nan -> 0, +inf -> 255, then truncate like an integer cast
    samples = np.nan_to_num(samples, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(samples, 0.0, 255.0).astype(np.uint8)


def to_rgb(buffer: np.ndarray) -> np.ndarray:
    """Replicate a single-channel buffer into three channels."""

    if buffer.ndim != 2:
        raise DimensionMismatch(f"Expected a single-channel (H x W) buffer. Got shape={buffer.shape}.", shape=buffer.shape)
    return np.repeat(buffer[:, :, np.newaxis], 3, axis=2)


def apply_lut(buffer: np.ndarray, lut: np.ndarray) -> np.ndarray:
    """False-colour a single-channel 8-bit buffer."""

    if buffer.ndim != 2:
        raise DimensionMismatch(f"Expected a single-channel (H x W) buffer. Got shape={buffer.shape}.", shape=buffer.shape)
    if lut.shape != (256, 3):
        raise DimensionMismatch(f"LUT must have shape (256, 3). Got {lut.shape}.", shape=lut.shape)
    return lut[buffer.astype(np.uint8)]


def overlay_path(
    rgb: np.ndarray,
    path: Path2D,
    channels: Sequence[int],
    policy: OutOfBoundsPolicy = OutOfBoundsPolicy.RAISE,
) -> np.ndarray:
    """Zero ``channels`` of ``rgb`` at every pixel of ``path``, in place."""

    height, width = rgb.shape[:2]
    for channel in channels:
        if not 0 <= channel < rgb.shape[2]:
            raise PathOutOfBounds(f"Channel {channel} does not exist in a {rgb.shape[2]}-channel image.")
    rows, cols = path_pixels(path, width, height, policy)
    for channel in channels:
        rgb[rows, cols, channel] = 0
    return rgb


def mark_path(
    mono: np.ndarray,
    path: Path2D,
    policy: OutOfBoundsPolicy = OutOfBoundsPolicy.RAISE,
    level: int = PATH_LEVEL,
) -> np.ndarray:
    """Set every pixel of ``path`` in a single-channel buffer to ``level``, in place."""

    height, width = mono.shape
    rows, cols = path_pixels(path, width, height, policy)
    mono[rows, cols] = level
    return mono


def channels_for_path(index: int, policy: PathIndexPolicy = PathIndexPolicy.RAISE) -> tuple[int, int]:
    """Channel pair zeroed for the path at ``index`` of a PathSet."""

    n_pairs = len(PATH_CHANNEL_PAIRS)
    if 0 <= index < n_pairs:
        return PATH_CHANNEL_PAIRS[index]
    if policy is PathIndexPolicy.WRAP and index >= 0:
        return PATH_CHANNEL_PAIRS[index % n_pairs]
    raise PathOutOfBounds(
        f"Path index {index} has no overlay colour; at most {n_pairs} paths can be plotted together.",
        path_index=index,
    )


def overlay_paths(rgb: np.ndarray, paths: PathSet, spec: RenderSpec = DEFAULT_RENDER) -> np.ndarray:
    """Overlay several paths in place, each with its own channel pair."""

    height, width = rgb.shape[:2]
    # Resolve colours and pixels for every path before touching the buffer.
    resolved = [
        (channels_for_path(j, spec.path_index), path_pixels(path, width, height, spec.out_of_bounds))
        for j, path in enumerate(paths)
    ]
    for channels, (rows, cols) in resolved:
        for channel in channels:
            rgb[rows, cols, channel] = 0
    return rgb
