"""Grid rendering for path-planning diagnostics.

This module provides the GridRenderer class which turns a 2D planning grid
(occupancy, arrival-time values) and optional paths into raster images and
hands them to an ImageSurface for display.
"""

from __future__ import annotations

import logging

import numpy as np

from .grid import Grid
from .palettes import (
    DEFAULT_RENDER,
    MAP_PATH_SUFFIX,
    MAP_PATHS_SUFFIX,
    MAP_SUFFIX,
    OCCUPANCY_SUFFIX,
    SINGLE_PATH_CHANNELS,
    VALUES_PATH_SUFFIX,
    VALUES_SUFFIX,
    RenderSpec,
)
from .paths import Path2D, PathSet
from .raster import (
    apply_lut,
    intensity_raster,
    mark_path,
    occupancy_raster,
    overlay_path,
    overlay_paths,
    to_rgb,
    value_raster,
)
from .surfaces import ImageSurface, MatplotlibSurface

logger = logging.getLogger(__name__)


class GridRenderer:
    """Renders planning grids onto an ImageSurface.

    Grids are read in Cartesian coordinates (origin bottom-left) and drawn
    in image coordinates (origin top-left). Every plot builds a new buffer,
    shows it and returns it; nothing is kept between calls.

    Attributes:
        surface: Where buffers are displayed.
        spec: Overlay policies and the false-colour table.
    """

    def __init__(self, surface: ImageSurface | None = None, spec: RenderSpec = DEFAULT_RENDER) -> None:
        self.surface = surface if surface is not None else MatplotlibSurface()
        self.spec = spec

    def _show(self, buffer: np.ndarray, title: str) -> np.ndarray:
        logger.debug(f"Rendering '{title}' ({buffer.shape[1]}x{buffer.shape[0]})")
        self.surface.show(buffer, title)
        return buffer

    def plot_map(self, grid: Grid, title: str = "") -> np.ndarray:
        """Plot the binary occupancy of a grid.

        Args:
            grid: 2D grid whose cells answer ``is_occupied``.
            title: Window title prefix.

        Returns:
            (H, W) uint8 buffer, 255 for free cells and 0 for occupied ones.
        """
        return self._show(occupancy_raster(grid), title + MAP_SUFFIX)

    def plot_occupancy_map(self, grid: Grid, title: str = "") -> np.ndarray:
        """Plot continuous occupancy in [0, 1] as grey levels (occupancy * 255)."""
        return self._show(intensity_raster(grid), title + OCCUPANCY_SUFFIX)

    def plot_values(self, grid: Grid, title: str = "") -> np.ndarray:
        """Plot cell values (e.g. arrival times) false-coloured with the LUT.

        Values are normalised against ``grid.max_value()`` on every call.

        Returns:
            (H, W, 3) uint8 buffer.
        """
        mono = value_raster(grid)
        return self._show(apply_lut(mono, self.spec.lut), title + VALUES_SUFFIX)

    def plot_map_path(self, grid: Grid, path: Path2D, title: str = "") -> np.ndarray:
        """Plot the binary map with ``path`` drawn in red."""
        rgb = to_rgb(occupancy_raster(grid))
        overlay_path(rgb, path, SINGLE_PATH_CHANNELS, self.spec.out_of_bounds)
        return self._show(rgb, title + MAP_PATH_SUFFIX)

    def plot_occupancy_path(self, grid: Grid, path: Path2D, title: str = "") -> np.ndarray:
        """Plot continuous occupancy with ``path`` drawn in red."""
        rgb = to_rgb(intensity_raster(grid))
        overlay_path(rgb, path, SINGLE_PATH_CHANNELS, self.spec.out_of_bounds)
        return self._show(rgb, title + MAP_PATH_SUFFIX)

    def plot_map_paths(self, grid: Grid, paths: PathSet, title: str = "") -> np.ndarray:
        """Plot the binary map with several paths, one colour per path.

        Path ``j`` gets the channel pair ``PATH_CHANNEL_PAIRS[j]`` zeroed. With
        the default spec more paths than pairs raise PathOutOfBounds; a
        ``PathIndexPolicy.WRAP`` spec reuses the colours instead.
        """
        rgb = to_rgb(occupancy_raster(grid))
        overlay_paths(rgb, paths, self.spec)
        return self._show(rgb, title + MAP_PATHS_SUFFIX)

    def plot_values_path(self, grid: Grid, path: Path2D, title: str = "") -> np.ndarray:
        """Plot false-coloured values with ``path`` in the LUT's top colour."""
        mono = value_raster(grid)
        mark_path(mono, path, self.spec.out_of_bounds)
        return self._show(apply_lut(mono, self.spec.lut), title + VALUES_PATH_SUFFIX)
