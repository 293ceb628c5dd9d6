"""Exceptions raised while building raster images from grids."""

from __future__ import annotations

from typing import Any


class GridPlotError(Exception):
    """Base class for every error reported by grid_plotter."""


class DimensionMismatch(GridPlotError, ValueError):
    """The grid (or an array handed to it) does not have the expected shape."""

    def __init__(self, message: str, *, shape: tuple[int, ...] | None = None) -> None:
        super().__init__(message)
        self.shape = shape


class PathOutOfBounds(GridPlotError, IndexError):
    """A path cannot be drawn onto the raster.

    Raised when a point truncates to a pixel outside the image, or when a
    path index has no overlay colour left.
    """

    def __init__(
        self,
        message: str,
        *,
        point: Any = None,
        pixel: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None,
        path_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.point = point
        self.pixel = pixel
        self.shape = shape
        self.path_index = path_index
