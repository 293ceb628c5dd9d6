"""
Grid plotting for path-planning diagnostics.

Renders occupancy maps, arrival-time fields and planned paths of 2D
planning grids as raster images.
"""

from .errors import DimensionMismatch, GridPlotError, PathOutOfBounds
from .grid import ArrayGrid, Grid
from .palettes import DEFAULT_RENDER, JET_LUT, PathIndexPolicy, RenderSpec
from .paths import OutOfBoundsPolicy, Path2D, PathSet, Point2D
from .renderer import GridRenderer
from .surfaces import ImageSurface, MatplotlibSurface, MemorySurface, PygameSurface, make_surface

__version__ = "0.1.0"

__all__ = [
    "ArrayGrid",
    "DEFAULT_RENDER",
    "DimensionMismatch",
    "Grid",
    "GridPlotError",
    "GridRenderer",
    "ImageSurface",
    "JET_LUT",
    "MatplotlibSurface",
    "MemorySurface",
    "OutOfBoundsPolicy",
    "PathIndexPolicy",
    "Path2D",
    "PathOutOfBounds",
    "PathSet",
    "Point2D",
    "PygameSurface",
    "RenderSpec",
    "make_surface",
]
