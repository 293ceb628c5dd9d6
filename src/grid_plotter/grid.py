"""Grid capability interface consumed by the renderer.

Grids are addressed in Cartesian coordinates: cell ``index`` is
``width * row + col`` with row 0 at the bottom of the map.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

import numpy as np

from .errors import DimensionMismatch


class Grid(ABC):
    """Read-only view of a planning grid.

    Concrete grids only have to answer per-cell queries; ``cell_count`` and
    ``max_value`` have generic implementations that can be overridden with
    something faster.
    """

    @abstractmethod
    def dimensions(self) -> tuple[int, ...]:
        """Size of every dimension, ``(width, height)`` for a 2D grid."""

    @abstractmethod
    def is_occupied(self, index: int) -> bool:
        ...

    @abstractmethod
    def occupancy(self, index: int) -> float:
        ...

    @abstractmethod
    def value(self, index: int) -> float:
        ...

    def cell_count(self) -> int:
        return math.prod(self.dimensions())

    def max_value(self) -> float:
        """Largest cell value, ignoring NaN cells (NaN if every cell is NaN)."""
        values = (self.value(i) for i in range(self.cell_count()))
        return max((v for v in values if not math.isnan(v)), default=math.nan)


def check_2d(grid: Grid) -> tuple[int, int]:
    """Return ``(width, height)`` or raise if the grid is not 2D."""

    dims = tuple(grid.dimensions())
    if len(dims) != 2:
        raise DimensionMismatch(
            f"Only 2D grids can be plotted. Got {len(dims)} dimensions {dims}.",
            shape=dims,
        )
    width, height = int(dims[0]), int(dims[1])
    if width <= 0 or height <= 0:
        raise DimensionMismatch(f"Grid dimensions must be positive. Got {dims}.", shape=dims)
    return width, height


def _as_2d(array: Any, *, name: str, dtype: Any) -> np.ndarray:
    arr = np.array(array, dtype=dtype)
    if arr.ndim != 2:
        raise DimensionMismatch(f"{name} must be a 2D array (H x W). Got shape={arr.shape}.", shape=arr.shape)
    return arr


class ArrayGrid(Grid):
    """2D grid backed by numpy arrays.

    Arrays have shape ``(height, width)`` and are indexed ``[row, col]``
    with row 0 at the bottom, so the flat row-major index of a cell is the
    grid index used by :class:`Grid`.
    """

    def __init__(
        self,
        occupancy: Any,
        values: Any | None = None,
        *,
        occupied_threshold: float = 0.5,
    ) -> None:
        """
        Args:
            occupancy: Bool or float array in [0, 1], shape (height, width).
            values: Per-cell scalar (e.g. arrival time); zeros when omitted.
            occupied_threshold: Occupancy at or above which a cell is occupied.
        """
        self._occupancy = _as_2d(occupancy, name="occupancy", dtype=float)
        if values is None:
            self._values = np.zeros_like(self._occupancy)
        else:
            self._values = _as_2d(values, name="values", dtype=float)
            if self._values.shape != self._occupancy.shape:
                raise DimensionMismatch(
                    f"values shape must match occupancy. Got {self._values.shape} vs {self._occupancy.shape}.",
                    shape=self._values.shape,
                )
        self.occupied_threshold = occupied_threshold

    @classmethod
    def from_text(
        cls,
        rows: Iterable[str],
        *,
        occupied: str = "#",
        values: Any | None = None,
    ) -> "ArrayGrid":
        """Build a binary grid from text rows listed top-down.

        The first row of text is the top of the map, i.e. the highest grid
        row, which is how a map reads on screen.
        """

        lines: Sequence[str] = [line for line in rows if line]
        if not lines:
            raise DimensionMismatch("Text map has no rows.")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise DimensionMismatch("All text rows must have the same length.")
        top_down = np.array([[ch in occupied for ch in line] for line in lines], dtype=bool)
        return cls(top_down[::-1], values=values)

    @property
    def width(self) -> int:
        return self._occupancy.shape[1]

    @property
    def height(self) -> int:
        return self._occupancy.shape[0]

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def _cell(self, index: int) -> tuple[int, int]:
        if not 0 <= index < self._occupancy.size:
            raise IndexError(f"Cell index {index} out of range for {self.width}x{self.height} grid")
        return divmod(int(index), self.width)

    def is_occupied(self, index: int) -> bool:
        return bool(self._occupancy[self._cell(index)] >= self.occupied_threshold)

    def occupancy(self, index: int) -> float:
        return float(self._occupancy[self._cell(index)])

    def value(self, index: int) -> float:
        return float(self._values[self._cell(index)])

    def max_value(self) -> float:
        if np.isnan(self._values).all():
            return math.nan
        return float(np.nanmax(self._values))

    def set_occupancy(self, index: int, occupancy: float) -> None:
        self._occupancy[self._cell(index)] = occupancy

    def set_value(self, index: int, value: float) -> None:
        self._values[self._cell(index)] = value

    def index_of(self, col: int, row: int) -> int:
        """Flat index of the cell at Cartesian ``(col, row)``."""
        return self.width * row + col
