"""Test configuration and fixtures."""

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `grid_plotter`.

    The package uses the `src/` layout and may not be installed in the
    active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def surface():
    """Headless surface recording every shown buffer."""
    from grid_plotter import MemorySurface

    return MemorySurface()


@pytest.fixture
def renderer(surface):
    from grid_plotter import GridRenderer

    return GridRenderer(surface)


@pytest.fixture
def maze():
    """4x3 grid, text rows top-down. Cartesian (x, y) with y=0 the bottom row."""
    from grid_plotter import ArrayGrid

    values = [
        [0.0, 1.0, 2.0, 3.0],   # y = 0
        [1.0, 0.0, 3.0, 4.0],   # y = 1
        [2.0, 3.0, 4.0, 8.0],   # y = 2
    ]
    return ArrayGrid.from_text(
        [
            "..#.",   # y = 2
            ".#..",   # y = 1
            "#...",   # y = 0
        ],
        values=values,
    )
