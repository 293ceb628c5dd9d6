#!/usr/bin/env python3
"""Demo of every grid plot on a small text maze.

The arrival-time field is a plain breadth-first wavefront from the start
cell and the path is a steepest descent through it, just enough to have
something to look at.

Usage:
    python scripts/plot_demo.py
"""

import logging
import sys
from collections import deque
from pathlib import Path
from typing import Any, Dict

import matplotlib.pyplot as plt
import numpy as np

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from grid_plotter import ArrayGrid, GridRenderer, make_surface


# ---- User-configurable parameters ----
CONFIG: Dict[str, Any] = {
    "surface": "matplotlib",  # "matplotlib", "pygame" or "memory"
    "surface_options": {},    # e.g. {"scale": 12} for pygame
    "title": "Demo",
    "start": (1, 1),          # (x, y), Cartesian
    "goal": (18, 8),
    "log_level": logging.INFO,
}

MAZE = [
    "####################",
    "#..........#.......#",
    "#..######..#..###..#",
    "#.......#..#....#..#",
    "#####...#..####.#..#",
    "#.......#.......#..#",
    "#..######..######..#",
    "#..................#",
    "#..................#",
    "####################",
]

NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def wavefront(grid: ArrayGrid, start: tuple[int, int]) -> np.ndarray:
    """Breadth-first arrival times from ``start``; unreached cells stay 0."""
    times = np.zeros((grid.height, grid.width))
    seen = np.zeros_like(times, dtype=bool)
    queue = deque([start])
    seen[start[1], start[0]] = True
    while queue:
        x, y = queue.popleft()
        for dx, dy in NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < grid.width and 0 <= ny < grid.height) or seen[ny, nx]:
                continue
            if grid.is_occupied(grid.index_of(nx, ny)):
                continue
            seen[ny, nx] = True
            times[ny, nx] = times[y, x] + 1
            queue.append((nx, ny))
    return times


def descend(times: np.ndarray, goal: tuple[int, int]) -> list[tuple[float, float]]:
    """Follow decreasing arrival time from ``goal`` back to the start."""
    x, y = goal
    path = [(float(x), float(y))]
    while times[y, x] > 0:
        candidates = [
            (x + dx, y + dy)
            for dx, dy in NEIGHBOURS
            if 0 <= y + dy < times.shape[0] and 0 <= x + dx < times.shape[1]
            and times[y + dy, x + dx] == times[y, x] - 1
        ]
        if not candidates:
            break
        x, y = candidates[0]
        path.append((float(x), float(y)))
    return path


def main():
    """Render every plot of the demo maze."""
    logging.basicConfig(level=CONFIG["log_level"], format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger = logging.getLogger("plot_demo")

    grid = ArrayGrid.from_text(MAZE)
    times = wavefront(grid, CONFIG["start"])
    grid = ArrayGrid.from_text(MAZE, values=times)
    logger.info(f"Wavefront reached {int(np.count_nonzero(times))} cells, max time {grid.max_value():.0f}")

    path = descend(times, CONFIG["goal"])
    # Second path along the bottom corridor
    other = [(float(x), 1.0) for x in range(1, grid.width - 1)]
    logger.info(f"Path has {len(path)} points")

    renderer = GridRenderer(make_surface(CONFIG["surface"], **CONFIG["surface_options"]))
    title = CONFIG["title"]
    renderer.plot_map(grid, title)
    renderer.plot_occupancy_map(grid, title)
    renderer.plot_values(grid, title)
    renderer.plot_map_path(grid, path, title)
    renderer.plot_occupancy_path(grid, path, title)
    renderer.plot_map_paths(grid, [path, other], title)
    renderer.plot_values_path(grid, path, title)

    if CONFIG["surface"] == "matplotlib":
        plt.show()
    elif CONFIG["surface"] == "pygame":
        input("Press Enter to close the window...")


if __name__ == "__main__":
    main()
