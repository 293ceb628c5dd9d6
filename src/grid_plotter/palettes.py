from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import matplotlib.pyplot as plt
import numpy as np

from .paths import OutOfBoundsPolicy


def _make_lut(name: str, size: int = 256) -> np.ndarray:
    colors = plt.get_cmap(name, size)(np.arange(size))[:, :3]
    lut = np.rint(colors * 255).astype(np.uint8)
    lut.setflags(write=False)
    return lut


# Blue (low) -> green -> red (high), one RGB row per 8-bit sample.
JET_LUT = _make_lut("jet")

# Channels zeroed for each path index; the one left keeps its base value.
# Path 0 shows blue, path 1 shows red.
PATH_CHANNEL_PAIRS: tuple[tuple[int, int], ...] = ((0, 1), (1, 2))

# Channel pair for single-path overlays (only red survives).
SINGLE_PATH_CHANNELS: tuple[int, int] = (1, 2)

PATH_LEVEL = 255

MAP_SUFFIX = " Map"
OCCUPANCY_SUFFIX = " Occupancy Map"
VALUES_SUFFIX = " Grid values"
MAP_PATH_SUFFIX = " Map and Path"
MAP_PATHS_SUFFIX = " Map and Paths"
VALUES_PATH_SUFFIX = " Values and Path"


class PathIndexPolicy(Enum):
    """What to do with more paths than ``PATH_CHANNEL_PAIRS`` entries."""
    RAISE = "raise"
    WRAP = "wrap"


@dataclass(frozen=True)
class RenderSpec:
    """Rendering options shared by every plot of a GridRenderer."""

    out_of_bounds: OutOfBoundsPolicy = OutOfBoundsPolicy.RAISE
    path_index: PathIndexPolicy = PathIndexPolicy.RAISE
    lut: np.ndarray = field(default_factory=lambda: JET_LUT, repr=False, compare=False)


DEFAULT_RENDER = RenderSpec()
