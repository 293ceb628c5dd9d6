"""Display backends for rendered buffers.

The renderer only talks to :class:`ImageSurface`; which window toolkit (if
any) ends up showing the picture is decided by the surface handed to it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pygame

from .errors import DimensionMismatch

logger = logging.getLogger(__name__)


def _check_buffer(buffer: Any) -> np.ndarray:
    array = np.asarray(buffer)
    if array.ndim == 2 or (array.ndim == 3 and array.shape[2] == 3):
        return array
    raise DimensionMismatch(f"Buffer must be (H x W) or (H x W x 3). Got shape={array.shape}.", shape=array.shape)


class ImageSurface(ABC):
    """Something that can put a raster buffer on screen under a title."""

    @abstractmethod
    def show(self, buffer: np.ndarray, title: str) -> None:
        ...


class MatplotlibSurface(ImageSurface):
    """Opens one Matplotlib figure per buffer without blocking the caller."""

    def __init__(self, *, figsize: tuple[float, float] | None = None, block: bool = False) -> None:
        self.figsize = figsize
        self.block = block

    def show(self, buffer: np.ndarray, title: str) -> None:
        image = _check_buffer(buffer)
        fig, ax = plt.subplots(1, 1, figsize=self.figsize)

        if image.ndim == 2:
            ax.imshow(image, cmap="gray", vmin=0, vmax=255, interpolation="nearest")
        else:
            ax.imshow(image, interpolation="nearest")
        ax.set_title(title)
        ax.set_xticks([])
        ax.set_yticks([])

        manager = fig.canvas.manager
        if manager is not None:
            manager.set_window_title(title)

        logger.debug(f"Showing {image.shape} buffer in figure '{title}'")
        plt.show(block=self.block)


class PygameSurface(ImageSurface):
    """Blits buffers into the pygame display window.

    pygame has a single display window, so every call replaces the picture
    (and the caption) of the previous one.
    """

    def __init__(self, *, scale: int = 1) -> None:
        if scale < 1:
            raise ValueError(f"scale must be >= 1, got {scale}")
        self.scale = scale

    def show(self, buffer: np.ndarray, title: str) -> None:
        image = _check_buffer(buffer).astype(np.uint8)
        if image.ndim == 2:
            image = np.repeat(image[:, :, np.newaxis], 3, axis=2)
        height, width = image.shape[:2]

        pygame.init()
        screen = pygame.display.set_mode((width * self.scale, height * self.scale))
        pygame.display.set_caption(title)

        # surfarray is indexed [x, y]
        surface = pygame.surfarray.make_surface(np.ascontiguousarray(image.swapaxes(0, 1)))
        if self.scale != 1:
            surface = pygame.transform.scale(surface, (width * self.scale, height * self.scale))
        screen.blit(surface, (0, 0))
        pygame.display.flip()
        pygame.event.pump()
        logger.debug(f"Showing {image.shape} buffer in pygame window '{title}'")


@dataclass(frozen=True)
class Frame:
    title: str
    buffer: np.ndarray


class MemorySurface(ImageSurface):
    """Keeps copies of shown buffers instead of drawing them."""

    def __init__(self) -> None:
        self.frames: list[Frame] = []

    def show(self, buffer: np.ndarray, title: str) -> None:
        image = _check_buffer(buffer)
        self.frames.append(Frame(title=title, buffer=image.copy()))

    @property
    def last(self) -> Frame:
        if not self.frames:
            raise LookupError("Nothing has been shown yet")
        return self.frames[-1]

    def clear(self) -> None:
        self.frames.clear()


SURFACES = {
    "matplotlib": MatplotlibSurface,
    "pygame": PygameSurface,
    "memory": MemorySurface,
}


def make_surface(name: str, **kwargs: Any) -> ImageSurface:
    """Create a surface by backend name."""

    try:
        factory = SURFACES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown surface '{name}'. Choose one of: {', '.join(SURFACES)}") from None
    return factory(**kwargs)
