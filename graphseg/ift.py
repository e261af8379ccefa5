"""Seeded image segmentation by the image foresting transform."""

from __future__ import annotations

import heapq
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

# Left, right, up, down.
_NEIGHBOURS = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class Seed:
    """A labelled starting pixel at column ``x`` and row ``y``."""

    x: int
    y: int
    label: int


def gray_cost(a, b) -> int:
    """Absolute difference of two intensities."""
    return abs(int(a) - int(b))


def color_cost(a: Sequence[int], b: Sequence[int]) -> int:
    """Squared Euclidean distance between two colours."""
    return sum((int(p) - int(q)) ** 2 for p, q in zip(a, b, strict=True))


def ift_segmentation(image, seeds: Iterable[Seed]) -> np.ndarray:
    """Grow seed labels over the 4-connected grid along minimax-cost paths.

    A path costs the largest step cost along it; each pixel takes the label
    of the seed that reaches it most cheaply. Pixels no seed reaches keep 0.
    A 2-D image uses :func:`gray_cost`, an ``(h, w, 3)`` image
    :func:`color_cost`.
    """
    data = np.asarray(image)
    if data.ndim == 2:
        step_cost = gray_cost
    elif data.ndim == 3 and data.shape[2] == 3:
        step_cost = color_cost
    else:
        raise ValueError(f"expected an (h, w) or (h, w, 3) image, got shape {data.shape}")
    height, width = data.shape[:2]
    pixels = data.astype(np.int64).tolist()

    infinity = float("inf")
    cost = [[infinity] * width for _ in range(height)]
    labels = [[0] * width for _ in range(height)]
    heap: list[tuple[float, int, int]] = []

    for seed in seeds:
        if not (0 <= seed.x < width and 0 <= seed.y < height):
            raise IndexError(f"seed ({seed.x}, {seed.y}) lies outside a {width}x{height} image")
        cost[seed.y][seed.x] = 0
        labels[seed.y][seed.x] = seed.label
        heapq.heappush(heap, (0, seed.y, seed.x))

    while heap:
        current, y, x = heapq.heappop(heap)
        if current > cost[y][x]:
            continue
        here = pixels[y][x]
        label = labels[y][x]
        for dy, dx in _NEIGHBOURS:
            ny, nx = y + dy, x + dx
            if not (0 <= ny < height and 0 <= nx < width):
                continue
            new_cost = max(current, step_cost(here, pixels[ny][nx]))
            if new_cost < cost[ny][nx]:
                cost[ny][nx] = new_cost
                labels[ny][nx] = label
                heapq.heappush(heap, (new_cost, ny, nx))

    return np.array(labels, dtype=np.int64).reshape(height, width)


def make_seeds(points: Iterable[tuple[int, int]], start: int = 100, step: int = 100) -> list[Seed]:
    """Turn ``(x, y)`` points into seeds labelled ``start``, ``start + step``, ..."""
    return [Seed(x, y, start + i * step) for i, (x, y) in enumerate(points)]


def color_labels(labels, rng: random.Random | None = None) -> np.ndarray:
    """Paint each label a random colour, drawn in raster order of first appearance.

    Channel values lie in ``0 .. 254``. Returns an ``(h, w, 3)`` uint8 image.
    """
    rng = rng if rng is not None else random.Random(12345)
    data = np.asarray(labels)
    palette: dict[int, tuple[int, int, int]] = {}
    for label in data.ravel().tolist():
        if label not in palette:
            palette[label] = (rng.randrange(255), rng.randrange(255), rng.randrange(255))
    colours = [palette[label] for label in data.ravel().tolist()]
    return np.array(colours, dtype=np.uint8).reshape(*data.shape, 3)