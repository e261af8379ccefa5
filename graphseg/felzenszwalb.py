"""Graph-based image segmentation with minimum component size."""

from __future__ import annotations

import random

import numpy as np

from graphseg.disjoint_set import DisjointSet
from graphseg.graph import grid_edges


def segment_channel(channel, sigma: float = 0.8, k: float = 300.0, min_size: int = 50) -> np.ndarray:
    """Segment one 2-D channel; each pixel gets its component's representative."""
    data = np.asarray(channel, dtype=np.float32)
    if data.ndim != 2:
        raise ValueError(f"expected a 2-D channel, got shape {data.shape}")
    height, width = data.shape
    count = height * width
    forest = DisjointSet(count)
    edges = sorted(grid_edges(data, sigma), key=lambda edge: edge.weight)

    for edge in edges:
        pu, pv = forest.find(edge.u), forest.find(edge.v)
        if pu == pv:
            continue
        threshold = min(
            forest.internal_difference(pu) + k / forest.component_size(pu),
            forest.internal_difference(pv) + k / forest.component_size(pv),
        )
        if edge.weight <= threshold:
            forest.union(edge.u, edge.v, edge.weight)

    for edge in edges:
        pu, pv = forest.find(edge.u), forest.find(edge.v)
        if pu != pv and (
            forest.component_size(pu) < min_size or forest.component_size(pv) < min_size
        ):
            forest.union(edge.u, edge.v, edge.weight)

    roots = np.fromiter(map(forest.find, range(count)), dtype=np.int64, count=count)
    return roots.reshape(height, width)


def relabel(labels) -> np.ndarray:
    """Map labels to consecutive integers from 0, keeping their sorted order."""
    data = np.asarray(labels)
    _, inverse = np.unique(data, return_inverse=True)
    return inverse.reshape(data.shape).astype(np.int64)


def segment_grayscale(image, sigma: float = 0.8, k: float = 300.0, min_size: int = 50) -> np.ndarray:
    """Segment a grayscale image into consecutively numbered regions."""
    return relabel(segment_channel(image, sigma, k, min_size))


def intersect_segmentations(seg_r, seg_g, seg_b) -> np.ndarray:
    """Label pixels by their triple of channel labels, numbered by first appearance."""
    arrays = [np.asarray(seg) for seg in (seg_r, seg_g, seg_b)]
    shape = arrays[0].shape
    if any(seg.shape != shape for seg in arrays):
        raise ValueError("segmentations must share one shape")
    mapping: dict[tuple[int, int, int], int] = {}
    triples = zip(*(seg.ravel().tolist() for seg in arrays))
    flat = [mapping.setdefault(triple, len(mapping)) for triple in triples]
    return np.array(flat, dtype=np.int64).reshape(shape)


def colorize(labels, rng: random.Random | None = None) -> np.ndarray:
    """Paint each label with a random colour; returns an ``(h, w, 3)`` uint8 image."""
    rng = rng if rng is not None else random.Random()
    data = np.asarray(labels)
    unique, inverse = np.unique(data, return_inverse=True)
    palette = np.array(
        [[rng.randint(0, 255) for _ in range(3)] for _ in unique],
        dtype=np.uint8,
    ).reshape(len(unique), 3)
    return palette[inverse.ravel()].reshape(*data.shape, 3)


def segment_color(
    image,
    sigma: float = 0.8,
    k: float = 300.0,
    min_size: int = 50,
    rng: random.Random | None = None,
) -> np.ndarray:
    """Segment each RGB channel, intersect the results and colour the regions."""
    data = np.asarray(image)
    if data.ndim != 3 or data.shape[2] != 3:
        raise ValueError(f"expected an (h, w, 3) image, got shape {data.shape}")
    seg_r, seg_g, seg_b = (segment_channel(data[..., c], sigma, k, min_size) for c in range(3))
    return colorize(intersect_segmentations(seg_r, seg_g, seg_b), rng)


def scale_labels(labels) -> np.ndarray:
    """Stretch labels onto 0..255 for display as an 8-bit grayscale image."""
    data = np.asarray(labels, dtype=np.float64)
    peak = data.max() if data.size else 0.0
    if peak <= 0:
        return np.zeros(data.shape, dtype=np.uint8)
    return np.clip(np.rint(data * (255.0 / peak)), 0, 255).astype(np.uint8)