"""Leaf-node geometry helpers. No model imports."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def union_bounds(
    boxes: Iterable[tuple[float, float, float, float] | None],
) -> tuple[float, float, float, float]:
    """Union of bounding boxes, seeded with the zero-size box at the origin.

    ``None`` entries (empty paths) are ignored.
    """
    stacked = np.array([(0.0, 0.0, 0.0, 0.0)] + [b for b in boxes if b is not None], dtype=np.float64)
    return (
        float(np.min(stacked[:, 0])),
        float(np.min(stacked[:, 1])),
        float(np.max(stacked[:, 2])),
        float(np.max(stacked[:, 3])),
    )


def reflect(point: tuple[float, float], about: tuple[float, float]) -> tuple[float, float]:
    """Reflect ``point`` through ``about``: about + (about - point)."""
    return (2.0 * about[0] - point[0], 2.0 * about[1] - point[1])
