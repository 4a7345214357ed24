"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _zeros() -> np.ndarray:
    return np.zeros(3)


@dataclass(eq=False)
class AABB:
    """Axis-aligned bounding box given by its minimum and maximum corners."""

    min: np.ndarray = field(default_factory=_zeros)
    max: np.ndarray = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        self.min = np.array(self.min, dtype=float).reshape(3)
        self.max = np.array(self.max, dtype=float).reshape(3)

    def center(self) -> np.ndarray:
        """Return the midpoint of the box."""
        return (self.min + self.max) * 0.5

    def extent(self) -> np.ndarray:
        """Return the size of the box along each axis."""
        return self.max - self.min