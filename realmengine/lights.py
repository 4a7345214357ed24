"""Light descriptions used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def _vec(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(-1)


def _normalized(values) -> np.ndarray:
    vector = _vec(values)
    length = np.linalg.norm(vector)
    return vector / length if length > 0.0 else vector


def _down() -> np.ndarray:
    return np.array([0.0, -1.0, 0.0])


def _white() -> np.ndarray:
    return np.ones(3)


def _origin() -> np.ndarray:
    return np.zeros(3)


def _identity() -> np.ndarray:
    return np.identity(4)


@dataclass(eq=False)
class DirectionalLight:
    """Light shining uniformly along one direction."""

    direction: np.ndarray = field(default_factory=_down)
    color: np.ndarray = field(default_factory=_white)
    intensity: float = 1.0
    cast_shadow: bool = True
    light_space_matrix: np.ndarray = field(default_factory=_identity)

    def __post_init__(self) -> None:
        self.direction = _normalized(self.direction)
        self.color = _vec(self.color)
        self.light_space_matrix = np.array(self.light_space_matrix, dtype=float)


@dataclass(eq=False)
class PointLight:
    """Omnidirectional light with distance attenuation."""

    position: np.ndarray = field(default_factory=_origin)
    color: np.ndarray = field(default_factory=_white)
    intensity: float = 1.0
    range: float = 10.0
    # attenuation = 1 / (constant + linear * d + quadratic * d^2)
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032
    cast_shadow: bool = False

    def __post_init__(self) -> None:
        self.position = _vec(self.position)
        self.color = _vec(self.color)


@dataclass(eq=False)
class SpotLight:
    """Cone-shaped light with inner and outer cutoffs stored as cosines."""

    position: np.ndarray = field(default_factory=_origin)
    direction: np.ndarray = field(default_factory=_down)
    color: np.ndarray = field(default_factory=_white)
    intensity: float = 1.0
    range: float = 10.0
    inner_cutoff: float = 0.9
    outer_cutoff: float = 0.8
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032
    cast_shadow: bool = False
    light_space_matrix: np.ndarray = field(default_factory=_identity)

    def __post_init__(self) -> None:
        self.position = _vec(self.position)
        self.direction = _normalized(self.direction)
        self.color = _vec(self.color)
        self.light_space_matrix = np.array(self.light_space_matrix, dtype=float)

    def set_cutoff_angles(self, inner_degrees: float, outer_degrees: float) -> None:
        """Set the cone cutoffs from angles in degrees."""
        self.inner_cutoff = math.cos(math.radians(inner_degrees))
        self.outer_cutoff = math.cos(math.radians(outer_degrees))


def _ambient() -> np.ndarray:
    return np.full(3, 0.03)


@dataclass(eq=False)
class AmbientLight:
    """Uniform light reaching every surface."""

    color: np.ndarray = field(default_factory=_ambient)
    intensity: float = 1.0

    def __post_init__(self) -> None:
        self.color = _vec(self.color)