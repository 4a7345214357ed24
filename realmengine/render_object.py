"""Drawable instances placed in a render scene."""

from __future__ import annotations

import numpy as np

from realmengine.geometry import AABB


class RenderObject:
    """A mesh/material pair with a world transform, bounds and draw flags."""

    def __init__(
        self,
        mesh: int = 0,
        material: int = 0,
        model_matrix: np.ndarray | None = None,
        world_bounds: AABB | None = None,
        cast_shadows: bool = True,
        receive_shadows: bool = True,
        visible: bool = True,
        layer: int = 0,
    ) -> None:
        self.mesh = mesh
        self.material = material
        self.model_matrix = np.identity(4) if model_matrix is None else model_matrix
        self.world_bounds = AABB() if world_bounds is None else world_bounds
        self.cast_shadows = cast_shadows
        self.receive_shadows = receive_shadows
        self.visible = visible
        self.layer = layer

    @property
    def model_matrix(self) -> np.ndarray:
        return self._model_matrix

    @model_matrix.setter
    def model_matrix(self, matrix: np.ndarray) -> None:
        self._model_matrix = np.array(matrix, dtype=float).reshape(4, 4)
        self._normal_matrix = np.linalg.inv(self._model_matrix).T

    @property
    def normal_matrix(self) -> np.ndarray:
        """Inverse transpose of the model matrix, for transforming normals."""
        return self._normal_matrix

    def __repr__(self) -> str:
        return (
            f"RenderObject(mesh={self.mesh}, material={self.material}, "
            f"visible={self.visible}, layer={self.layer})"
        )