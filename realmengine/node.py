"""Scene graph nodes of a model."""

from __future__ import annotations

from typing import Iterable

import numpy as np


class Node:
    """Node in a model's hierarchy with a local transform and mesh references."""

    def __init__(
        self,
        local_transform: np.ndarray | None = None,
        mesh_indices: Iterable[int] = (),
    ) -> None:
        self.local_transform = (
            np.identity(4) if local_transform is None else np.array(local_transform, dtype=float)
        )
        self.mesh_indices: list[int] = list(mesh_indices)
        self.parent: Node | None = None
        self.children: list[Node] = []

    def add_child(self, child: Node | None) -> None:
        """Attach child under this node; None is ignored."""
        if child is None:
            return
        child.parent = self
        self.children.append(child)

    def add_mesh_index(self, mesh_idx: int) -> None:
        """Reference one more mesh of the owning model."""
        self.mesh_indices.append(mesh_idx)

    def has_meshes(self) -> bool:
        """Return whether this node references any mesh."""
        return bool(self.mesh_indices)

    def world_transform(self) -> np.ndarray:
        """Return the transform from this node's space to the model root's parent space."""
        if self.parent is not None:
            return self.parent.world_transform() @ self.local_transform
        return self.local_transform

    def __repr__(self) -> str:
        return f"Node(meshes={self.mesh_indices!r}, children={len(self.children)})"