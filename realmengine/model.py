"""Models: a node hierarchy over shared meshes and materials."""

from __future__ import annotations

import numpy as np

from realmengine.geometry import AABB
from realmengine.material import Material
from realmengine.mesh import Mesh
from realmengine.node import Node


class Model:
    """Collection of meshes and materials referenced from a node tree."""

    def __init__(self) -> None:
        self.root: Node | None = None
        self.meshes: list[Mesh] = []
        self.materials: list[Material] = []

    @property
    def mesh_count(self) -> int:
        return len(self.meshes)

    @property
    def material_count(self) -> int:
        return len(self.materials)

    def get_mesh(self, idx: int) -> Mesh:
        """Return the mesh at idx; raise IndexError when out of range."""
        if not 0 <= idx < len(self.meshes):
            raise IndexError(f"mesh index {idx} out of range")
        return self.meshes[idx]

    def try_get_mesh(self, idx: int) -> Mesh | None:
        """Return the mesh at idx, or None when out of range."""
        return self.meshes[idx] if 0 <= idx < len(self.meshes) else None

    def add_mesh(self, mesh: Mesh) -> int:
        """Append a mesh and return its index."""
        self.meshes.append(mesh)
        return len(self.meshes) - 1

    def clear_meshes(self) -> None:
        """Remove all meshes."""
        self.meshes.clear()

    def get_material(self, idx: int) -> Material:
        """Return the material at idx; raise IndexError when out of range."""
        if not 0 <= idx < len(self.materials):
            raise IndexError(f"material index {idx} out of range")
        return self.materials[idx]

    def try_get_material(self, idx: int) -> Material | None:
        """Return the material at idx, or None when out of range."""
        return self.materials[idx] if 0 <= idx < len(self.materials) else None

    def add_material(self, material: Material) -> int:
        """Append a material and return its index."""
        self.materials.append(material)
        return len(self.materials) - 1

    def clear_materials(self) -> None:
        """Remove all materials."""
        self.materials.clear()

    def clear(self) -> None:
        """Drop the node tree, meshes and materials."""
        self.root = None
        self.meshes.clear()
        self.materials.clear()

    def is_empty(self) -> bool:
        """Return whether the model has no root, meshes or materials."""
        return self.root is None and not self.meshes and not self.materials

    def calculate_aabb(self) -> AABB:
        """Return the box enclosing the stored bounds of all meshes."""
        if not self.meshes:
            return AABB()
        mins = np.array([mesh.bounds.min for mesh in self.meshes])
        maxs = np.array([mesh.bounds.max for mesh in self.meshes])
        return AABB(mins.min(axis=0), maxs.max(axis=0))

    def __repr__(self) -> str:
        return f"Model(meshes={len(self.meshes)}, materials={len(self.materials)})"