"""Registry of GPU meshes and materials addressed by index."""

from __future__ import annotations

from typing import Any

from realmengine.camera import RenderCamera
from realmengine.logger import info
from realmengine.render_material import RenderMaterial
from realmengine.render_scene import RenderScene


class RenderResource:
    """Owns render meshes and materials; objects refer to them by index."""

    def __init__(self) -> None:
        self.render_meshes: list[Any] = []
        self.render_materials: list[RenderMaterial] = []

    def initialize(self) -> None:
        info("Render Resource Manager initialized.")

    def disposal(self) -> None:
        info("Render Resource Manager dispoed all resource.")

    def update(self, render_scene: RenderScene, camera: RenderCamera) -> None:
        """Per-frame hook; resources currently need no refresh."""

    def add_render_mesh(self, mesh: Any) -> int:
        """Store a render mesh and return its index."""
        self.render_meshes.append(mesh)
        return len(self.render_meshes) - 1

    def add_render_material(self, material: RenderMaterial) -> int:
        """Store a render material and return its index."""
        self.render_materials.append(material)
        return len(self.render_materials) - 1

    def get_render_mesh(self, index: int) -> Any | None:
        """Return the mesh at index, or None when there is none."""
        if not 0 <= index < len(self.render_meshes):
            return None
        return self.render_meshes[index]

    def get_render_material(self, index: int) -> RenderMaterial | None:
        """Return the material at index, or None when there is none."""
        if not 0 <= index < len(self.render_materials):
            return None
        return self.render_materials[index]