"""GPU-side counterpart of a material: texture handles and shader factors."""

from __future__ import annotations

import dataclasses
from typing import Protocol

import numpy as np

from realmengine.material import Material, RenderState

_TEXTURE_SLOTS = (
    "base_color_texture",
    "metallic_roughness_texture",
    "normal_texture",
    "occlusion_texture",
    "emissive_texture",
)


class TextureLoader(Protocol):
    """What a render material needs from the rendering interface."""

    def load_texture(self, filepath: str) -> int: ...

    def delete_texture(self, handle: int) -> None: ...


class RenderMaterial:
    """Material data resolved to GPU handles, ready for drawing."""

    def __init__(self) -> None:
        self.shader_program = 0
        self.base_color_texture: int | None = None
        self.metallic_roughness_texture: int | None = None
        self.normal_texture: int | None = None
        self.occlusion_texture: int | None = None
        self.emissive_texture: int | None = None

        self.base_color_factor = np.ones(4)
        self.metallic_factor = 1.0
        self.roughness_factor = 1.0
        self.emissive_factor = np.zeros(3)

        self.render_state = RenderState()

    def sync(self, rhi: TextureLoader, material: Material, shader_program: int) -> None:
        """Copy factors and state from material and load its textures through rhi."""
        self.shader_program = shader_program

        self.base_color_factor = np.array(material.base_color_factor, dtype=float)
        self.metallic_factor = material.metallic_factor
        self.roughness_factor = material.roughness_factor
        self.emissive_factor = np.array(material.emissive_factor, dtype=float)

        for slot in _TEXTURE_SLOTS:
            texture = getattr(material, slot)
            if texture is not None:
                setattr(self, slot, rhi.load_texture(texture.path))

        self.render_state = dataclasses.replace(material.render_state)

    def disposal(self, rhi: TextureLoader) -> None:
        """Release every loaded texture through rhi and forget the handles."""
        for slot in _TEXTURE_SLOTS:
            handle = getattr(self, slot)
            if handle is not None:
                rhi.delete_texture(handle)
            setattr(self, slot, None)

    def textures(self) -> dict[str, int]:
        """Return the loaded texture handles keyed by slot name, in binding order."""
        return {
            slot: handle
            for slot in _TEXTURE_SLOTS
            if (handle := getattr(self, slot)) is not None
        }

    def __repr__(self) -> str:
        return f"RenderMaterial(shader={self.shader_program}, textures={self.textures()!r})"