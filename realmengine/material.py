"""Surface materials for physically based rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np


@dataclass
class TextureRef:
    """Reference to a texture file bound to a shader slot."""

    path: str
    slot: int = 0
    srgb: bool = True


class BlendMode(enum.Enum):
    OPAQUE = 0
    ALPHA_BLEND = 1
    ADDITIVE = 2
    MULTIPLY = 3


class CullMode(enum.Enum):
    NONE = 0
    FRONT = 1
    BACK = 2


class DepthTest(enum.Enum):
    ALWAYS = 0
    LESS = 1
    LESS_EQUAL = 2
    GREATER = 3
    EQUAL = 4


@dataclass
class RenderState:
    """Fixed-function state a material is drawn with."""

    blend_mode: BlendMode = BlendMode.OPAQUE
    cull_mode: CullMode = CullMode.BACK
    depth_test: DepthTest = DepthTest.LESS
    depth_write: bool = True


def _ones4() -> np.ndarray:
    return np.ones(4)


def _zeros3() -> np.ndarray:
    return np.zeros(3)


@dataclass(eq=False)
class Material:
    """PBR material: optional textures, scalar factors and render state."""

    base_color_texture: TextureRef | None = None
    metallic_roughness_texture: TextureRef | None = None
    normal_texture: TextureRef | None = None
    occlusion_texture: TextureRef | None = None
    emissive_texture: TextureRef | None = None

    base_color_factor: np.ndarray = field(default_factory=_ones4)
    metallic_factor: float = 1.0
    roughness_factor: float = 1.0
    emissive_factor: np.ndarray = field(default_factory=_zeros3)
    normal_scale: float = 1.0
    occlusion_strength: float = 1.0

    render_state: RenderState = field(default_factory=RenderState)

    def __post_init__(self) -> None:
        self.base_color_factor = np.array(self.base_color_factor, dtype=float).reshape(4)
        self.emissive_factor = np.array(self.emissive_factor, dtype=float).reshape(3)

    def set_base_color_texture(self, path: str) -> None:
        """Use the file at path as the sRGB base color texture."""
        self.base_color_texture = TextureRef(path, 0, True)

    def set_metallic_roughness_texture(self, path: str) -> None:
        """Use the file at path as the linear metallic-roughness texture."""
        self.metallic_roughness_texture = TextureRef(path, 1, False)

    def set_normal_texture(self, path: str) -> None:
        """Use the file at path as the linear normal map."""
        self.normal_texture = TextureRef(path, 2, False)

    def set_occlusion_texture(self, path: str) -> None:
        """Use the file at path as the linear ambient occlusion texture."""
        self.occlusion_texture = TextureRef(path, 3, False)

    def set_emissive_texture(self, path: str) -> None:
        """Use the file at path as the sRGB emissive texture."""
        self.emissive_texture = TextureRef(path, 4, True)