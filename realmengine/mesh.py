"""Triangle meshes with per-vertex attributes and sub-mesh ranges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

from realmengine.geometry import AABB

_TANGENT_EPSILON = 1e-6


def _zeros3() -> np.ndarray:
    return np.zeros(3)


def _up() -> np.ndarray:
    return np.array([0.0, 1.0, 0.0])


def _zeros2() -> np.ndarray:
    return np.zeros(2)


def _unit_x() -> np.ndarray:
    return np.array([1.0, 0.0, 0.0])


def _unit_z() -> np.ndarray:
    return np.array([0.0, 0.0, 1.0])


def _ones4() -> np.ndarray:
    return np.ones(4)


@dataclass(eq=False)
class Vertex:
    """A mesh vertex; defaults match those used for attributes a model lacks."""

    position: np.ndarray = field(default_factory=_zeros3)
    normal: np.ndarray = field(default_factory=_up)
    tex_coord: np.ndarray = field(default_factory=_zeros2)
    tangent: np.ndarray = field(default_factory=_unit_x)
    bitangent: np.ndarray = field(default_factory=_unit_z)
    color: np.ndarray = field(default_factory=_ones4)

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float).reshape(3)
        self.normal = np.array(self.normal, dtype=float).reshape(3)
        self.tex_coord = np.array(self.tex_coord, dtype=float).reshape(2)
        self.tangent = np.array(self.tangent, dtype=float).reshape(3)
        self.bitangent = np.array(self.bitangent, dtype=float).reshape(3)
        self.color = np.array(self.color, dtype=float).reshape(4)


@dataclass
class SubMesh:
    """A range of indices drawn with one material."""

    base_index: int = 0
    index_count: int = 0
    material_idx: int = 0

    def triangle_count(self) -> int:
        """Return the number of whole triangles in the range."""
        return self.index_count // 3

    def end_index(self) -> int:
        """Return the index one past the end of the range."""
        return self.base_index + self.index_count

    def is_empty(self) -> bool:
        """Return whether the range holds no indices."""
        return self.index_count == 0

    def is_valid(self) -> bool:
        """Return whether the range holds a positive whole number of triangles."""
        return self.index_count > 0 and self.index_count % 3 == 0


class Mesh:
    """Indexed triangle mesh with bounds and a GPU-sync flag."""

    def __init__(
        self,
        vertices: Iterable[Vertex] = (),
        indices: Iterable[int] = (),
        submeshes: Iterable[SubMesh] = (),
    ) -> None:
        self._vertices: list[Vertex] = list(vertices)
        self._indices: list[int] = [int(i) for i in indices]
        self.submeshes: list[SubMesh] = list(submeshes)
        self.bounds = AABB()
        self._gpu_data_dirty = True

    @property
    def vertices(self) -> list[Vertex]:
        return self._vertices

    @vertices.setter
    def vertices(self, vertices: Iterable[Vertex]) -> None:
        self._vertices = list(vertices)
        self._gpu_data_dirty = True

    @property
    def indices(self) -> list[int]:
        return self._indices

    @indices.setter
    def indices(self, indices: Iterable[int]) -> None:
        self._indices = [int(i) for i in indices]
        self._gpu_data_dirty = True

    @property
    def gpu_data_dirty(self) -> bool:
        """Whether the data changed since it was last uploaded."""
        return self._gpu_data_dirty

    def mark_gpu_data_synced(self) -> None:
        """Record that the GPU copy is up to date."""
        self._gpu_data_dirty = False

    def add_submesh(self, submesh: SubMesh) -> None:
        """Append a sub-mesh range."""
        self.submeshes.append(submesh)

    def clear_submeshes(self) -> None:
        """Remove all sub-mesh ranges."""
        self.submeshes.clear()

    def _triangles(self) -> Iterator[tuple[int, int, int]]:
        count = len(self._vertices)
        it = iter(self._indices)
        for tri in zip(it, it, it):
            if all(idx < count for idx in tri):
                yield tri

    def calculate_normals(self) -> None:
        """Recompute smooth vertex normals from the triangle faces."""
        if not self._indices or not self._vertices:
            return

        for vert in self._vertices:
            vert.normal = np.zeros(3)

        for i0, i1, i2 in self._triangles():
            p0 = self._vertices[i0].position
            p1 = self._vertices[i1].position
            p2 = self._vertices[i2].position
            face_normal = np.cross(p1 - p0, p2 - p0)
            for idx in (i0, i1, i2):
                self._vertices[idx].normal += face_normal

        for vert in self._vertices:
            length = np.linalg.norm(vert.normal)
            if length > 0.0:
                vert.normal = vert.normal / length

        self._gpu_data_dirty = True

    def calculate_tangents(self) -> None:
        """Recompute tangents and bitangents from positions and texture coordinates."""
        if not self._indices or not self._vertices:
            return

        for vert in self._vertices:
            vert.tangent = np.zeros(3)
            vert.bitangent = np.zeros(3)

        for i0, i1, i2 in self._triangles():
            v0, v1, v2 = self._vertices[i0], self._vertices[i1], self._vertices[i2]
            edge1 = v1.position - v0.position
            edge2 = v2.position - v0.position
            duv1 = v1.tex_coord - v0.tex_coord
            duv2 = v2.tex_coord - v0.tex_coord

            det = duv1[0] * duv2[1] - duv2[0] * duv1[1]
            if abs(det) < _TANGENT_EPSILON:
                continue
            f = 1.0 / det

            tangent = f * (duv2[1] * edge1 - duv1[1] * edge2)
            bitangent = f * (-duv2[0] * edge1 + duv1[0] * edge2)

            for vert in (v0, v1, v2):
                vert.tangent += tangent
                vert.bitangent += bitangent

        for vert in self._vertices:
            if np.linalg.norm(vert.tangent) > 0.0:
                # Gram-Schmidt orthogonalization against the normal
                ortho = vert.tangent - vert.normal * np.dot(vert.normal, vert.tangent)
                vert.tangent = ortho / np.linalg.norm(ortho)
            length = np.linalg.norm(vert.bitangent)
            if length > 0.0:
                vert.bitangent = vert.bitangent / length

        self._gpu_data_dirty = True

    def calculate_aabb(self) -> None:
        """Recompute the bounds from the vertex positions."""
        if not self._vertices:
            self.bounds = AABB()
            return
        positions = np.array([vert.position for vert in self._vertices])
        self.bounds = AABB(positions.min(axis=0), positions.max(axis=0))

    def is_valid(self) -> bool:
        """Return whether indices and sub-meshes describe well-formed triangles."""
        if not self._vertices or not self._indices:
            return False
        count = len(self._vertices)
        if any(idx >= count for idx in self._indices):
            return False
        if len(self._indices) % 3 != 0:
            return False
        for submesh in self.submeshes:
            if not submesh.is_valid():
                return False
            if submesh.base_index >= len(self._indices):
                return False
            if submesh.end_index() > len(self._indices):
                return False
        return True

    def clear(self) -> None:
        """Remove all geometry and reset the bounds."""
        self._vertices.clear()
        self._indices.clear()
        self.submeshes.clear()
        self.bounds = AABB()
        self._gpu_data_dirty = True

    def __repr__(self) -> str:
        return (
            f"Mesh(vertices={len(self._vertices)}, indices={len(self._indices)}, "
            f"submeshes={len(self.submeshes)})"
        )