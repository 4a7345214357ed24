"""Render camera with lazily rebuilt matrices and view-frustum culling."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

import numpy as np

from realmengine.geometry import AABB
from realmengine.logger import info


def _vec3(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    return vector / length if length > 0.0 else vector


def _quat_mul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    aw, ax, ay, az = a
    bw, bx, by, bz = b
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
        ]
    )


def _angle_axis(angle: float, axis) -> np.ndarray:
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], math.sin(half) * _vec3(axis)))


def _quat_to_mat3(q: np.ndarray) -> np.ndarray:
    w, x, y, z = q
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


def _mat3_to_quat(m: np.ndarray) -> np.ndarray:
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0.0:
        s = 0.5 / math.sqrt(trace + 1.0)
        q = [0.25 / s, (m[2, 1] - m[1, 2]) * s, (m[0, 2] - m[2, 0]) * s, (m[1, 0] - m[0, 1]) * s]
    elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = 2.0 * math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2])
        q = [(m[2, 1] - m[1, 2]) / s, 0.25 * s, (m[0, 1] + m[1, 0]) / s, (m[0, 2] + m[2, 0]) / s]
    elif m[1, 1] > m[2, 2]:
        s = 2.0 * math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2])
        q = [(m[0, 2] - m[2, 0]) / s, (m[0, 1] + m[1, 0]) / s, 0.25 * s, (m[1, 2] + m[2, 1]) / s]
    else:
        s = 2.0 * math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1])
        q = [(m[1, 0] - m[0, 1]) / s, (m[0, 2] + m[2, 0]) / s, (m[1, 2] + m[2, 1]) / s, 0.25 * s]
    return np.array(q, dtype=float)


def _perspective(fov_radians: float, aspect: float, near: float, far: float) -> np.ndarray:
    f = 1.0 / math.tan(fov_radians / 2.0)
    proj = np.zeros((4, 4))
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = -(far + near) / (far - near)
    proj[2, 3] = -(2.0 * far * near) / (far - near)
    proj[3, 2] = -1.0
    return proj


def _ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    proj = np.identity(4)
    proj[0, 0] = 2.0 / (right - left)
    proj[1, 1] = 2.0 / (top - bottom)
    proj[2, 2] = -2.0 / (far - near)
    proj[0, 3] = -(right + left) / (right - left)
    proj[1, 3] = -(top + bottom) / (top - bottom)
    proj[2, 3] = -(far + near) / (far - near)
    return proj


def _zero_planes() -> np.ndarray:
    return np.zeros((6, 4))


@dataclass(eq=False)
class Frustum:
    """Six planes (A, B, C, D) with Ax + By + Cz + D >= 0 inside.

    Order: left, right, bottom, top, near, far.
    """

    planes: np.ndarray = field(default_factory=_zero_planes)

    def __post_init__(self) -> None:
        self.planes = np.array(self.planes, dtype=float).reshape(6, 4)

    def contains_point(self, point) -> bool:
        """Return whether the point lies on the inner side of every plane."""
        p = _vec3(point)
        return all(np.dot(plane[:3], p) + plane[3] >= 0.0 for plane in self.planes)

    def contains_sphere(self, center, r: float) -> bool:
        """Return whether a sphere reaches the inner side of every plane."""
        c = _vec3(center)
        return all(np.dot(plane[:3], c) + plane[3] >= -r for plane in self.planes)

    def contains_aabb(self, bounds: AABB) -> bool:
        """Return whether a box reaches the inner side of every plane."""
        for plane in self.planes:
            positive = np.where(plane[:3] >= 0.0, bounds.max, bounds.min)
            if np.dot(plane[:3], positive) + plane[3] < 0.0:
                return False
        return True


class ProjectionType(enum.Enum):
    PERSPECTIVE = 0
    ORTHOGRAPHIC = 1


class RenderCamera:
    """Camera holding a pose and projection, with matrices rebuilt on demand."""

    def __init__(self) -> None:
        self._position = np.zeros(3)
        self._rotation = np.array([1.0, 0.0, 0.0, 0.0])

        self._projection_type = ProjectionType.PERSPECTIVE
        self._fov = 45.0
        self._aspect_ratio = 16.0 / 9.0
        self._near_plane = 0.1
        self._far_plane = 1000.0

        self._ortho_left = -10.0
        self._ortho_right = 10.0
        self._ortho_bottom = -10.0
        self._ortho_top = 10.0

        self._view_matrix = np.identity(4)
        self._proj_matrix = np.identity(4)
        self._view_proj_matrix = np.identity(4)
        self._frustum = Frustum()

        self._view_dirty = True
        self._proj_dirty = True

    def initialize(self) -> None:
        info("Main Render Camera initialized.")

    def disposal(self) -> None:
        info("Main Render Camera disposed all resources.")

    # pose

    @property
    def position(self) -> np.ndarray:
        return self._position

    @property
    def rotation(self) -> np.ndarray:
        """Orientation as a unit quaternion (w, x, y, z)."""
        return self._rotation

    def set_position(self, pos) -> None:
        self._position = _vec3(pos)
        self._view_dirty = True

    def set_rotation(self, rotation) -> None:
        """Set the orientation from a quaternion (w, x, y, z); it is normalized."""
        self._rotation = _normalize(np.array(rotation, dtype=float).reshape(4))
        self._view_dirty = True

    def set_rotation_euler(self, euler_angles) -> None:
        """Set the orientation from pitch, yaw and roll in degrees."""
        pitch, yaw, roll = (math.radians(a) for a in _vec3(euler_angles))
        q_pitch = _angle_axis(pitch, (1.0, 0.0, 0.0))
        q_yaw = _angle_axis(yaw, (0.0, 1.0, 0.0))
        q_roll = _angle_axis(roll, (0.0, 0.0, 1.0))
        self._rotation = _normalize(_quat_mul(_quat_mul(q_yaw, q_pitch), q_roll))
        self._view_dirty = True

    def look_at(self, target, up=(0.0, 1.0, 0.0)) -> None:
        """Turn the camera so that its forward axis points at target."""
        forward = _normalize(_vec3(target) - self._position)
        right = _normalize(np.cross(forward, _vec3(up)))
        local_up = _normalize(np.cross(right, forward))
        rotation_matrix = np.column_stack((right, local_up, -forward))
        self._rotation = _mat3_to_quat(rotation_matrix)
        self._view_dirty = True

    def local_forward(self) -> np.ndarray:
        return _quat_to_mat3(self._rotation) @ np.array([0.0, 0.0, -1.0])

    def local_right(self) -> np.ndarray:
        return _quat_to_mat3(self._rotation) @ np.array([1.0, 0.0, 0.0])

    def local_up(self) -> np.ndarray:
        return _quat_to_mat3(self._rotation) @ np.array([0.0, 1.0, 0.0])

    # projection

    def set_perspective(self, fov: float, aspect_ratio: float, near_plane: float, far_plane: float) -> None:
        """Use a perspective projection; fov is the vertical angle in degrees."""
        self._projection_type = ProjectionType.PERSPECTIVE
        self._fov = fov
        self._aspect_ratio = aspect_ratio
        self._near_plane = near_plane
        self._far_plane = far_plane
        self._proj_dirty = True

    def set_orthographic(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_plane: float,
        far_plane: float,
    ) -> None:
        """Use an orthographic projection of the given box."""
        self._projection_type = ProjectionType.ORTHOGRAPHIC
        self._ortho_left = left
        self._ortho_right = right
        self._ortho_bottom = bottom
        self._ortho_top = top
        self._near_plane = near_plane
        self._far_plane = far_plane
        self._proj_dirty = True

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = value
        self._proj_dirty = True

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value: float) -> None:
        self._aspect_ratio = value
        self._proj_dirty = True

    @property
    def near_plane(self) -> float:
        return self._near_plane

    @near_plane.setter
    def near_plane(self, value: float) -> None:
        self._near_plane = value
        self._proj_dirty = True

    @property
    def far_plane(self) -> float:
        return self._far_plane

    @far_plane.setter
    def far_plane(self, value: float) -> None:
        self._far_plane = value
        self._proj_dirty = True

    @property
    def projection_type(self) -> ProjectionType:
        return self._projection_type

    # matrices

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix, rebuilding it if the pose changed."""
        if self._view_dirty:
            self._update_view_matrix()
            self._view_dirty = False
        return self._view_matrix

    def proj_matrix(self) -> np.ndarray:
        """Return the projection matrix, rebuilding it if its parameters changed."""
        if self._proj_dirty:
            self._update_projection_matrix()
            self._proj_dirty = False
        return self._proj_matrix

    @property
    def view_proj_matrix(self) -> np.ndarray:
        """Combined matrix as of the last update()."""
        return self._view_proj_matrix

    @property
    def frustum(self) -> Frustum:
        """View frustum as of the last update()."""
        return self._frustum

    def update(self) -> None:
        """Rebuild stale matrices, the combined matrix and the frustum."""
        if not self._view_dirty and not self._proj_dirty:
            return
        if self._view_dirty:
            self._update_view_matrix()
            self._view_dirty = False
        if self._proj_dirty:
            self._update_projection_matrix()
            self._proj_dirty = False
        self._view_proj_matrix = self._proj_matrix @ self._view_matrix
        self._extract_frustum()

    def _update_view_matrix(self) -> None:
        rotation = np.identity(4)
        rotation[:3, :3] = _quat_to_mat3(self._rotation)
        translation = np.identity(4)
        translation[:3, 3] = -self._position
        self._view_matrix = rotation @ translation

    def _update_projection_matrix(self) -> None:
        if self._projection_type is ProjectionType.PERSPECTIVE:
            self._proj_matrix = _perspective(
                math.radians(self._fov), self._aspect_ratio, self._near_plane, self._far_plane
            )
        else:
            self._proj_matrix = _ortho(
                self._ortho_left,
                self._ortho_right,
                self._ortho_bottom,
                self._ortho_top,
                self._near_plane,
                self._far_plane,
            )

    def _extract_frustum(self) -> None:
        vp = self._view_proj_matrix
        w_row = vp[3]
        planes = np.array(
            [
                w_row + vp[0],
                w_row - vp[0],
                w_row + vp[1],
                w_row - vp[1],
                w_row + vp[2],
                w_row - vp[2],
            ]
        )
        lengths = np.linalg.norm(planes[:, :3], axis=1)
        self._frustum = Frustum(planes / lengths[:, None])