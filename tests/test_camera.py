import math

import numpy as np
import pytest

from realmengine.camera import Frustum, ProjectionType, RenderCamera
from realmengine.geometry import AABB


def _unit_cube_frustum() -> Frustum:
    return Frustum(
        [
            [1.0, 0.0, 0.0, 1.0],
            [-1.0, 0.0, 0.0, 1.0],
            [0.0, 1.0, 0.0, 1.0],
            [0.0, -1.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 1.0],
            [0.0, 0.0, -1.0, 1.0],
        ]
    )


def test_frustum_contains_point():
    frustum = _unit_cube_frustum()
    assert frustum.contains_point((0.0, 0.0, 0.0))
    assert frustum.contains_point((1.0, 1.0, 1.0))
    assert not frustum.contains_point((2.0, 0.0, 0.0))


def test_frustum_contains_sphere():
    frustum = _unit_cube_frustum()
    assert frustum.contains_sphere((1.5, 0.0, 0.0), 1.0)
    assert not frustum.contains_sphere((1.5, 0.0, 0.0), 0.4)


def test_frustum_contains_aabb():
    frustum = _unit_cube_frustum()
    assert frustum.contains_aabb(AABB((0.5, 0.5, 0.5), (3.0, 3.0, 3.0)))
    assert not frustum.contains_aabb(AABB((2.0, 2.0, 2.0), (3.0, 3.0, 3.0)))


def test_default_frustum_accepts_everything():
    frustum = Frustum()
    assert frustum.contains_point((1e6, -1e6, 5.0))


def test_camera_defaults():
    camera = RenderCamera()
    assert camera.fov == 45.0
    assert camera.aspect_ratio == pytest.approx(16.0 / 9.0)
    assert camera.near_plane == pytest.approx(0.1)
    assert camera.far_plane == 1000.0
    assert camera.projection_type is ProjectionType.PERSPECTIVE
    np.testing.assert_allclose(camera.rotation, [1.0, 0.0, 0.0, 0.0])


def test_identity_axes():
    camera = RenderCamera()
    np.testing.assert_allclose(camera.local_forward(), [0.0, 0.0, -1.0])
    np.testing.assert_allclose(camera.local_right(), [1.0, 0.0, 0.0])
    np.testing.assert_allclose(camera.local_up(), [0.0, 1.0, 0.0])


def test_set_rotation_normalizes():
    camera = RenderCamera()
    camera.set_rotation((2.0, 0.0, 2.0, 0.0))
    assert np.linalg.norm(camera.rotation) == pytest.approx(1.0)


def test_euler_yaw_turns_forward():
    camera = RenderCamera()
    camera.set_rotation_euler((0.0, 90.0, 0.0))
    np.testing.assert_allclose(camera.local_forward(), [-1.0, 0.0, 0.0], atol=1e-9)


def test_look_at_straight_ahead_is_identity():
    camera = RenderCamera()
    camera.look_at((0.0, 0.0, -5.0))
    np.testing.assert_allclose(camera.rotation, [1.0, 0.0, 0.0, 0.0], atol=1e-9)


@pytest.mark.parametrize("target", [(3.0, 1.0, -2.0), (-4.0, 2.0, 5.0), (1.0, -3.0, 0.5)])
def test_look_at_forward_points_at_target(target):
    camera = RenderCamera()
    camera.set_position((1.0, 0.5, 2.0))
    camera.look_at(target)
    direction = np.array(target) - np.array((1.0, 0.5, 2.0))
    direction /= np.linalg.norm(direction)
    np.testing.assert_allclose(camera.local_forward(), direction, atol=1e-9)
    assert np.linalg.norm(camera.rotation) == pytest.approx(1.0)


def test_view_matrix_translation_for_identity_rotation():
    camera = RenderCamera()
    camera.set_position((1.0, 2.0, 3.0))
    view = camera.view_matrix()
    np.testing.assert_allclose(view[:3, 3], [-1.0, -2.0, -3.0])
    np.testing.assert_allclose(view[:3, :3], np.identity(3))


def test_view_matrix_rebuilt_after_move():
    camera = RenderCamera()
    first = camera.view_matrix().copy()
    camera.set_position((0.0, 0.0, 4.0))
    np.testing.assert_allclose(camera.view_matrix()[:3, 3], [0.0, 0.0, -4.0])
    np.testing.assert_allclose(first, np.identity(4))


def test_perspective_maps_near_and_far_planes():
    camera = RenderCamera()
    camera.set_perspective(60.0, 1.5, 0.5, 50.0)
    proj = camera.proj_matrix()
    near = proj @ np.array([0.0, 0.0, -0.5, 1.0])
    far = proj @ np.array([0.0, 0.0, -50.0, 1.0])
    assert near[2] / near[3] == pytest.approx(-1.0)
    assert far[2] / far[3] == pytest.approx(1.0)
    assert proj[1, 1] / proj[0, 0] == pytest.approx(1.5)


def test_orthographic_maps_box_corners():
    camera = RenderCamera()
    camera.set_orthographic(-4.0, 4.0, -2.0, 2.0, 1.0, 9.0)
    assert camera.projection_type is ProjectionType.ORTHOGRAPHIC
    proj = camera.proj_matrix()
    np.testing.assert_allclose(proj @ np.array([4.0, 2.0, -9.0, 1.0]), [1.0, 1.0, 1.0, 1.0])
    np.testing.assert_allclose(proj @ np.array([-4.0, -2.0, -1.0, 1.0]), [-1.0, -1.0, -1.0, 1.0])


def test_fov_setter_rebuilds_projection():
    camera = RenderCamera()
    wide = camera.proj_matrix()[1, 1]
    camera.fov = 20.0
    assert camera.proj_matrix()[1, 1] > wide


def test_view_proj_is_identity_before_update():
    camera = RenderCamera()
    np.testing.assert_allclose(camera.view_proj_matrix, np.identity(4))


def test_update_builds_frustum():
    camera = RenderCamera()
    camera.update()
    np.testing.assert_allclose(camera.view_proj_matrix, camera.proj_matrix() @ camera.view_matrix())
    frustum = camera.frustum
    assert frustum.contains_point((0.0, 0.0, -10.0))
    assert not frustum.contains_point((0.0, 0.0, 10.0))
    assert not frustum.contains_point((0.0, 0.0, -2000.0))
    assert not frustum.contains_point((0.0, 0.0, -0.05))
    np.testing.assert_allclose(np.linalg.norm(frustum.planes[:, :3], axis=1), np.ones(6))


def test_update_follows_camera_position():
    camera = RenderCamera()
    camera.set_position((100.0, 0.0, 0.0))
    camera.update()
    assert camera.frustum.contains_point((100.0, 0.0, -10.0))
    assert not camera.frustum.contains_point((0.0, 0.0, -10.0))


def test_orthographic_frustum():
    camera = RenderCamera()
    camera.set_orthographic(-10.0, 10.0, -10.0, 10.0, 0.1, 100.0)
    camera.update()
    assert camera.frustum.contains_point((5.0, -5.0, -50.0))
    assert not camera.frustum.contains_point((20.0, 0.0, -5.0))
    assert not math.isnan(camera.frustum.planes.sum())