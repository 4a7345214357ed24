import numpy as np
import pytest

from realmengine.lights import AmbientLight, DirectionalLight, PointLight, SpotLight


def test_directional_defaults():
    light = DirectionalLight()
    np.testing.assert_allclose(light.direction, [0.0, -1.0, 0.0])
    np.testing.assert_allclose(light.color, [1.0, 1.0, 1.0])
    assert light.intensity == 1.0
    assert light.cast_shadow is True
    np.testing.assert_allclose(light.light_space_matrix, np.identity(4))


def test_directional_direction_is_normalized():
    light = DirectionalLight((3.0, 0.0, 4.0), (1.0, 0.5, 0.25), 2.0)
    assert np.linalg.norm(light.direction) == pytest.approx(1.0)
    np.testing.assert_allclose(np.cross(light.direction, [3.0, 0.0, 4.0]), np.zeros(3), atol=1e-12)
    assert np.dot(light.direction, [3.0, 0.0, 4.0]) > 0
    np.testing.assert_allclose(light.color, [1.0, 0.5, 0.25])
    assert light.intensity == 2.0


def test_point_light_defaults():
    light = PointLight()
    assert light.range == 10.0
    assert light.constant == 1.0
    assert light.linear == pytest.approx(0.09)
    assert light.quadratic == pytest.approx(0.032)
    assert light.cast_shadow is False


def test_point_light_positional_arguments():
    light = PointLight((1.0, 2.0, 3.0), (0.2, 0.4, 0.6), 3.5, 25.0)
    np.testing.assert_allclose(light.position, [1.0, 2.0, 3.0])
    np.testing.assert_allclose(light.color, [0.2, 0.4, 0.6])
    assert light.intensity == 3.5
    assert light.range == 25.0


def test_spot_light_defaults():
    light = SpotLight()
    assert light.inner_cutoff == pytest.approx(0.9)
    assert light.outer_cutoff == pytest.approx(0.8)
    assert light.range == 10.0
    np.testing.assert_allclose(light.direction, [0.0, -1.0, 0.0])


def test_spot_light_direction_normalized():
    light = SpotLight((0.0, 5.0, 0.0), (0.0, -2.0, 2.0), (1.0, 1.0, 1.0), 4.0)
    assert np.linalg.norm(light.direction) == pytest.approx(1.0)
    np.testing.assert_allclose(light.position, [0.0, 5.0, 0.0])
    assert light.intensity == 4.0


def test_cutoff_angles_become_cosines():
    light = SpotLight()
    light.set_cutoff_angles(0.0, 90.0)
    assert light.inner_cutoff == pytest.approx(1.0)
    assert light.outer_cutoff == pytest.approx(0.0, abs=1e-12)


def test_wider_cone_has_smaller_cosine():
    light = SpotLight()
    light.set_cutoff_angles(12.5, 17.5)
    assert light.inner_cutoff > light.outer_cutoff


def test_ambient_defaults():
    light = AmbientLight()
    np.testing.assert_allclose(light.color, [0.03, 0.03, 0.03])
    assert light.intensity == 1.0


def test_lights_do_not_share_vectors():
    first = PointLight()
    second = PointLight()
    first.color[0] = 0.0
    assert second.color[0] == 1.0