import math

import numpy as np
import pytest

from raytracer.geometry import (
    FLOAT_MAX,
    HitRecord,
    Interval,
    Ray,
    normalize,
    rotation,
    scaling,
    translation,
    vec3,
)


def test_vec3_components():
    assert np.array_equal(vec3(1, 2, 3), np.array([1.0, 2.0, 3.0]))


def test_ray_at_zero_is_origin():
    ray = Ray(vec3(1, 2, 3), vec3(0, 0, -1))
    assert np.allclose(ray.at(0.0), ray.origin)


def test_ray_at_moves_along_direction():
    ray = Ray(vec3(1, 2, 3), normalize(vec3(1, 1, 0)))
    p = ray.at(2.0)
    assert np.linalg.norm(p - ray.origin) == pytest.approx(2.0)
    assert np.allclose(normalize(p - ray.origin), ray.direction)


def test_interval_contains_is_inclusive():
    interval = Interval(0.5, 2.0)
    assert interval.contains(0.5)
    assert interval.contains(2.0)
    assert interval.contains(1.0)
    assert not interval.contains(0.49)
    assert not interval.contains(2.01)


def test_hit_record_defaults():
    rec = HitRecord()
    assert rec.t == FLOAT_MAX
    assert rec.material is None
    assert np.array_equal(rec.point, np.zeros(3))
    assert np.array_equal(rec.normal, np.zeros(3))


@pytest.mark.parametrize("v", [(3, 4, 0), (1, 1, 1), (-2, 0.5, 7)])
def test_normalize_unit_and_parallel(v):
    n = normalize(v)
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.allclose(np.cross(n, v), 0.0)
    assert np.dot(n, v) > 0


def test_translation_moves_points_not_directions():
    m = translation((1, -2, 3))
    p = (m @ np.array([1.0, 1.0, 1.0, 1.0]))[:3]
    d = (m @ np.array([1.0, 1.0, 1.0, 0.0]))[:3]
    assert np.allclose(p, np.array([1, 1, 1]) + np.array([1, -2, 3]))
    assert np.allclose(d, [1, 1, 1])


def test_scaling_diagonal():
    m = scaling((2, 3, 4))
    assert np.allclose(np.diag(m), [2, 3, 4, 1])
    assert np.count_nonzero(m - np.diag(np.diag(m))) == 0


def test_rotation_about_y_maps_x_to_minus_z():
    m = rotation(math.pi / 2, (0, 1, 0))
    assert np.allclose((m @ np.array([1.0, 0, 0, 0]))[:3], [0, 0, -1])


@pytest.mark.parametrize("axis", [(0, 1, 0), (1, 1, 0), (0.3, -2, 5)])
def test_rotation_is_orthonormal(axis):
    r = rotation(0.7, axis)[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.linalg.det(r) == pytest.approx(1.0)
    assert np.allclose(r @ normalize(axis), normalize(axis))


def test_rotation_inverse_and_full_turn():
    axis = (1, 2, 3)
    assert np.allclose(rotation(0.4, axis) @ rotation(-0.4, axis), np.eye(4))
    assert np.allclose(rotation(2 * math.pi, axis), np.eye(4))