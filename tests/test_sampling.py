import math
import random

import numpy as np
import pytest

from raytracer.geometry import normalize
from raytracer.sampling import (
    cosine_hemisphere_pdf,
    probability,
    random_float,
    sample_cosine_hemisphere,
    sample_cosine_hemisphere_local,
    to_world_space,
)

NORMALS = [(0, 0, 1), (0, 1, 0), (1, 0, 0), normalize((1, -2, 0.5)), (0, 0, -1)]


def test_random_float_range():
    values = [random_float() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_seed_reproducible():
    random.seed(7)
    first = [sample_cosine_hemisphere_local() for _ in range(3)]
    random.seed(7)
    second = [sample_cosine_hemisphere_local() for _ in range(3)]
    assert all(np.array_equal(a, b) for a, b in zip(first, second))


def test_probability_extremes():
    assert not any(probability(0.0) for _ in range(200))
    assert not any(probability(-1.0) for _ in range(200))
    assert all(probability(1.0) for _ in range(200))


def test_local_samples_on_upper_hemisphere():
    for _ in range(200):
        s = sample_cosine_hemisphere_local()
        assert np.linalg.norm(s) == pytest.approx(1.0)
        assert s[2] >= 0.0


@pytest.mark.parametrize("normal", NORMALS)
def test_to_world_space_basis(normal):
    n = normalize(normal)
    assert np.allclose(to_world_space((0, 0, 1), n), n)
    tangent = to_world_space((1, 0, 0), n)
    bitangent = to_world_space((0, 1, 0), n)
    assert np.dot(tangent, n) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(bitangent, n) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(tangent, bitangent) == pytest.approx(0.0, abs=1e-9)


def test_pdf_values():
    n = np.array([0.0, 1.0, 0.0])
    assert cosine_hemisphere_pdf(n, n) == pytest.approx(1.0 / math.pi)
    assert cosine_hemisphere_pdf(n, (1, 0, 0)) == 0.0
    assert cosine_hemisphere_pdf(n, (0, -1, 0)) == 0.0
    assert cosine_hemisphere_pdf(n, (0, 5, 0)) == pytest.approx(cosine_hemisphere_pdf(n, n))


@pytest.mark.parametrize("normal", NORMALS)
def test_weighted_samples_scaled_by_inverse_pdf(normal):
    n = normalize(normal)
    for _ in range(50):
        d = sample_cosine_hemisphere(n)
        unit = normalize(d)
        assert np.dot(unit, n) > 0
        assert np.linalg.norm(d) == pytest.approx(1.0 / cosine_hemisphere_pdf(n, unit))