"""Random numbers and cosine-weighted hemisphere sampling."""

from __future__ import annotations

import math
import random

import numpy as np

from raytracer.geometry import normalize


def random_float() -> float:
    """Return a uniform float in [0, 1)."""
    return random.random()


def probability(p: float) -> bool:
    """Return True with probability ``p``."""
    return random_float() < p


def sample_cosine_hemisphere_local() -> np.ndarray:
    """Cosine-weighted direction in local space, +z being the normal."""
    u1, u2 = random_float(), random_float()
    r = math.sqrt(u1)
    theta = 2.0 * math.pi * u2
    return np.array([r * math.cos(theta), r * math.sin(theta), math.sqrt(1.0 - u1)])


def to_world_space(local, normal) -> np.ndarray:
    """Express ``local`` in an orthonormal basis built around ``normal``."""
    normal = np.asarray(normal, dtype=float)
    local = np.asarray(local, dtype=float)
    up = np.array([0.0, 0.0, 1.0]) if abs(normal[2]) < 0.999 else np.array([1.0, 0.0, 0.0])
    tangent = normalize(np.cross(up, normal))
    bitangent = np.cross(normal, tangent)
    return normalize(tangent * local[0] + bitangent * local[1] + normal * local[2])


def cosine_hemisphere_pdf(normal, direction) -> float:
    """Density of the cosine-weighted hemisphere at ``direction``."""
    cos_theta = float(np.dot(normal, normalize(direction)))
    return cos_theta / math.pi if cos_theta > 0.0 else 0.0


def sample_cosine_hemisphere(normal) -> np.ndarray:
    """World-space sample about ``normal``, scaled by the inverse of its density."""
    direction = to_world_space(sample_cosine_hemisphere_local(), normal)
    with np.errstate(divide="ignore", invalid="ignore"):
        return direction / cosine_hemisphere_pdf(normal, direction)