"""Surface materials: BRDFs, specular reflection and emission."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

from raytracer.geometry import HitRecord, normalize
from raytracer.sampling import random_float, sample_cosine_hemisphere


def _zeros() -> np.ndarray:
    return np.zeros(3)


def _color(value) -> np.ndarray:
    return np.asarray(value, dtype=float).copy()


def _reflect(incident: np.ndarray, normal: np.ndarray) -> np.ndarray:
    return incident - 2.0 * float(normal @ incident) * normal


def _schlick(f0: np.ndarray, cos_theta: float) -> np.ndarray:
    return f0 + (np.ones(3) - f0) * (1.0 - cos_theta) ** 5


@dataclass(eq=False)
class Reflection:
    """Outcome of a reflection query.

    ``direction`` is the reflected or sampled direction (possibly scaled by an
    inverse density), ``kr`` the reflection coefficient, and ``specular`` tells
    whether a mirror-like reflection took place.
    """

    direction: np.ndarray = field(default_factory=_zeros)
    kr: np.ndarray = field(default_factory=_zeros)
    specular: bool = False


def ggx_pdf(n, h, v, alpha: float) -> float:
    """Density of sampling the half vector ``h`` from the GGX distribution."""
    n, h, v = (np.asarray(a, dtype=float) for a in (n, h, v))
    n_dot_h = max(float(n @ h), 0.0)
    a2 = alpha * alpha
    d = a2 / (math.pi * (n_dot_h * n_dot_h * (a2 - 1.0) + 1.0) ** 2)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(d * n_dot_h) / np.float64(4.0 * float(h @ v)))


def sample_ggx_vndf(n, v, roughness: float) -> np.ndarray:
    """Sample a half vector about ``n`` from the GGX distribution."""
    n = np.asarray(n, dtype=float)
    alpha = roughness * roughness
    up = np.array([0.0, 0.0, 1.0]) if abs(n[2]) < 0.999 else np.array([1.0, 0.0, 0.0])
    tangent_x = normalize(np.cross(up, n))
    tangent_y = np.cross(n, tangent_x)

    xi1 = random_float()
    xi2 = random_float()
    theta = math.atan(alpha * math.sqrt(xi1) / math.sqrt(1.0 - xi1))
    phi = 2.0 * math.pi * xi2

    sin_theta, cos_theta = math.sin(theta), math.cos(theta)
    return normalize(
        sin_theta * math.cos(phi) * tangent_x
        + sin_theta * math.sin(phi) * tangent_y
        + cos_theta * n
    )


class Material(ABC):
    """Base class of all materials."""

    def __init__(self, albedo=None) -> None:
        self.albedo = _zeros() if albedo is None else _color(albedo)
        self.ambient_color = _zeros()

    def emission(self, rec: HitRecord, v) -> np.ndarray:
        """Radiance emitted towards ``v``; black unless overridden."""
        return _zeros()

    @abstractmethod
    def brdf(self, rec: HitRecord, l, v) -> np.ndarray:
        """Ratio of radiance leaving along ``v`` to irradiance arriving from ``l``."""

    @abstractmethod
    def reflection(self, rec: HitRecord, v) -> Reflection:
        """Reflect the view direction ``v`` at the hit ``rec``."""


class Lambertian(Material):
    """Ideal diffuse surface."""

    def __init__(self, albedo) -> None:
        super().__init__(albedo)

    def brdf(self, rec, l, v):
        return self.albedo / math.pi

    def reflection(self, rec, v):
        return Reflection(sample_cosine_hemisphere(rec.normal), _zeros(), False)


class Metallic(Material):
    """Blinn-Phong lobe with Schlick-Fresnel mirror reflection."""

    def __init__(self, parallel_reflection, shininess: int, albedo) -> None:
        super().__init__(albedo)
        self.parallel_reflection = _color(parallel_reflection)
        self.shininess = shininess

    def brdf(self, rec, l, v):
        with np.errstate(invalid="ignore", divide="ignore"):
            bisector = normalize(normalize(l) + normalize(v))
            cos_theta = float(rec.normal @ bisector)
            if cos_theta < 0.0:
                return _zeros()
            cos_theta = cos_theta**self.shininess
            return (self.albedo * cos_theta) / math.pi

    def reflection(self, rec, v):
        v = np.asarray(v, dtype=float)
        cos_theta = float(rec.normal @ normalize(v))
        if cos_theta < 0:
            return Reflection()
        d = normalize(-v)
        r = normalize(_reflect(d, rec.normal))
        return Reflection(r, _schlick(self.parallel_reflection, cos_theta), True)


class TorrenceSparrow(Material):
    """Microfacet surface with a GGX normal distribution."""

    def __init__(self, parallel_reflection, roughness: float, albedo) -> None:
        super().__init__(albedo)
        self.parallel_reflection = _color(parallel_reflection)
        self.roughness = float(roughness)

    def brdf(self, rec, l, v):
        l = np.asarray(l, dtype=float)
        v = np.asarray(v, dtype=float)
        n = rec.normal
        with np.errstate(invalid="ignore", divide="ignore"):
            h = normalize(normalize(l) + normalize(v))
            alpha_sq = np.float64(self.roughness * self.roughness)
            cos_m = np.float64(h @ n)
            cos_4 = cos_m**4
            tan_2 = (1.0 - cos_m * cos_m) / (cos_m * cos_m)
            d = alpha_sq / (np.pi * cos_4 * (alpha_sq + tan_2) * (alpha_sq + tan_2))
            cos_i = float(n @ l)
            cos_r = float(n @ v)
            if cos_i < 0.0 or cos_r < 0.0:
                return _zeros()
            return (self.albedo * d) / np.float64(4.0 * cos_i * cos_r)

    def reflection(self, rec, v):
        v = np.asarray(v, dtype=float)
        cos_theta = float(rec.normal @ normalize(v))
        if cos_theta < 0:
            return Reflection()
        d = normalize(-v)
        h = sample_ggx_vndf(rec.normal, v, self.roughness)
        pdf = ggx_pdf(rec.normal, h, v, self.roughness)
        with np.errstate(invalid="ignore", divide="ignore"):
            r = _reflect(d, h) / np.float64(pdf)
        return Reflection(r, _schlick(self.parallel_reflection, cos_theta), True)


class Emissive(Material):
    """A light-emitting surface that reflects nothing."""

    def __init__(self, emitted_radiance) -> None:
        super().__init__()
        self.emitted_radiance = _color(emitted_radiance)

    def emission(self, rec, v):
        return self.emitted_radiance.copy()

    def brdf(self, rec, l, v):
        return np.ones(3)

    def reflection(self, rec, v):
        return Reflection()


class EmissiveRectangle(Material):
    """Emitter used for rectangular area lights sampled directly by the scene."""

    def __init__(self, emitted_radiance) -> None:
        super().__init__()
        self.emitted_radiance = _color(emitted_radiance)

    def emission(self, rec, v):
        return self.emitted_radiance.copy()

    def brdf(self, rec, l, v):
        return np.ones(3)

    def reflection(self, rec, v):
        return Reflection()