"""Scenes: direct lighting, recursive ray tracing and path tracing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from raytracer.camera import Camera
from raytracer.geometry import FLOAT_MAX, HitRecord, Interval, Ray, normalize
from raytracer.sampling import probability, random_float
from raytracer.shapes import SceneObject

_EPSILON = 0.001


@dataclass(eq=False)
class PointLight:
    """An isotropic point light."""

    location: np.ndarray
    intensity: np.ndarray

    def __post_init__(self) -> None:
        self.location = np.asarray(self.location, dtype=float)
        self.intensity = np.asarray(self.intensity, dtype=float)


@dataclass(eq=False)
class Scene:
    """Objects, point lights, a camera and a background colour."""

    camera: Camera = field(default_factory=Camera)
    objects: list[SceneObject] = field(default_factory=list)
    lights: list[PointLight] = field(default_factory=list)
    sky: np.ndarray = field(default_factory=lambda: np.zeros(3))
    ambient_light: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def trace_ray(self, ray: Ray) -> tuple[HitRecord, int]:
        """Return the nearest hit and how many objects improved on it."""
        rec = HitRecord()
        t_range = Interval(_EPSILON, FLOAT_MAX)
        hits = 0
        for obj in self.objects:
            found = obj.hit(ray, t_range)
            if found is not None:
                rec = found
                t_range.max = min(t_range.max, rec.t)
                hits += 1
        return rec, hits

    def in_shadow(self, p, light: PointLight) -> bool:
        """Whether something other than an area light blocks ``p`` from ``light``."""
        p = np.asarray(p, dtype=float)
        direction = normalize(light.location - p)
        light_t = float(np.linalg.norm(light.location - p) / np.linalg.norm(direction))
        t_range = Interval(0.0, light_t)
        bias = _EPSILON
        min_hit = light_t
        shadow_ray = Ray(p + bias * direction, direction)
        for obj in self.objects:
            found = obj.hit(shadow_ray, t_range)
            if found is not None and not obj.shape.is_rectangle:
                min_hit = min(min_hit, max(found.t, 2 * bias))
        return bias < min_hit < light_t

    def irradiance(self, rec: HitRecord, light: PointLight) -> np.ndarray:
        """Irradiance at ``rec`` from ``light`` with inverse-square falloff."""
        l = light.location - rec.point
        r_square = float(l @ l)
        cos_theta = float(rec.normal @ normalize(l))
        if cos_theta < 0:
            return np.zeros(3)
        with np.errstate(divide="ignore", invalid="ignore"):
            return (light.intensity * cos_theta) / np.float64(r_square)

    def radiance(self, rec: HitRecord) -> np.ndarray:
        """Radiance reflected towards the camera from all unshadowed point lights."""
        total = np.zeros(3)
        for light in self.lights:
            if self.in_shadow(rec.point, light):
                continue
            v = self.camera.center - rec.point
            l = light.location - rec.point
            brdf = rec.material.brdf(rec, l, v)
            total = total + self.irradiance(rec, light) * brdf
        return total

    def radiance_from_emissive(self, rec: HitRecord) -> np.ndarray:
        """Direct light from rectangular area lights, five samples per light."""
        total = np.zeros(3)
        v = self.camera.center - rec.point
        if np.any(rec.material.emission(rec, v) != 0.0):
            return total
        for obj in self.objects:
            if not obj.shape.is_rectangle:
                continue
            rect = obj.shape
            lo, hi = rect.low, rect.high
            for _ in range(5):
                sample_x = random_float() * (hi[0] - lo[0]) + lo[0]
                sample_z = random_float() * (hi[2] - lo[2]) + lo[2]
                sample = np.array([sample_x, lo[1], sample_z])
                blocker = PointLight(sample, np.zeros(3))
                if not self.in_shadow(rec.point + _EPSILON * rec.normal, blocker):
                    cos_theta = float(rec.normal @ normalize(sample - rec.point))
                    total = total + obj.material.emission(rec, v) * cos_theta
        return (total * rec.material.albedo) / 500.0

    def compute_color(self, ray: Ray, bounces: int) -> np.ndarray:
        """One path-traced radiance estimate along ``ray`` (Russian roulette)."""
        rec, hits = self.trace_ray(ray)
        return self._shade(ray, rec, hits, bounces)

    def _shade(self, ray: Ray, rec: HitRecord, hits: int, bounces: int) -> np.ndarray:
        if not hits:
            return np.asarray(self.sky, dtype=float).copy()
        material = rec.material
        v = normalize(-ray.direction)
        emitted = material.emission(rec, v)
        reflected = np.zeros(3)

        prob = 1.0 - 1.0 / bounces if bounces else -math.inf

        refl = material.reflection(rec, v)
        kr = refl.kr
        pdf_inverse = float(np.linalg.norm(refl.direction))
        sampled = normalize(refl.direction)
        cos_theta_i = float(rec.normal @ sampled)

        if probability(prob) and np.any(sampled != 0.0) and pdf_inverse > 1e-5:
            next_ray = Ray(rec.point + _EPSILON * sampled, sampled)
            next_rec, next_hits = self.trace_ray(next_ray)
            if next_hits:
                incoming = self._shade(next_ray, next_rec, next_hits, bounces)
                with np.errstate(invalid="ignore", over="ignore"):
                    reflected = (
                        incoming
                        * cos_theta_i
                        * pdf_inverse
                        * material.brdf(rec, sampled, v)
                        * (1.0 / prob)
                    )
        if np.any(kr != 0.0):
            reflected = reflected * kr
        return emitted + reflected

    def trace_path(self, ray: Ray, samples: int, bounces: int) -> np.ndarray:
        """Average of ``samples`` path estimates plus direct light at the first hit."""
        total = np.zeros(3)
        for _ in range(samples):
            total = total + self.compute_color(ray, bounces)
        direct = np.zeros(3)
        rec, hits = self.trace_ray(ray)
        if hits:
            direct = direct + self.radiance(rec)
            direct = direct + self.radiance_from_emissive(rec)
        with np.errstate(divide="ignore", invalid="ignore"):
            return total / np.float64(samples) + direct

    def get_color(self, ray: Ray, depth: int = 2) -> np.ndarray:
        """Whitted-style colour: direct light plus recursive mirror reflection."""
        if depth < 0:
            return np.zeros(3)
        t_range = Interval(_EPSILON, FLOAT_MAX)
        rec = HitRecord()
        hits = 0
        for obj in self.objects:
            found = obj.hit(ray, t_range)
            if found is not None:
                rec = found
                hits += 1
                t_range.max = min(t_range.max, rec.t)
        if not hits:
            return np.asarray(self.sky, dtype=float).copy()

        material = rec.material
        if material is None:
            return 0.5 * (rec.normal + np.ones(3))

        color = self.radiance(rec) + material.emission(rec, ray.direction)
        to_origin = ray.origin - rec.point
        refl = material.reflection(rec, to_origin)
        r, kr = refl.direction, refl.kr
        reflected_color = np.zeros(3)
        if refl.specular:
            reflected_ray = Ray(rec.point + _EPSILON * rec.normal, r)
            reflected_color = self.get_color(reflected_ray, depth - 1)
        with np.errstate(invalid="ignore", over="ignore"):
            return (np.ones(3) - kr) * color + kr * reflected_color * material.brdf(
                rec, r, to_origin
            )