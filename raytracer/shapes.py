"""Primitive shapes and transformable scene objects."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from raytracer.geometry import HitRecord, Interval, Ray, normalize, translation


def _div(a: float, b: float) -> float:
    """IEEE division: infinities and NaN instead of exceptions."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _min(a: float, b: float) -> float:
    return b if b < a else a


def _max(a: float, b: float) -> float:
    return b if a < b else a


class Shape(ABC):
    """A surface defined in its own object space."""

    is_rectangle = False

    def __init__(self, center) -> None:
        self.center = np.asarray(center, dtype=float)

    @abstractmethod
    def hit(self, ray: Ray, t_range: Interval, inverse: np.ndarray) -> HitRecord | None:
        """Return the hit of ``ray`` within ``t_range``, or None."""


class Sphere(Shape):
    def __init__(self, center, radius: float) -> None:
        super().__init__(center)
        self.radius = float(radius)

    def hit(self, ray, t_range, inverse):
        oc = ray.origin - self.center
        d = ray.direction
        qa = float(d @ d)
        qb = float((2.0 * d) @ oc)
        qc = float(oc @ oc) - self.radius * self.radius
        discriminant = qb * qb - 4 * qa * qc
        if discriminant < 0:
            return None
        root = math.sqrt(discriminant)
        t1, t2 = sorted(((-qb - root) / (2 * qa), (-qb + root) / (2 * qa)))
        for t in (t1, t2):
            if t_range.contains(t) and t > 0:
                point = ray.at(t)
                return HitRecord(t, point, normalize(point - self.center))
        return None


class Plane(Shape):
    def __init__(self, point, normal) -> None:
        super().__init__(point)
        self.point = np.asarray(point, dtype=float)
        self.normal = np.asarray(normal, dtype=float)

    def hit(self, ray, t_range, inverse):
        os_point = (np.asarray(inverse, dtype=float) @ np.append(self.point, 1.0))[:3]
        denominator = float(self.normal @ ray.direction)
        if denominator == 0:
            return None
        t = float(self.normal @ (os_point - ray.origin)) / denominator
        if t < 0 or not t_range.contains(t):
            return None
        return HitRecord(t, ray.at(t), normalize(self.normal))


class Box(Shape):
    """Axis-aligned box between two corners."""

    def __init__(self, low, high) -> None:
        self.low = np.asarray(low, dtype=float)
        self.high = np.asarray(high, dtype=float)
        super().__init__(self.high + (self.low - self.high) / 2.0)

    def hit(self, ray, t_range, inverse):
        slabs = [
            (_div(float(lo - o), float(d)), _div(float(hi - o), float(d)))
            for lo, hi, o, d in zip(self.low, self.high, ray.origin, ray.direction)
        ]
        near = [_min(a, b) for a, b in slabs]
        far = [_max(a, b) for a, b in slabs]
        tmin = _max(near[0], _max(near[1], near[2]))
        tmax = _min(far[0], _min(far[1], far[2]))
        if tmax < 0 or tmin > tmax:
            return None
        if tmin < 0 or not t_range.contains(tmin):
            return None
        if tmin == near[0]:
            axis = 0
        elif tmin == near[1]:
            axis = 1
        else:
            axis = 2
        normal = np.zeros(3)
        normal[axis] = -1.0 if slabs[axis][0] == tmin else 1.0
        if normal @ ray.direction > 0:
            normal = -normal
        return HitRecord(tmin, ray.at(tmin), normal)


class Rectangle(Shape):
    """Horizontal rectangle at height ``low[1]`` spanning x and z."""

    is_rectangle = True

    def __init__(self, low, high) -> None:
        self.low = np.asarray(low, dtype=float)
        self.high = np.asarray(high, dtype=float)
        super().__init__(self.high + (self.low - self.high) / 2.0)

    def hit(self, ray, t_range, inverse):
        dy = float(ray.direction[1])
        if dy == 0:
            return None
        t = (float(self.low[1]) - float(ray.origin[1])) / dy
        x, _, z = ray.at(t)
        xs = sorted((self.low[0], self.high[0]))
        zs = sorted((self.low[2], self.high[2]))
        if x < xs[0] or x > xs[1] or z < zs[0] or z > zs[1]:
            return None
        if not t_range.contains(t):
            return None
        normal = np.array([0.0, -1.0, 0.0])
        if normal @ ray.direction > 0:
            normal = -normal
        return HitRecord(t, ray.at(t), normal)


class SceneObject:
    """A shape with a material and a transform about the shape's center."""

    def __init__(self, shape: Shape, material: Any = None) -> None:
        self.shape = shape
        self.material = material
        self.transform = np.eye(4)
        self.normal_transform = np.eye(4)
        self.inverse = np.eye(4)

    def set_transform(self, matrix) -> None:
        """Set the transform, applied about the shape's center."""
        pivot = translation(self.shape.center)
        self.transform = pivot @ np.asarray(matrix, dtype=float) @ np.linalg.inv(pivot)
        self.inverse = np.linalg.inv(self.transform)
        self.normal_transform = self.inverse.T

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        """Return the world-space hit of ``ray``, or None."""
        direction = normalize((self.inverse @ np.append(ray.direction, 0.0))[:3])
        origin = (self.inverse @ np.append(ray.origin, 1.0))[:3]
        rec = self.shape.hit(Ray(origin, direction), t_range, self.inverse)
        if rec is None:
            return None
        rec.point = (self.transform @ np.append(rec.point, 1.0))[:3]
        rec.normal = normalize((self.normal_transform @ np.append(rec.normal, 0.0))[:3])
        rec.material = self.material
        return rec