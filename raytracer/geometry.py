"""Vectors, rays, intervals, hit records and 4x4 affine transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

FLOAT_MAX = float(np.finfo(np.float32).max)


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Return a 3-component float vector."""
    return np.array([x, y, z], dtype=float)


def normalize(v) -> np.ndarray:
    """Return ``v`` scaled to unit length (NaN for the zero vector)."""
    v = np.asarray(v, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return v / np.linalg.norm(v)


def translation(offset) -> np.ndarray:
    """Return a 4x4 matrix translating by ``offset``."""
    matrix = np.eye(4)
    matrix[:3, 3] = np.asarray(offset, dtype=float)
    return matrix


def scaling(factors) -> np.ndarray:
    """Return a 4x4 matrix scaling each axis by ``factors``."""
    return np.diag([*np.asarray(factors, dtype=float), 1.0])


def rotation(angle: float, axis) -> np.ndarray:
    """Return a 4x4 matrix rotating by ``angle`` radians about ``axis``."""
    x, y, z = normalize(axis)
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    matrix = np.eye(4)
    matrix[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return matrix


@dataclass(eq=False)
class Ray:
    """A half-line starting at ``origin`` going along ``direction``."""

    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self) -> None:
        self.origin = np.asarray(self.origin, dtype=float)
        self.direction = np.asarray(self.direction, dtype=float)

    def at(self, t: float) -> np.ndarray:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + t * self.direction


@dataclass
class Interval:
    """A closed range of ray parameters."""

    min: float
    max: float

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max


@dataclass(eq=False)
class HitRecord:
    """Where and how a ray met a surface."""

    t: float = FLOAT_MAX
    point: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    material: Any = None