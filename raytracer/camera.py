"""A pinhole camera producing primary rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from raytracer.geometry import Ray, normalize, vec3


@dataclass(eq=False)
class Camera:
    """Pinhole camera with a vertical field of view in degrees."""

    fov: float = 60.0
    width: float = 800.0
    height: float = 600.0
    center: np.ndarray = field(default_factory=lambda: vec3(0.0, 0.0, 0.0))
    view: np.ndarray = field(default_factory=lambda: vec3(0.0, 0.0, -1.0))
    up: np.ndarray = field(default_factory=lambda: vec3(0.0, 1.0, 0.0))
    right: np.ndarray = field(default_factory=lambda: vec3(1.0, 0.0, 0.0))

    def make_ray(self, x: float, y: float) -> Ray:
        """Return the ray through screen coordinates ``x``, ``y`` in [-1, 1]."""
        aspect_ratio = self.width / self.height
        scale = math.tan(math.radians(self.fov * 0.5))
        direction = (
            self.right * x * aspect_ratio * scale + self.up * y * scale + self.view
        )
        return Ray(self.center.copy(), normalize(direction))

    def transform_camera(self, transform) -> None:
        """Apply a 4x4 transform to the camera position and orientation."""
        m = np.asarray(transform, dtype=float)
        self.center = (m @ np.append(self.center, 1.0))[:3]
        self.view = normalize((m @ np.append(self.view, 0.0))[:3])
        self.up = normalize((m @ np.append(self.up, 0.0))[:3])
        self.right = normalize((m @ np.append(self.right, 0.0))[:3])