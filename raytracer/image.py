"""High dynamic range images, tone mapping and PNG output."""

from __future__ import annotations

import os
import subprocess
import sys

import numpy as np
from PIL import Image


class HDRImage:
    """A width x height grid of linear RGB colors, addressed as ``image[i, j]``."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3))

    def _check(self, key) -> tuple[int, int]:
        i, j = key
        if not (0 <= i < self.width and 0 <= j < self.height):
            raise IndexError(f"pixel ({i}, {j}) outside {self.width}x{self.height} image")
        return i, j

    def __getitem__(self, key) -> np.ndarray:
        i, j = self._check(key)
        return self.pixels[j, i]

    def __setitem__(self, key, value) -> None:
        i, j = self._check(key)
        self.pixels[j, i] = value


def tonemap(image: HDRImage, exposure: float = 1.0, gamma: float = 2.2) -> np.ndarray:
    """Map to 8-bit RGB: exposure, gamma, clamp to [0, 1], scale to 255."""
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        c = np.power(image.pixels * exposure, 1.0 / gamma)
    c = np.nan_to_num(c, nan=0.0, posinf=1.0, neginf=0.0)
    return (np.clip(c, 0.0, 1.0) * 255.0).astype(np.uint8)


def save_png(image: HDRImage, path, exposure: float = 1.0, gamma: float = 2.2) -> None:
    """Tone map ``image`` and write it to ``path`` as PNG."""
    Image.fromarray(tonemap(image, exposure, gamma)).save(path, format="PNG")


def open_image(filename) -> int | None:
    """Open ``filename`` with the desktop's default viewer; return its exit code."""
    filename = os.fspath(filename)
    if sys.platform.startswith("win"):
        command = ["cmd", "/c", "start", "", filename]
    elif sys.platform == "darwin":
        command = ["open", filename]
    else:
        command = ["xdg-open", filename]
    try:
        return subprocess.run(command, check=False).returncode
    except OSError:
        return None