import sys
from unittest import mock

import numpy as np
import pytest
from PIL import Image

from raytracer.image import HDRImage, open_image, save_png, tonemap


def test_new_image_is_black():
    image = HDRImage(4, 3)
    assert image.pixels.shape == (3, 4, 3)
    assert np.array_equal(image[3, 2], np.zeros(3))


def test_pixel_roundtrip():
    image = HDRImage(4, 3)
    image[1, 2] = (0.1, 0.2, 0.3)
    assert np.allclose(image[1, 2], [0.1, 0.2, 0.3])
    assert np.allclose(image.pixels[2, 1], [0.1, 0.2, 0.3])


@pytest.mark.parametrize("key", [(4, 0), (0, 3), (-1, 0)])
def test_pixel_out_of_range(key):
    image = HDRImage(4, 3)
    with pytest.raises(IndexError):
        _ = image[key]
    with pytest.raises(IndexError):
        image[key] = (1, 1, 1)
    assert float(np.abs(image.pixels).sum()) == 0.0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        HDRImage(-1, 5)


def test_tonemap_clamps():
    image = HDRImage(4, 1)
    image[0, 0] = (0, 0, 0)
    image[1, 0] = (1, 1, 1)
    image[2, 0] = (5, 5, 5)
    image[3, 0] = (-1, -1, -1)
    out = tonemap(image)
    assert out.dtype == np.uint8
    assert out.shape == (1, 4, 3)
    assert out[0, :, 0].tolist() == [0, 255, 255, 0]


def test_tonemap_exposure_and_gamma():
    image = HDRImage(1, 1)
    image[0, 0] = (0.5, 0.25, 0.0)
    linear = tonemap(image, exposure=1.0, gamma=1.0)
    assert linear[0, 0, 0] == 127
    assert tonemap(image, exposure=4.0)[0, 0, 1] == 255
    assert tonemap(image)[0, 0, 0] >= linear[0, 0, 0]


def test_tonemap_pixel_position():
    image = HDRImage(3, 2)
    image[2, 1] = (1, 0, 0)
    out = tonemap(image)
    assert out[1, 2].tolist() == [255, 0, 0]
    assert int(out.sum()) == 255


def test_save_png_roundtrip(tmp_path):
    image = HDRImage(5, 4)
    image[0, 0] = (1, 0.5, 0.2)
    image[4, 3] = (0.3, 2.0, 0.0)
    path = tmp_path / "out.png"
    save_png(image, path)
    with Image.open(path) as loaded:
        assert loaded.size == (5, 4)
        assert np.array_equal(np.asarray(loaded.convert("RGB")), tonemap(image))


@pytest.mark.parametrize("platform,program", [("linux", "xdg-open"), ("darwin", "open")])
def test_open_image_command(platform, program):
    with mock.patch.object(sys, "platform", platform), mock.patch(
        "raytracer.image.subprocess.run"
    ) as run:
        run.return_value.returncode = 0
        assert open_image("picture.png") == 0
    command = run.call_args.args[0]
    assert command == [program, "picture.png"]


def test_open_image_missing_viewer():
    with mock.patch("raytracer.image.subprocess.run", side_effect=FileNotFoundError):
        assert open_image("picture.png") is None