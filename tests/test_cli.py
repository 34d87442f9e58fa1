import numpy as np
import pytest
from PIL import Image

from raytracer.cli import main, render
from raytracer.geometry import vec3
from raytracer.scene import Scene
from raytracer.scenes import RenderPreset


def _sky_preset(samples=None):
    scene = Scene(sky=vec3(0.2, 0.4, 0.6))
    return RenderPreset("sky", scene, "sky.png", samples=samples, bounces=5)


def test_render_size_matches_request():
    image = render(_sky_preset(), 4, 3)
    assert image.width == 4
    assert image.height == 3
    assert image.pixels.shape == (3, 4, 3)


def test_render_empty_scene_is_sky_everywhere():
    image = render(_sky_preset(), 3, 2)
    assert np.allclose(image.pixels, np.broadcast_to([0.2, 0.4, 0.6], (2, 3, 3)))


def test_render_path_traced_empty_scene_is_sky():
    image = render(_sky_preset(samples=2), 2, 2)
    assert np.allclose(image.pixels, np.broadcast_to([0.2, 0.4, 0.6], (2, 2, 3)))


def test_render_rejects_negative_size():
    with pytest.raises(ValueError):
        render(_sky_preset(), -1, 2)


def test_main_writes_png(tmp_path):
    out = tmp_path / "p3.png"
    code = main(["p3", "--width", "3", "--height", "2", "-o", str(out), "--no-open"])
    assert code == 0
    with Image.open(out) as img:
        assert img.size == (3, 2)
        assert img.mode == "RGB"


def test_main_path_traced_with_overrides(tmp_path):
    out = tmp_path / "cornell.png"
    code = main(
        [
            "image_gen",
            "--width",
            "2",
            "--height",
            "2",
            "--samples",
            "1",
            "--bounces",
            "2",
            "-o",
            str(out),
            "--no-open",
        ]
    )
    assert code == 0
    with Image.open(out) as img:
        assert img.size == (2, 2)


def test_main_unknown_preset_exits():
    with pytest.raises(SystemExit):
        main(["no_such_scene", "--no-open"])


def test_main_rejects_zero_width():
    with pytest.raises(SystemExit):
        main(["p3", "--width", "0", "--no-open"])