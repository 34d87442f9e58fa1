"""Command line entry point: render a named preset scene to a PNG file."""

from __future__ import annotations

import argparse
from itertools import product

from raytracer.cornell import (
    cornell_emissive_rectangle_scene,
    cornell_point_light_scene,
    cornell_sphere_light_scene,
    part6_scene,
)
from raytracer.image import HDRImage, open_image, save_png
from raytracer.scenes import (
    RenderPreset,
    example_scene,
    part3_scene,
    part5_scene,
    path_tracing_scene,
    path_tracing_util_scene,
)

_PRESETS = {
    "example": example_scene,
    "p3": part3_scene,
    "p5": part5_scene,
    "pathtr": path_tracing_scene,
    "path_tracing_util": path_tracing_util_scene,
    "image_gen": cornell_emissive_rectangle_scene,
    "no_shadow": cornell_point_light_scene,
    "part6_final": part6_scene,
    "part7_cornell_box_path": cornell_sphere_light_scene,
}


def render(preset: RenderPreset, width: int = 800, height: int = 600) -> HDRImage:
    """Shade every pixel of a ``width`` x ``height`` image of the preset's scene."""
    image = HDRImage(width, height)
    scene = preset.scene
    for j, i in product(range(height), range(width)):
        x = 2.0 * (i + 0.5) / width - 1.0
        y = 1.0 - 2.0 * (j + 0.5) / height
        ray = scene.camera.make_ray(x, y)
        if preset.path_traced:
            image[i, j] = scene.trace_path(ray, preset.samples, preset.bounces)
        else:
            image[i, j] = scene.get_color(ray)
    return image


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="raytracer", description="Render a preset scene to a PNG image."
    )
    parser.add_argument(
        "preset", nargs="?", default="image_gen", choices=sorted(_PRESETS)
    )
    parser.add_argument("--width", type=_positive_int, default=800)
    parser.add_argument("--height", type=_positive_int, default=600)
    parser.add_argument(
        "--samples", type=_positive_int, help="path samples per pixel (path-traced presets)"
    )
    parser.add_argument(
        "--bounces", type=_positive_int, help="Russian-roulette parameter (path-traced presets)"
    )
    parser.add_argument("-o", "--output", help="output PNG file")
    parser.add_argument("--exposure", type=float, default=1.0)
    parser.add_argument("--gamma", type=float, default=2.2)
    parser.add_argument(
        "--no-open", action="store_true", help="do not open the result in a viewer"
    )
    args = parser.parse_args(argv)

    preset = _PRESETS[args.preset]()
    if preset.path_traced:
        if args.samples is not None:
            preset.samples = args.samples
        if args.bounces is not None:
            preset.bounces = args.bounces

    image = render(preset, args.width, args.height)
    output = args.output or preset.filename
    save_png(image, output, args.exposure, args.gamma)
    if not args.no_open:
        open_image(output)
    return 0