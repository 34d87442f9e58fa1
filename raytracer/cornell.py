"""Cornell-box scenes and the open-sky final scene, ready to render."""

from __future__ import annotations

import math

from raytracer.geometry import rotation, vec3
from raytracer.materials import Emissive, EmissiveRectangle, Lambertian, Metallic
from raytracer.scene import PointLight, Scene
from raytracer.scenes import RenderPreset
from raytracer.shapes import Box, Plane, Rectangle, SceneObject, Sphere

_SKY_BLUE = vec3(0.69, 0.77, 0.87)
_WHITE = vec3(1.0, 1.0, 1.0)
_BLACK = vec3(0.0, 0.0, 0.0)


def _metal() -> Metallic:
    return Metallic(vec3(0.5, 0.2, 0.5), 1, _WHITE)


def _rotated_box() -> SceneObject:
    box = SceneObject(Box(vec3(-4.0, -5.0, -11.5), vec3(-2.0, 0.0, -13.5)), _metal())
    box.set_transform(rotation(math.radians(45.0), vec3(0.0, 1.0, 0.0)))
    return box


def _white_sphere(z: float) -> SceneObject:
    return SceneObject(Sphere(vec3(1.0, -3.5, z), 1.5), Lambertian(_WHITE))


def cornell_walls() -> list[SceneObject]:
    """The five thin boxes of the Cornell box: floor, left, right, ceiling, back."""
    grey = Lambertian(vec3(0.5, 0.5, 0.5))
    red = Lambertian(vec3(1.0, 0.0, 0.0))
    green = Lambertian(vec3(0.0, 1.0, 0.0))
    blue = Lambertian(vec3(0.0, 0.0, 1.0))
    bottom = SceneObject(Box(vec3(-4.5, -5.01, -9.5), vec3(4.5, -5.0, -15.0)), grey)
    top = SceneObject(Box(vec3(-4.5, 5.0, -9.5), vec3(4.5, 5.01, -15.0)), grey)
    left = SceneObject(Box(vec3(-4.5, -5.0, -9.5), vec3(-4.51, 5.0, -15.0)), red)
    right = SceneObject(Box(vec3(4.5, -5.0, -9.5), vec3(4.51, 5.0, -15.0)), green)
    back = SceneObject(Box(vec3(-4.5, 5.0, -15.0), vec3(4.5, -5.0, -15.1)), blue)
    return [bottom, left, right, top, back]


def cornell_emissive_rectangle_scene() -> RenderPreset:
    """Cornell box lit by a rectangular area light under the ceiling."""
    light = SceneObject(
        Rectangle(vec3(-1.0, 4.8, -12.0), vec3(1.0, 4.8, -14.0)),
        EmissiveRectangle(_WHITE * 10.0),
    )
    scene = Scene(sky=_BLACK.copy(), ambient_light=_WHITE.copy())
    scene.objects.append(light)
    scene.objects.extend(cornell_walls())
    scene.objects.extend([_rotated_box(), _white_sphere(-13.0)])
    return RenderPreset("image_gen", scene, "path_tracing.png", samples=500, bounces=5)


def cornell_point_light_scene() -> RenderPreset:
    """Cornell box lit by a single point light, shaded by ray tracing."""
    scene = Scene(sky=_SKY_BLUE.copy(), ambient_light=_WHITE.copy())
    scene.lights.append(PointLight(vec3(0.0, 4.5, -13.0), _WHITE * 50.0))
    scene.objects.extend(cornell_walls())
    scene.objects.extend([_rotated_box(), _white_sphere(-11.0)])
    return RenderPreset("no_shadow", scene, "path_tracing.png")


def part6_scene() -> RenderPreset:
    """Emissive sphere lighting a red box and a metal sphere over a white plane."""
    light_material = Emissive(vec3(500.0, 500.0, 500.0) / 10.0)
    white = Lambertian(_WHITE)
    red = Lambertian(vec3(1.0, 0.0, 0.0))
    metal = Metallic(vec3(0.5, 0.2, 0.5), 200, _WHITE)

    scene = Scene(sky=_SKY_BLUE / 50.0, ambient_light=_WHITE.copy())
    scene.objects.extend(
        [
            SceneObject(Sphere(vec3(-5.0, 5.0, 0.0), 1.5), light_material),
            SceneObject(Plane(vec3(0.0, -1.0, 0.0), vec3(0.0, 1.0, 0.0)), white),
            SceneObject(Box(vec3(0.8, -1.0, -5.0), vec3(1.75, 0.25, -3.0)), red),
            SceneObject(Sphere(vec3(-0.8, 0.0, -4.0), 1.0), metal),
        ]
    )
    return RenderPreset(
        "part6_final", scene, "path_tracing.png", samples=1000, bounces=5
    )


def cornell_sphere_light_scene() -> RenderPreset:
    """Cornell box lit by an emissive sphere near the ceiling."""
    light = SceneObject(Sphere(vec3(0.0, 3.5, -12.0), 1.5), Emissive(_WHITE * 10.0))
    scene = Scene(sky=_BLACK.copy(), ambient_light=_WHITE.copy())
    scene.objects.extend(cornell_walls())
    scene.objects.extend([light, _rotated_box(), _white_sphere(-13.0)])
    return RenderPreset(
        "part7_cornell_box_path", scene, "path_tracing.png", samples=500, bounces=5
    )