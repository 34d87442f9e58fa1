"""Ready-made demonstration scenes and how each one is rendered."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.geometry import scaling, vec3
from raytracer.materials import Emissive, Lambertian, Metallic, TorrenceSparrow
from raytracer.scene import PointLight, Scene
from raytracer.shapes import Box, Plane, SceneObject, Sphere

_SKY_BLUE = vec3(0.69, 0.77, 0.87)
_WHITE = vec3(1.0, 1.0, 1.0)


@dataclass(eq=False)
class RenderPreset:
    """A scene together with its output file and shading settings.

    When ``samples`` is None the scene is shaded with recursive ray tracing
    (``Scene.get_color``); otherwise each pixel is path traced with
    ``samples`` samples and ``bounces`` as the Russian-roulette parameter.
    """

    name: str
    scene: Scene
    filename: str
    samples: int | None = None
    bounces: int = 0

    @property
    def path_traced(self) -> bool:
        return self.samples is not None


def _light(location, scale: float) -> PointLight:
    return PointLight(location, _WHITE * scale)


def _ground_plane(material) -> SceneObject:
    return SceneObject(Plane(vec3(0.0, -1.0, 0.0), vec3(0.0, 1.0, 0.0)), material)


def example_scene() -> RenderPreset:
    """Emissive sphere, metallic sphere and a red box over a dark plane."""
    red = Lambertian(vec3(1.0, 0.0, 0.0))
    light_material = Emissive(_WHITE)
    dark = Lambertian(vec3(0.1, 0.1, 0.1))
    metal = Metallic(vec3(0.5, 0.2, 0.5), 200, _WHITE)

    scene = Scene(sky=_SKY_BLUE.copy(), ambient_light=_WHITE.copy())
    scene.objects.extend(
        [
            SceneObject(Sphere(vec3(-1.0, 0.8, -1.0), 0.5), light_material),
            SceneObject(Sphere(vec3(0.0, 0.0, -2.0), 0.35), metal),
            SceneObject(Box(vec3(0.5, -0.25, -2.5), vec3(0.8, 0.25, -2.0)), red),
            _ground_plane(dark),
        ]
    )
    return RenderPreset("example", scene, "path_tracing.png", samples=500, bounces=5)


def part3_scene() -> RenderPreset:
    """A brown sphere scaled twice about its centre, lit from above."""
    brown = Lambertian(vec3(0.55, 0.27, 0.07))
    sphere = SceneObject(Sphere(vec3(0.0, 0.0, -2.0), 0.25), brown)
    sphere.set_transform(scaling(vec3(2.0, 2.0, 2.0)))

    scene = Scene(ambient_light=_WHITE.copy())
    scene.lights.append(_light(vec3(0.0, 3.0, 0.0), 500.0))
    scene.objects.append(sphere)
    return RenderPreset("p3", scene, "part_3.png")


def part5_scene() -> RenderPreset:
    """A microfacet sphere resting on a large white sphere."""
    ground = Lambertian(_WHITE)
    ground.ambient_color = vec3(0.55, 0.27, 0.07)
    silver = TorrenceSparrow(vec3(0.5, 0.5, 0.5), 0.3, _WHITE)

    scene = Scene(sky=_SKY_BLUE.copy(), ambient_light=_WHITE.copy())
    scene.lights.append(_light(vec3(0.0, 3.0, -2.0), 50.0))
    scene.objects.extend(
        [
            SceneObject(Sphere(vec3(0.0, -101.0, -2.0), 100.0), ground),
            SceneObject(Sphere(vec3(0.0, 0.0, -2.0), 0.4), silver),
        ]
    )
    return RenderPreset("p5", scene, "part_5.png")


def path_tracing_scene() -> RenderPreset:
    """Emissive and metallic spheres over a brown plane with a point light."""
    light_material = Emissive(_WHITE)
    brown = Lambertian(vec3(0.55, 0.27, 0.07))
    metal = Metallic(vec3(0.5, 0.5, 0.5), 200, _WHITE)

    scene = Scene(sky=_SKY_BLUE.copy(), ambient_light=_WHITE.copy())
    scene.lights.append(_light(vec3(1.0, 0.8, -1.0), 10.0))
    scene.objects.extend(
        [
            SceneObject(Sphere(vec3(-1.0, 0.8, -1.0), 0.5), light_material),
            SceneObject(Sphere(vec3(0.0, 0.0, -2.0), 0.35), metal),
            _ground_plane(brown),
        ]
    )
    return RenderPreset("pathtr", scene, "path_tracing.png", samples=100, bounces=5)


def path_tracing_util_scene() -> RenderPreset:
    """A strong emissive sphere lighting a diffuse sphere and plane."""
    light_material = Emissive(vec3(500.0, 500.0, 500.0))
    brown = Lambertian(vec3(0.55, 0.27, 0.07))

    scene = Scene(sky=_SKY_BLUE.copy(), ambient_light=_WHITE.copy())
    scene.objects.extend(
        [
            SceneObject(Sphere(vec3(-1.0, 0.8, -1.0), 0.5), light_material),
            SceneObject(Sphere(vec3(0.0, 0.0, -2.0), 0.35), brown),
            _ground_plane(brown),
        ]
    )
    return RenderPreset(
        "path_tracing_util", scene, "path_tracing.png", samples=100, bounces=5
    )