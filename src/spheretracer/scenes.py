# scenes.py
"""
Built-in scenes. Each builder takes (aspect_ratio, rng) and returns (world, camera).
"""
import logging
import random
from typing import Callable, Dict, Tuple

from spheretracer.camera.camera import Camera
from spheretracer.core.utils import random_color
from spheretracer.core.vector import Point3, Vector3
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import HittableList
from spheretracer.materials.dielectric import Dielectric
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.metal import Metal
from spheretracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)

SceneBuilder = Callable[..., Tuple[HittableList, Camera]]


def _ground_and_center(world: HittableList, center_color):
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(ColorPresets.YELLOW_GROUND)))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(center_color)))
    logger.debug("Added ground sphere at (0, -100.5, -1) and center sphere at (0, 0, -1)")


def materials_scene(aspect_ratio: float, rng=random) -> Tuple[HittableList, Camera]:
    """Diffuse center sphere between a fuzzy silver and a brushed gold sphere."""
    world = HittableList()
    _ground_and_center(world, ColorPresets.ROSE)
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, MetalPresets.silver()))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, MetalPresets.brushed_gold()))
    return world, Camera.simple(aspect_ratio)


def _basic_world(world: HittableList):
    _ground_and_center(world, ColorPresets.NAVY)
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, DielectricPresets.glass()))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, MetalPresets.gold()))


def basic_scene(aspect_ratio: float, rng=random) -> Tuple[HittableList, Camera]:
    """Diffuse, glass and mirror spheres seen from above and to the left."""
    world = HittableList()
    _basic_world(world)
    camera = Camera(Point3(-2.0, 2.0, 1.0), Point3(0.0, 0.0, -1.0), Vector3(0.0, 1.0, 0.0),
                    vfov=20.0, aspect_ratio=aspect_ratio, aperture=0.1, focus_dist=10.0)
    return world, camera


def bubble_scene(aspect_ratio: float, rng=random) -> Tuple[HittableList, Camera]:
    """
    The basic scene with the glass sphere made hollow: a second glass sphere
    with a negative radius sits inside it and flips the normals.
    """
    world = HittableList()
    _basic_world(world)
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), -0.4, DielectricPresets.glass()))
    look_from = Point3(-2.0, 2.0, 1.0)
    look_at = Point3(0.0, 0.0, -1.0)
    camera = Camera(look_from, look_at, Vector3(0.0, 1.0, 0.0), vfov=20.0,
                    aspect_ratio=aspect_ratio, focus_dist=(look_from - look_at).length())
    return world, camera


def random_scene(aspect_ratio: float, rng=random) -> Tuple[HittableList, Camera]:
    """Large field of small random spheres around three big ones."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, Lambertian(ColorPresets.GRAY_GROUND)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # Diffuse
                material = Lambertian(random_color(rng) * random_color(rng))
            elif choose_mat < 0.95:
                # Metal
                material = Metal(random_color(rng, 0.5, 1.0), rng.uniform(0.0, 0.5))
            else:
                # Glass
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4.0, 1.0, 0.0), 1.0, Lambertian(ColorPresets.BROWN)))
    world.add(Sphere(Point3(4.0, 1.0, 0.0), 1.0, MetalPresets.bronze()))

    camera = Camera(Point3(13.0, 2.0, 3.0), Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0),
                    vfov=20.0, aspect_ratio=aspect_ratio, aperture=0.1, focus_dist=10.0)
    return world, camera


SCENES: Dict[str, SceneBuilder] = {
    "materials": materials_scene,
    "basic": basic_scene,
    "bubble": bubble_scene,
    "random": random_scene,
}


def build_scene(name: str, aspect_ratio: float, rng=random) -> Tuple[HittableList, Camera]:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; expected one of {sorted(SCENES)}") from None
    world, camera = builder(aspect_ratio, rng)
    logger.info("Built scene %r with %d spheres", name, len(world))
    return world, camera
