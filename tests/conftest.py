"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src/ to the path so the tests run without installing the package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from spheretracer.camera.camera import Camera  # noqa: E402
from spheretracer.core.vector import Color, Point3  # noqa: E402
from spheretracer.geometry.sphere import Sphere  # noqa: E402
from spheretracer.geometry.world import HittableList  # noqa: E402
from spheretracer.materials.lambertian import Lambertian  # noqa: E402


class FixedRandom:
    """Stand-in random stream that always returns the lower bound."""

    def __init__(self, value: float = 0.0):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.0)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def ground_world(gray):
    """Large ground sphere far below plus one unit sphere straight ahead."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, gray))
    world.add(Sphere(Point3(0.0, 0.0, -5.0), 1.0, gray))
    return world


@pytest.fixture
def simple_camera():
    return Camera.simple(16.0 / 9.0)
