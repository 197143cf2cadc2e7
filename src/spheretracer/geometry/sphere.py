# geometry/sphere.py
import math
from typing import Optional
from spheretracer.core.vector import Vector3
from spheretracer.core.ray import Ray
from spheretracer.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but flips the outward normal,
    which turns a dielectric sphere into a hollow bubble.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # Tangent rays count as misses.
        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Near root first, then far root; both bounds are exclusive.
        for root in ((-half_b - sqrt_disc) / a, (-half_b + sqrt_disc) / a):
            if t_min < root < t_max:
                rec = HitRecord()
                rec.t = root
                rec.p = ray.at(rec.t)
                outward_normal = (rec.p - self.center) / self.radius
                rec.set_face_normal(ray, outward_normal)
                rec.material = self.material
                return rec
        return None

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
