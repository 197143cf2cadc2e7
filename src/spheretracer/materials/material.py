# materials/material.py
import random
from typing import Optional, Tuple
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Instances are immutable and may be shared by any number of surfaces.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        `rng` is the caller's random stream (see core.utils).
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
