# camera/camera.py
import math
import random
from spheretracer.core.vector import Vector3
from spheretracer.core.ray import Ray
from spheretracer.core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Positionable thin-lens camera.

    The image plane is parameterized by (u, v) in [0, 1], with (0, 0) at the
    lower-left corner. A positive aperture enables depth of field, focused at
    `focus_dist` along the viewing direction.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        self.update_camera()

    @classmethod
    def simple(cls, aspect_ratio: float) -> "Camera":
        """Pinhole camera at the origin looking down -z with a 2-unit-high viewport."""
        return cls(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0),
                   vfov=90.0, aspect_ratio=aspect_ratio)

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = degrees_to_radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Orthonormal basis; w points backwards, away from the scene.
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.look_from
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, u: float, v: float, rng=random) -> Ray:
        """Generates a ray through image-plane coordinates (u, v)."""
        if self.aperture <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         self.origin)
            return Ray(self.origin, direction)

        rd = self.lens_radius * random_in_unit_disk(rng)
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         ray_origin)
        return Ray(ray_origin, ray_direction)
