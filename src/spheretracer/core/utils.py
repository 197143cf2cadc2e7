# core/utils.py
import math
import random
from spheretracer.core.vector import Vector3

# Every sampler takes an `rng` exposing uniform(low, high) and random().
# The stdlib `random` module and numpy's Generator both qualify.

def random_in_unit_sphere(rng=random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng=random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points too close to the origin lose precision when normalized.
        if p.dot(p) > 1e-160:
            return p.normalize()

def random_in_unit_disk(rng=random) -> Vector3:
    """Random point in the z=0 unit disk, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def random_color(rng=random, low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high))

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law),
    splitting the result into parts perpendicular and parallel to n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0
