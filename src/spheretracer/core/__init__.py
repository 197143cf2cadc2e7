from spheretracer.core.vector import Vector3, Point3, Color
from spheretracer.core.ray import Ray

__all__ = ["Vector3", "Point3", "Color", "Ray"]
