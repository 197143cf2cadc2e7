from spheretracer.materials.material import Material
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.metal import Metal
from spheretracer.materials.dielectric import Dielectric

__all__ = ["Material", "Lambertian", "Metal", "Dielectric"]
