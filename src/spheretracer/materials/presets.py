# materials/presets.py
from spheretracer.core.vector import Color
from spheretracer.materials.metal import Metal
from spheretracer.materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=0.0)

    @staticmethod
    def brushed_gold() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=1.0)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)

    @staticmethod
    def bronze() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class ColorPresets:
    """Albedo colors used by the bundled scenes."""

    YELLOW_GROUND = Color(0.8, 0.8, 0.0)
    GRAY_GROUND = Color(0.5, 0.5, 0.5)
    ROSE = Color(0.7, 0.3, 0.3)
    NAVY = Color(0.1, 0.2, 0.5)
    BROWN = Color(0.4, 0.2, 0.1)
