from spheretracer.renderer.pixel_buffer import PixelBuffer
from spheretracer.renderer.raytracer import Renderer, ray_color
from spheretracer.renderer.settings import RenderSettings, QUALITY_LEVELS

__all__ = ["PixelBuffer", "Renderer", "ray_color", "RenderSettings", "QUALITY_LEVELS"]
