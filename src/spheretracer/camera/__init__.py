from spheretracer.camera.camera import Camera

__all__ = ["Camera"]
