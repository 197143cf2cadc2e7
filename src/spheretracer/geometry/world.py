# geometry/world.py
from typing import Optional, List
from spheretracer.geometry.hittable import Hittable, HitRecord
from spheretracer.core.ray import Ray

class HittableList(Hittable):
    """
    A list of Hittable objects, searched linearly for the closest hit.
    Filled once during scene setup and only read while rendering.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
