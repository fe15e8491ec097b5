# geometry/hittable.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("t", "p", "normal", "u", "v", "material")

    def __init__(self, t: float, p: Vector3, normal: Vector3,
                 u: float = 0.0, v: float = 0.0, material=None):
        self.t = t                  # Ray parameter at intersection
        self.p = p                  # Intersection point
        self.normal = normal        # Geometric normal, not flipped towards the ray
        self.u = u                  # Surface parameterization for textures
        self.v = v
        self.material = material

    def replace(self, **changes) -> "HitRecord":
        """Returns a copy of the record with the given fields replaced."""
        fields = {name: getattr(self, name) for name in self.__slots__}
        fields.update(changes)
        return HitRecord(**fields)

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, u={self.u}, v={self.v})"


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
