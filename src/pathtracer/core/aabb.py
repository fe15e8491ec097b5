# core/aabb.py
import math
from typing import List

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Axis, Vector3


class AABB:
    """Axis-aligned bounding box spanned by its minimum and maximum corners."""

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in Axis:
            d = ray.direction.get_axis(a)
            # A zero component means the ray never crosses that slab's planes.
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            origin = ray.origin.get_axis(a)
            t0 = (self.minimum.get_axis(a) - origin) * invD
            t1 = (self.maximum.get_axis(a) - origin) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def vertices(self) -> List[Vector3]:
        """Returns the eight corners of the box."""
        corners = []
        for x in (self.minimum.x, self.maximum.x):
            for y in (self.minimum.y, self.maximum.y):
                for z in (self.minimum.z, self.maximum.z):
                    corners.append(Vector3(x, y, z))
        return corners

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(Vector3.min(box0.minimum, box1.minimum),
                    Vector3.max(box0.maximum, box1.maximum))

    @staticmethod
    def unit() -> "AABB":
        return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
