# geometry/rect.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Axis, Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half-thickness given to the flat axis of a rectangle's bounding box.
THICKNESS_PAD = 0.0001


class Rect(Hittable):
    """
    Axis-aligned rectangle lying in the plane main_axis = k.

    (a0, a1) bounds the first off axis and (b0, b1) the second one; for an
    xy rectangle the main axis is z, a is x and b is y. The normal always
    points along +main_axis; wrap in FlipNormals to face the other way.
    """
    _OFF_AXES = {
        Axis.X: (Axis.Y, Axis.Z),
        Axis.Y: (Axis.X, Axis.Z),
        Axis.Z: (Axis.X, Axis.Y),
    }

    def __init__(self, main_axis: Axis, a0: float, a1: float, b0: float, b1: float, k: float):
        if not (a0 < a1 and b0 < b1):
            raise ValueError(f"Degenerate rectangle bounds: ({a0}, {a1}) x ({b0}, {b1})")
        self.main_axis = Axis(main_axis)
        self.off_a, self.off_b = self._OFF_AXES[self.main_axis]
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.normal = Vector3(0, 0, 0).with_axis(self.main_axis, 1.0)

    @classmethod
    def xy(cls, x0: float, x1: float, y0: float, y1: float, k: float) -> "Rect":
        return cls(Axis.Z, x0, x1, y0, y1, k)

    @classmethod
    def xz(cls, x0: float, x1: float, z0: float, z1: float, k: float) -> "Rect":
        return cls(Axis.Y, x0, x1, z0, z1, k)

    @classmethod
    def yz(cls, y0: float, y1: float, z0: float, z1: float, k: float) -> "Rect":
        return cls(Axis.X, y0, y1, z0, z1, k)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction.get_axis(self.main_axis)
        if d == 0.0:
            return None
        t = (self.k - ray.origin.get_axis(self.main_axis)) / d
        if not t_min < t < t_max:
            return None

        p = ray.at(t)
        a = p.get_axis(self.off_a)
        b = p.get_axis(self.off_b)
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        return HitRecord(
            t, p, self.normal,
            (a - self.a0) / (self.a1 - self.a0),
            (b - self.b0) / (self.b1 - self.b0),
        )

    def bounding_box(self) -> AABB:
        minimum = (Vector3(0, 0, 0)
                   .with_axis(self.main_axis, self.k - THICKNESS_PAD)
                   .with_axis(self.off_a, self.a0)
                   .with_axis(self.off_b, self.b0))
        maximum = (Vector3(0, 0, 0)
                   .with_axis(self.main_axis, self.k + THICKNESS_PAD)
                   .with_axis(self.off_a, self.a1)
                   .with_axis(self.off_b, self.b1))
        return AABB(minimum, maximum)

    def __repr__(self) -> str:
        return (f"Rect({self.main_axis.name}, a=({self.a0}, {self.a1}), "
                f"b=({self.b0}, {self.b1}), k={self.k})")
