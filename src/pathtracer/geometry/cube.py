# geometry/cube.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.rect import Rect
from pathtracer.geometry.transform import FlipNormals
from pathtracer.geometry.world import HittableList


class Cube(Hittable):
    """
    Axis-aligned box between corners p0 and p1, made of six rectangles with
    outward-facing normals.
    """
    def __init__(self, p0: Vector3, p1: Vector3):
        self.p0 = p0
        self.p1 = p1
        self.sides = HittableList([
            Rect.xy(p0.x, p1.x, p0.y, p1.y, p1.z),
            FlipNormals(Rect.xy(p0.x, p1.x, p0.y, p1.y, p0.z)),
            Rect.xz(p0.x, p1.x, p0.z, p1.z, p1.y),
            FlipNormals(Rect.xz(p0.x, p1.x, p0.z, p1.z, p0.y)),
            Rect.yz(p0.y, p1.y, p0.z, p1.z, p1.x),
            FlipNormals(Rect.yz(p0.y, p1.y, p0.z, p1.z, p0.x)),
        ])

    @staticmethod
    def from_size(dimensions: Vector3) -> "Cube":
        """Cube with one corner at the origin and the other at `dimensions`."""
        return Cube(Vector3(0, 0, 0), dimensions)

    @staticmethod
    def unit() -> "Cube":
        return Cube(Vector3(-1, -1, -1), Vector3(1, 1, 1))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        return AABB(self.p0, self.p1)

    def __repr__(self) -> str:
        return f"Cube({self.p0!r}, {self.p1!r})"
