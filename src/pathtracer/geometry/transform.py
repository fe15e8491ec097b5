# geometry/transform.py
"""
Geometric decorators. Each one owns the geometry it wraps and adjusts rays
going in and hit records coming out; none of them mutates the inner object.
"""
import math
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Axis, Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class FlipNormals(Hittable):
    """Forwards intersection unchanged and negates the returned normal."""

    def __init__(self, inner: Hittable):
        self.inner = inner

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec = self.inner.hit(ray, t_min, t_max)
        if rec is None:
            return None
        return rec.replace(normal=-rec.normal)

    def bounding_box(self) -> AABB:
        return self.inner.bounding_box()


class Translate(Hittable):
    """Moves the wrapped geometry by `offset`."""

    def __init__(self, inner: Hittable, offset: Vector3):
        self.inner = inner
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction)
        rec = self.inner.hit(moved, t_min, t_max)
        if rec is None:
            return None
        return rec.replace(p=rec.p + self.offset)

    def bounding_box(self) -> AABB:
        box = self.inner.bounding_box()
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


class Rotate(Hittable):
    """
    Rotates the wrapped geometry by `angle` degrees about a coordinate axis.

    The bounding box is the envelope of the inner box's eight rotated
    corners, computed once here. It is looser than the rotated shape but
    never excludes it.
    """

    def __init__(self, inner: Hittable, axis: Axis, angle: float):
        self.inner = inner
        self.axis = Axis(axis)
        self.angle = angle
        radians = math.radians(angle)
        self.cos_theta = math.cos(radians)
        self.sin_theta = math.sin(radians)

        corners = [c.rotate(self.axis, self.cos_theta, self.sin_theta)
                   for c in inner.bounding_box().vertices()]
        minimum = maximum = corners[0]
        for corner in corners[1:]:
            minimum = Vector3.min(minimum, corner)
            maximum = Vector3.max(maximum, corner)
        self.box = AABB(minimum, maximum)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Into object space by -angle, back out by +angle.
        local = Ray(ray.origin.rotate(self.axis, self.cos_theta, -self.sin_theta),
                    ray.direction.rotate(self.axis, self.cos_theta, -self.sin_theta))
        rec = self.inner.hit(local, t_min, t_max)
        if rec is None:
            return None
        return rec.replace(
            p=rec.p.rotate(self.axis, self.cos_theta, self.sin_theta),
            normal=rec.normal.rotate(self.axis, self.cos_theta, self.sin_theta),
        )

    def bounding_box(self) -> AABB:
        return self.box


def _rotate_degrees(v: Vector3, axis: Axis, degrees: float) -> Vector3:
    radians = math.radians(degrees)
    return v.rotate(axis, math.cos(radians), math.sin(radians))


def rotate_x(v: Vector3, degrees: float) -> Vector3:
    return _rotate_degrees(v, Axis.X, degrees)


def rotate_y(v: Vector3, degrees: float) -> Vector3:
    return _rotate_degrees(v, Axis.Y, degrees)


def rotate_z(v: Vector3, degrees: float) -> Vector3:
    return _rotate_degrees(v, Axis.Z, degrees)
