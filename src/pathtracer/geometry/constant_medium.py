# geometry/constant_medium.py
import math
from typing import Optional, Tuple

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import thread_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class ConstantMedium(Hittable):
    """
    Participating medium (fog, smoke) of uniform density filling a boundary
    shape. Rays passing through it scatter at a random distance drawn from an
    exponential distribution.

    Entry and exit are found by hitting the boundary with the ray and with
    the reversed ray, so the boundary must be convex: a concave shape yields
    wrong entry/exit pairs. The medium does not model refraction at the
    boundary.
    """
    def __init__(self, boundary: Hittable, density: float):
        if not density > 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density

    def boundary_hits(self, ray: Ray) -> Optional[Tuple[HitRecord, HitRecord]]:
        """Returns the (entry, exit) boundary hits along the whole line of the ray."""
        entry = self.boundary.hit(ray, -math.inf, math.inf)
        if entry is None:
            return None
        inverted = Ray(ray.origin, -ray.direction)
        exit_ = self.boundary.hit(inverted, -math.inf, math.inf)
        if exit_ is None:
            return None
        # t along the inverted ray is -t along the original one
        return entry, exit_.replace(t=-exit_.t)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hits = self.boundary_hits(ray)
        if hits is None:
            return None
        entry, exit_ = hits
        if entry.t > t_max or exit_.t < t_min:
            return None

        start = max(entry.t, t_min)
        end = min(exit_.t, t_max)
        ray_length = ray.direction.length()
        distance_inside = (end - start) * ray_length
        # 1 - random() lies in (0, 1], keeping the log finite
        hit_distance = -(1.0 / self.density) * math.log(1.0 - thread_rng().random())
        if hit_distance >= distance_inside:
            return None

        t = start + hit_distance / ray_length
        return HitRecord(t, ray.at(t), Vector3(1, 0, 0), 0.0, 0.0)

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()
