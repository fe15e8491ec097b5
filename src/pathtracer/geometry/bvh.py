# geometry/bvh.py
import random
from typing import Optional, Sequence

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Axis
from pathtracer.geometry.hittable import Hittable, HitRecord


class BVHNode(Hittable):
    """
    Bounding volume hierarchy node.

    Each node sorts its objects by the minimum corner of their bounding boxes
    along a randomly chosen axis and splits them at the median. One object
    gives a leaf with only a left child, two objects a leaf with both
    children. The tree is built once and is read-only afterwards, so any
    number of threads may traverse it.
    """
    def __init__(self, objects: Sequence[Hittable], rng: Optional[random.Random] = None):
        if len(objects) == 0:
            raise ValueError("Cannot build a BVH over an empty object list")
        rng = rng or random

        axis = Axis(rng.randrange(3))
        objects = sorted(objects, key=lambda obj: obj.bounding_box().minimum.get_axis(axis))

        object_span = len(objects)
        if object_span == 1:
            self.left = objects[0]
            self.right = None
            self.box = self.left.bounding_box()
        elif object_span == 2:
            self.left, self.right = objects
            self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())
        else:
            mid = object_span // 2
            self.left = BVHNode(objects[:mid], rng)
            self.right = BVHNode(objects[mid:], rng)
            self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Anything on the right must beat the left hit to matter
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max) if self.right is not None else None
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of node levels below and including this one."""
        return 1 + max(child.depth() if isinstance(child, BVHNode) else 0
                       for child in (self.left, self.right))
