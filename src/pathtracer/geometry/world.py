# geometry/world.py
import logging
import random
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class HittableList(Hittable):
    """
    A plain list of Hittable objects searched linearly for the closest hit.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise ValueError("An empty HittableList has no bounding box")
        box = self.objects[0].bounding_box()
        for obj in self.objects[1:]:
            box = AABB.surrounding_box(box, obj.bounding_box())
        return box

    def __len__(self) -> int:
        return len(self.objects)


class Model(Hittable):
    """
    A geometry paired with the material it is rendered with. Hit records
    coming out of a model carry that material.
    """
    def __init__(self, geometry: Hittable, material):
        self.geometry = geometry
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec = self.geometry.hit(ray, t_min, t_max)
        if rec is None:
            return None
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.geometry.bounding_box()

    def __repr__(self) -> str:
        return f"Model({self.geometry!r}, {self.material!r})"


class SkyBackground:
    """Vertical white-to-blue gradient seen by rays that escape the scene."""

    def __init__(self, bottom: Vector3 = Vector3(1.0, 1.0, 1.0),
                 top: Vector3 = Vector3(0.5, 0.7, 1.0)):
        self.bottom = bottom
        self.top = top

    def __call__(self, ray: Ray) -> Vector3:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.y + 1.0)
        return self.bottom * (1.0 - t) + self.top * t


class SolidBackground:
    """Constant background colour; black for scenes lit only by their lights."""

    def __init__(self, color: Vector3 = Vector3(0.0, 0.0, 0.0)):
        self.color = color

    def __call__(self, ray: Ray) -> Vector3:
        return self.color


SceneObjects = Union[Mapping[Hittable, object], Iterable[Tuple[Hittable, object]]]


class Scene(Hittable):
    """
    Everything the integrator needs: a BVH over the scene's models and the
    background seen by escaping rays. Built once, read-only while rendering.

    `objects` maps each geometry to its material, either as a mapping or as
    an iterable of (geometry, material) pairs.
    """
    def __init__(self, objects: SceneObjects, background=None,
                 rng: Optional[random.Random] = None):
        if isinstance(objects, Mapping):
            objects = objects.items()
        self.models = [Model(geometry, material) for geometry, material in objects]
        if not self.models:
            raise ValueError("A scene needs at least one object")

        self.background = background if background is not None else SkyBackground()
        self.root = BVHNode(self.models, rng)
        logger.info("Built BVH over %d objects (depth %d)", len(self.models), self.root.depth())

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.root.hit(ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        return self.root.bounding_box()

    def __len__(self) -> int:
        return len(self.models)
