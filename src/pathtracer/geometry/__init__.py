from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.cube import Cube
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.rect import Rect
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.transform import FlipNormals, Rotate, Translate, rotate_x, rotate_y, rotate_z
from pathtracer.geometry.world import HittableList, Model, Scene, SkyBackground, SolidBackground

__all__ = [
    "BVHNode",
    "ConstantMedium",
    "Cube",
    "FlipNormals",
    "HitRecord",
    "Hittable",
    "HittableList",
    "Model",
    "Rect",
    "Rotate",
    "Scene",
    "SkyBackground",
    "SolidBackground",
    "Sphere",
    "Translate",
    "rotate_x",
    "rotate_y",
    "rotate_z",
]
