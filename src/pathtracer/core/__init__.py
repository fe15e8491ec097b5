from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Axis, Vector3

__all__ = ["AABB", "Axis", "Ray", "Vector3"]
