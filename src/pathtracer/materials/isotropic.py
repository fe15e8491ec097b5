# materials/isotropic.py
from typing import Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Vector3, Ray]:
        return self.texture.value(rec.u, rec.v, rec.p), Ray(rec.p, random_unit_vector())
