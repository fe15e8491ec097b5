# materials/lambertian.py
from typing import Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Vector3, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray).
        """
        # Offsetting the normal by a random point in the unit sphere
        # approximates a cosine-weighted lobe.
        scatter_direction = rec.normal + random_in_unit_sphere()

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.length() < 1e-8:
            scatter_direction = rec.normal

        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return attenuation, Ray(rec.p, scatter_direction)

    def __repr__(self) -> str:
        return f"Lambertian({self.texture!r})"
