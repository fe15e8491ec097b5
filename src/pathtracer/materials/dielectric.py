# materials/dielectric.py
import math
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, thread_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Dielectric(Material):
    """
    Clear refractive material such as glass or water. Chooses between
    reflection and refraction at random, weighted by Schlick's Fresnel
    approximation; always scatters and never absorbs.
    """
    def __init__(self, ref_idx: float):
        if not ref_idx > 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Vector3, Ray]]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)

        # Normals point outwards, so a positive dot product means we are exiting
        d_dot_n = direction.dot(rec.normal)
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            # Total internal reflection
            return attenuation, Ray(rec.p, reflected)

        if thread_rng().random() < schlick(cosine, self.ref_idx):
            return attenuation, Ray(rec.p, reflected)
        return attenuation, Ray(rec.p, refracted)

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"


def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Snell refraction of v through a surface with normal n, or None when the
    discriminant is not positive (total internal reflection).
    """
    uv = v.normalize()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant > 0:
        return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)
    return None


def schlick(cosine: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
