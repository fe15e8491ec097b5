from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    Perlin,
    SolidTexture,
    Texture,
    as_texture,
)

__all__ = [
    "CheckerTexture",
    "Dielectric",
    "DiffuseLight",
    "ImageTexture",
    "Isotropic",
    "Lambertian",
    "Material",
    "Metal",
    "NoiseTexture",
    "Perlin",
    "SolidTexture",
    "Texture",
    "as_texture",
]
