# scenes.py
"""
Demo scenes. Each builder returns the Scene together with a Camera framed
for it at the requested aspect ratio.
"""
import random
from typing import Callable, Dict, Optional, Tuple

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Axis, Vector3
from pathtracer.geometry import (
    ConstantMedium,
    Cube,
    FlipNormals,
    Rect,
    Rotate,
    Scene,
    SkyBackground,
    SolidBackground,
    Sphere,
    Translate,
)
from pathtracer.materials import (
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    Isotropic,
    Lambertian,
    Metal,
    NoiseTexture,
)

UP = Vector3(0.0, 1.0, 0.0)


def _random_color(rng: random.Random) -> Vector3:
    return Vector3(rng.random(), rng.random(), rng.random())


def random_spheres(aspect_ratio: float, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    """A checkered ground under a field of small random spheres and three large ones."""
    rng = random.Random(seed)
    objects = [
        (Sphere(Vector3(0, -1000, 0), 1000),
         Lambertian(CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9), 10.0))),
        (Sphere(Vector3(-4, 1, 0), 1.0), Lambertian(_random_color(rng) * _random_color(rng))),
        (Sphere(Vector3(4, 1, 0), 1.0),
         Metal((_random_color(rng) + Vector3(1, 1, 1)) * 0.5, rng.random() * 0.3)),
        (Sphere(Vector3(0, 1, 0), 1.0), Dielectric(1.5)),
    ]

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Lambertian(_random_color(rng) * _random_color(rng))
            elif choose_mat < 0.95:
                material = Metal((_random_color(rng) + Vector3(1, 1, 1)) * 0.5, 0.5 * rng.random())
            else:
                material = Dielectric(1.5)
            objects.append((Sphere(center, 0.2), material))

    look_from = Vector3(16, 2, 4)
    look_at = Vector3(-3, 0.5, -1)
    camera = Camera(look_from, look_at, UP, 15.0, aspect_ratio, aperture=0.1)
    return Scene(objects, SkyBackground(), rng), camera


def _cornell_walls():
    red = Lambertian(Vector3(0.65, 0.05, 0.05))
    green = Lambertian(Vector3(0.12, 0.45, 0.15))
    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    objects = [
        (FlipNormals(Rect.yz(0, 555, 0, 555, 555)), green),
        (Rect.yz(0, 555, 0, 555, 0), red),
        (FlipNormals(Rect.xz(0, 555, 0, 555, 555)), white),
        (Rect.xz(0, 555, 0, 555, 0), white),
        (FlipNormals(Rect.xy(0, 555, 0, 555, 555)), white),
    ]
    return objects, white


def _cornell_camera(aspect_ratio: float) -> Camera:
    look_from = Vector3(278, 278, -800)
    look_at = Vector3(278, 278, 0)
    return Camera(look_from, look_at, UP, 40.0, aspect_ratio)


def _cornell_blocks():
    short = Translate(Rotate(Cube.from_size(Vector3(165, 165, 165)), Axis.Y, -18.0),
                      Vector3(130, 0, 65))
    tall = Translate(Rotate(Cube.from_size(Vector3(165, 330, 165)), Axis.Y, 15.0),
                     Vector3(265, 0, 295))
    return short, tall


def cornell_box(aspect_ratio: float, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    """The Cornell box: coloured walls, a ceiling light and two rotated blocks."""
    objects, white = _cornell_walls()
    objects.append((Rect.xz(213, 343, 227, 332, 554), DiffuseLight(Vector3(15, 15, 15))))
    short, tall = _cornell_blocks()
    objects.append((short, white))
    objects.append((tall, white))
    return Scene(objects, SolidBackground(), random.Random(seed)), _cornell_camera(aspect_ratio)


def cornell_smoke(aspect_ratio: float, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    """Cornell box whose blocks are replaced by white and black smoke."""
    objects, _ = _cornell_walls()
    objects.append((Rect.xz(113, 443, 127, 432, 554), DiffuseLight(Vector3(7, 7, 7))))
    short, tall = _cornell_blocks()
    objects.append((ConstantMedium(short, 0.01), Isotropic(Vector3(1, 1, 1))))
    objects.append((ConstantMedium(tall, 0.01), Isotropic(Vector3(0, 0, 0))))
    return Scene(objects, SolidBackground(), random.Random(seed)), _cornell_camera(aspect_ratio)


def perlin_spheres(aspect_ratio: float, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    """Two marble spheres lit by a sphere light and a rectangle light."""
    marble = Lambertian(NoiseTexture(scale=4.0, depth=7, seed=seed))
    light = DiffuseLight(Vector3(4, 4, 4))
    objects = [
        (Sphere(Vector3(0, -1000, 0), 1000), marble),
        (Sphere(Vector3(0, 2, 0), 2), marble),
        (Sphere(Vector3(0, 7, 0), 2), light),
        (Rect.xy(3, 5, 1, 3, -2), light),
    ]
    look_from = Vector3(26, 3, 6)
    look_at = Vector3(0, 2, 0)
    camera = Camera(look_from, look_at, UP, 20.0, aspect_ratio)
    return Scene(objects, SolidBackground(Vector3(0.05, 0.05, 0.08)), random.Random(seed)), camera


SCENES: Dict[str, Callable[..., Tuple[Scene, Camera]]] = {
    "random": random_spheres,
    "cornell": cornell_box,
    "cornell-smoke": cornell_smoke,
    "perlin": perlin_spheres,
}


def build_scene(name: str, aspect_ratio: float, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}") from None
    return builder(aspect_ratio, seed)
