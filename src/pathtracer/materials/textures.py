# materials/textures.py
import math
import os
from typing import List, Optional, Union

import numpy as np
from PIL import Image

from pathtracer.core.vector import Vector3

# Colour of a texture looked up at a non-finite point
NAN_COLOR = Vector3(math.nan, math.nan, math.nan)


def _is_finite(p: Vector3) -> bool:
    return math.isfinite(p.x) and math.isfinite(p.y) and math.isfinite(p.z)


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Colour at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"SolidTexture({self.color!r})"


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain colour in a SolidTexture; textures pass through."""
    if isinstance(albedo, Vector3):
        return SolidTexture(albedo)
    return albedo


class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx)·sin(sy)·sin(sz) picks between
    the odd and even textures.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture], scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        if not _is_finite(p):
            return NAN_COLOR
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class ImageTexture(Texture):
    """A texture from an image file, sampled by (u, v)."""
    def __init__(self, image_path: str):
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"Texture file not found: {image_path}")
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            self.data = np.asarray(img, dtype=np.float64) / 255.0
        self.height, self.width = self.data.shape[:2]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        if math.isnan(u) or math.isnan(v):
            return NAN_COLOR
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # Image rows run top to bottom

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[y, x]
        return Vector3(float(r), float(g), float(b))


class Perlin:
    """
    Gradient noise over a lattice of 256 random unit vectors, hashed by three
    independent permutations of 0..255.
    """
    POINT_COUNT = 256

    def __init__(self, seed: Optional[int] = None):
        rng = np.random.default_rng(seed)
        gradients = rng.uniform(-1.0, 1.0, size=(self.POINT_COUNT, 3))
        gradients /= np.linalg.norm(gradients, axis=1, keepdims=True)
        self.gradients: List[Vector3] = [Vector3(float(x), float(y), float(z)) for x, y, z in gradients]
        self.perm_x: List[int] = rng.permutation(self.POINT_COUNT).tolist()
        self.perm_y: List[int] = rng.permutation(self.POINT_COUNT).tolist()
        self.perm_z: List[int] = rng.permutation(self.POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        """Smooth noise in roughly [-1, 1]; zero on every lattice point, NaN for a non-finite point."""
        if not _is_finite(p):
            return math.nan
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        # Hermite smoothing hides the lattice
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in (0, 1):
            for dj in (0, 1):
                for dk in (0, 1):
                    gradient = self.gradients[
                        self.perm_x[(i + di) & 255] ^
                        self.perm_y[(j + dj) & 255] ^
                        self.perm_z[(k + dk) & 255]
                    ]
                    weight = Vector3(u - di, v - dj, w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu)) *
                              (dj * vv + (1 - dj) * (1 - vv)) *
                              (dk * ww + (1 - dk) * (1 - ww)) *
                              gradient.dot(weight))
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """Sum of `depth` octaves, halving amplitude and doubling frequency each time."""
        accum = 0.0
        temp = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp)
            weight *= 0.5
            temp = temp * 2
        return abs(accum)


class NoiseTexture(Texture):
    """
    Perlin noise texture. With depth 0 it is plain smooth noise; otherwise
    turbulence shifts the phase of a sine along z, giving a marble look.
    """
    def __init__(self, scale: float = 1.0, depth: int = 7, seed: Optional[int] = None):
        if depth < 0:
            raise ValueError(f"Turbulence depth must be non-negative, got {depth}")
        self.scale = scale
        self.depth = depth
        self.perlin = Perlin(seed)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        if self.depth == 0:
            intensity = 0.5 * (1.0 + self.perlin.noise(p * self.scale))
        else:
            intensity = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.perlin.turbulence(p, self.depth)))
        return Vector3(1.0, 1.0, 1.0) * intensity
