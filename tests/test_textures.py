"""Solid, checker, Perlin noise and image textures."""
import math
import random

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.vector import Vector3
from pathtracer.materials import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    Perlin,
    SolidTexture,
    as_texture,
)

ORIGIN = Vector3(0, 0, 0)
NON_FINITE = [Vector3(math.nan, 0, 0), Vector3(0, math.inf, 0), Vector3(0, 0, -math.inf)]


def is_nan_color(c):
    return math.isnan(c.x) and math.isnan(c.y) and math.isnan(c.z)


def test_solid_texture_ignores_coordinates():
    texture = SolidTexture(Vector3(0.1, 0.2, 0.3))
    assert texture.value(0.0, 1.0, Vector3(5, 5, 5)) == Vector3(0.1, 0.2, 0.3)


def test_as_texture():
    wrapped = as_texture(Vector3(1, 1, 1))
    assert isinstance(wrapped, SolidTexture)
    assert as_texture(wrapped) is wrapped


class TestChecker:
    def test_sign_of_sine_product_picks_texture(self):
        odd, even = Vector3(0, 0, 0), Vector3(1, 1, 1)
        checker = CheckerTexture(odd, even)
        assert checker.value(0, 0, Vector3(0.1, 0.1, 0.1)) == even
        assert checker.value(0, 0, Vector3(-0.1, 0.1, 0.1)) == odd
        assert checker.value(0, 0, Vector3(-0.1, -0.1, 0.1)) == even

    def test_scale(self):
        checker = CheckerTexture(Vector3(0, 0, 0), Vector3(1, 1, 1), scale=1.0)
        assert checker.value(0, 0, Vector3(4.0, 1.0, 1.0)) == Vector3(0, 0, 0)

    def test_nested_textures(self):
        inner = CheckerTexture(Vector3(1, 0, 0), Vector3(0, 1, 0), scale=100.0)
        outer = CheckerTexture(inner, Vector3(0, 0, 1))
        assert outer.value(0, 0, Vector3(0.1, 0.1, 0.1)) == Vector3(0, 0, 1)
        assert outer.value(0, 0, Vector3(-0.1, 0.1, 0.1)) in (Vector3(1, 0, 0), Vector3(0, 1, 0))

    @pytest.mark.parametrize("p", NON_FINITE)
    def test_non_finite_point_is_nan(self, p):
        checker = CheckerTexture(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert is_nan_color(checker.value(0, 0, p))


class TestPerlin:
    def test_tables(self):
        perlin = Perlin(seed=1)
        assert len(perlin.gradients) == 256
        for g in perlin.gradients:
            assert g.length() == pytest.approx(1.0)
        for perm in (perlin.perm_x, perlin.perm_y, perlin.perm_z):
            assert sorted(perm) == list(range(256))

    def test_same_seed_same_noise(self):
        a, b = Perlin(seed=7), Perlin(seed=7)
        points = [Vector3(0.3 * i, 1.7 * i, -0.9 * i) for i in range(20)]
        assert [a.noise(p) for p in points] == [b.noise(p) for p in points]
        assert a.turbulence(points[3]) == b.turbulence(points[3])

    def test_different_seeds_differ(self):
        p = Vector3(0.5, 0.25, 0.75)
        assert Perlin(seed=1).noise(p) != Perlin(seed=2).noise(p)

    def test_zero_on_lattice(self):
        perlin = Perlin(seed=3)
        for p in (Vector3(0, 0, 0), Vector3(3, -2, 7), Vector3(-10, 4, 255)):
            assert perlin.noise(p) == 0.0

    def test_bounded_and_continuous(self):
        perlin = Perlin(seed=4)
        rng = random.Random(4)
        for _ in range(300):
            p = Vector3(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(-50, 50))
            n = perlin.noise(p)
            assert -1.5 <= n <= 1.5
            assert abs(perlin.noise(p + Vector3(1e-6, 0, 0)) - n) < 1e-4

    def test_turbulence_non_negative(self):
        perlin = Perlin(seed=5)
        rng = random.Random(5)
        for _ in range(100):
            p = Vector3(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(-5, 5))
            assert perlin.turbulence(p) >= 0.0
        assert perlin.turbulence(Vector3(0.5, 0.5, 0.5), depth=0) == 0.0

    @pytest.mark.parametrize("p", NON_FINITE)
    def test_non_finite_point_is_nan(self, p):
        perlin = Perlin(seed=6)
        assert math.isnan(perlin.noise(p))
        assert math.isnan(perlin.turbulence(p))


class TestNoiseTexture:
    @pytest.mark.parametrize("depth", [0, 7])
    def test_gray_in_unit_range(self, depth):
        texture = NoiseTexture(scale=4.0, depth=depth, seed=11)
        rng = random.Random(6)
        for _ in range(100):
            p = Vector3(rng.uniform(-3, 3), rng.uniform(-3, 3), rng.uniform(-3, 3))
            c = texture.value(0.0, 0.0, p)
            assert c.x == c.y == c.z
            assert 0.0 <= c.x <= 1.0

    def test_smooth_noise_is_mid_gray_on_lattice(self):
        texture = NoiseTexture(scale=1.0, depth=0, seed=11)
        assert texture.value(0, 0, Vector3(2, 3, 4)) == Vector3(0.5, 0.5, 0.5)

    def test_seeded_textures_agree(self):
        p = Vector3(0.3, 0.6, 0.9)
        assert NoiseTexture(seed=2).value(0, 0, p) == NoiseTexture(seed=2).value(0, 0, p)

    def test_rejects_negative_depth(self):
        with pytest.raises(ValueError):
            NoiseTexture(depth=-1)

    @pytest.mark.parametrize("depth", [0, 7])
    @pytest.mark.parametrize("p", NON_FINITE)
    def test_non_finite_point_is_nan(self, depth, p):
        assert is_nan_color(NoiseTexture(depth=depth, seed=3).value(0, 0, p))


class TestImageTexture:
    @pytest.fixture
    def quad_png(self, tmp_path):
        pixels = np.array([
            [[255, 0, 0], [0, 255, 0]],
            [[0, 0, 255], [255, 255, 255]],
        ], dtype=np.uint8)
        path = tmp_path / "quad.png"
        Image.fromarray(pixels).save(path)
        return str(path)

    def test_corners(self, quad_png):
        texture = ImageTexture(quad_png)
        assert (texture.width, texture.height) == (2, 2)
        assert texture.value(0.0, 1.0, ORIGIN) == Vector3(1, 0, 0)
        assert texture.value(1.0, 1.0, ORIGIN) == Vector3(0, 1, 0)
        assert texture.value(0.0, 0.0, ORIGIN) == Vector3(0, 0, 1)
        assert texture.value(1.0, 0.0, ORIGIN) == Vector3(1, 1, 1)

    def test_coordinates_are_clamped(self, quad_png):
        texture = ImageTexture(quad_png)
        assert texture.value(-3.0, 7.0, ORIGIN) == Vector3(1, 0, 0)
        assert texture.value(2.0, -1.0, ORIGIN) == Vector3(1, 1, 1)

    def test_grayscale_is_converted(self, tmp_path):
        path = tmp_path / "gray.png"
        Image.new("L", (3, 3), 51).save(path)
        texture = ImageTexture(str(path))
        assert texture.value(0.5, 0.5, ORIGIN) == Vector3(0.2, 0.2, 0.2)

    def test_nan_coordinate_is_nan(self, quad_png):
        texture = ImageTexture(quad_png)
        assert is_nan_color(texture.value(math.nan, 0.5, ORIGIN))
        assert is_nan_color(texture.value(0.5, math.nan, ORIGIN))
        # Infinite coordinates clamp to the border like any other
        assert texture.value(math.inf, -math.inf, ORIGIN) == Vector3(1, 1, 1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ImageTexture(str(tmp_path / "nope.png"))
