"""Scattering and emission of the five materials."""
import math
import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere, reflect, seed_thread_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials import (
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    Isotropic,
    Lambertian,
    Metal,
)
from pathtracer.materials.dielectric import refract, schlick

from conftest import assert_vec_close

UP = Vector3(0.0, 1.0, 0.0)


def record(normal=UP, p=Vector3(0.0, 0.0, 0.0)):
    return HitRecord(1.0, p, normal, 0.25, 0.75)


def random_direction(rng):
    return Vector3(rng.gauss(0, 1), rng.gauss(0, 1), rng.gauss(0, 1))


class TestLambertian:
    def test_scatters_around_the_normal(self):
        material = Lambertian(Vector3(0.2, 0.4, 0.6))
        rec = record(p=Vector3(1, 2, 3))
        for _ in range(100):
            attenuation, scattered = material.scatter(Ray(Vector3(0, 5, 0), -UP), rec)
            assert attenuation == Vector3(0.2, 0.4, 0.6)
            assert scattered.origin == Vector3(1, 2, 3)
            assert (scattered.direction - UP).length() < 1.0

    def test_uses_texture(self):
        material = Lambertian(CheckerTexture(Vector3(1, 0, 0), Vector3(0, 0, 1)))
        rec = record(p=Vector3(0.1, 0.1, 0.1))
        attenuation, _ = material.scatter(Ray(Vector3(0, 5, 0), -UP), rec)
        assert attenuation == Vector3(0, 0, 1)

    def test_does_not_emit(self):
        assert Lambertian(Vector3(1, 1, 1)).emitted(0.0, 0.0, Vector3(0, 0, 0)) is None


class TestMetal:
    def test_fuzz_is_clamped(self):
        assert Metal(Vector3(1, 1, 1), 2.0).fuzz == 1.0
        assert Metal(Vector3(1, 1, 1), -1.0).fuzz == 0.0
        assert Metal(Vector3(1, 1, 1), 0.3).fuzz == 0.3

    def test_mirror_reflection(self):
        material = Metal(Vector3(0.8, 0.8, 0.8))
        attenuation, scattered = material.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), record())
        assert attenuation == Vector3(0.8, 0.8, 0.8)
        assert_vec_close(scattered.direction, Vector3(1, 1, 0).normalize())

    def test_absorbs_rays_from_behind(self):
        material = Metal(Vector3(0.8, 0.8, 0.8))
        assert material.scatter(Ray(Vector3(0, -1, 0), UP), record()) is None

    def test_rejects_exactly_below_surface(self):
        rng = random.Random(12)
        for k in range(300):
            fuzz = rng.uniform(0.0, 1.0)
            material = Metal(Vector3(1, 1, 1), fuzz)
            direction = random_direction(rng)
            if direction.dot(UP) > 0:
                direction = -direction

            seed_thread_rng(k)
            result = material.scatter(Ray(Vector3(0, 1, 0), direction), record())
            seed_thread_rng(k)
            expected = reflect(direction.normalize(), UP) + random_in_unit_sphere() * fuzz

            if expected.dot(UP) <= 0:
                assert result is None
            else:
                assert result is not None
                assert result[1].direction == expected


class TestDielectric:
    @pytest.mark.parametrize("ref_idx", [0.0, -1.5])
    def test_rejects_non_positive_index(self, ref_idx):
        with pytest.raises(ValueError):
            Dielectric(ref_idx)

    def test_always_scatters(self):
        rng = random.Random(13)
        for _ in range(500):
            material = Dielectric(rng.uniform(1.0, 3.0))
            direction = random_direction(rng)
            result = material.scatter(Ray(Vector3(0, 0, 0), direction), record())
            assert result is not None
            attenuation, scattered = result
            assert attenuation == Vector3(1.0, 1.0, 1.0)
            assert scattered.origin == Vector3(0, 0, 0)
            assert scattered.direction.length() > 0

    def test_total_internal_reflection(self):
        # Leaving glass at a grazing angle cannot refract
        material = Dielectric(1.5)
        for _ in range(20):
            _, scattered = material.scatter(Ray(Vector3(0, 0, 0), Vector3(1.0, 0.1, 0.0)), record())
            assert_vec_close(scattered.direction, Vector3(1.0, -0.1, 0.0))

    def test_normal_incidence_passes_straight_through(self):
        material = Dielectric(1.5)
        seen_refraction = False
        for _ in range(50):
            _, scattered = material.scatter(Ray(Vector3(0, 1, 0), -UP), record())
            if scattered.direction.y < 0:
                seen_refraction = True
                assert_vec_close(scattered.direction, -UP)
            else:
                assert_vec_close(scattered.direction, UP)
        assert seen_refraction

    def test_refract(self):
        assert_vec_close(refract(Vector3(0, 0, 1), Vector3(0, 0, -1), 1 / 1.5), Vector3(0, 0, 1))
        assert refract(Vector3(1.0, 0.1, 0.0), Vector3(0, -1, 0), 1.5) is None

    def test_refracted_ray_obeys_snell(self):
        incoming = Vector3(math.sin(math.radians(30)), -math.cos(math.radians(30)), 0)
        out = refract(incoming, UP, 1 / 1.5)
        sin_out = abs(out.normalize().x)
        assert sin_out == pytest.approx(math.sin(math.radians(30)) / 1.5)

    def test_schlick(self):
        assert schlick(1.0, 1.5) == pytest.approx(0.04)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)


class TestDiffuseLight:
    def test_emits_and_never_scatters(self):
        light = DiffuseLight(Vector3(4, 4, 4))
        assert light.scatter(Ray(Vector3(0, 1, 0), -UP), record()) is None
        assert light.emitted(0.5, 0.5, Vector3(0, 0, 0)) == Vector3(4, 4, 4)

    def test_textured_emission(self):
        light = DiffuseLight(CheckerTexture(Vector3(1, 0, 0), Vector3(0, 1, 0)))
        assert light.emitted(0.0, 0.0, Vector3(-0.1, 0.1, 0.1)) == Vector3(1, 0, 0)


class TestIsotropic:
    def test_scatters_in_any_direction(self):
        material = Isotropic(Vector3(0.9, 0.9, 0.9))
        rec = record(p=Vector3(1, 1, 1))
        below = 0
        for _ in range(200):
            attenuation, scattered = material.scatter(Ray(Vector3(0, 5, 0), -UP), rec)
            assert attenuation == Vector3(0.9, 0.9, 0.9)
            assert scattered.origin == Vector3(1, 1, 1)
            assert scattered.direction.length() == pytest.approx(1.0)
            if scattered.direction.dot(UP) < 0:
                below += 1
        assert 0 < below < 200
