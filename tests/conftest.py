"""Pytest configuration and shared fixtures."""

import pytest

from pathtracer.camera import Camera
from pathtracer.core.utils import seed_thread_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry import Scene, SkyBackground, Sphere
from pathtracer.materials import Lambertian


def assert_vec_close(actual, expected, abs_tol=1e-9):
    assert tuple(actual) == pytest.approx(tuple(expected), abs=abs_tol)


@pytest.fixture(autouse=True)
def seeded_rng():
    """Every test starts from the same thread-local random stream."""
    return seed_thread_rng(1234)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def unit_sphere_scene(gray):
    """A single unit sphere at the origin under the default sky."""
    return Scene({Sphere(Vector3(0, 0, 0), 1.0): gray}, SkyBackground())


@pytest.fixture
def camera_down_z():
    """Looks down -z from z = +3 with a 90 degree vertical field of view."""
    return Camera(Vector3(0, 0, 3), Vector3(0, 0, 0), Vector3(0, 1, 0), 90.0, 1.0)
