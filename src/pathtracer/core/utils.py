# core/utils.py
import random
import threading
from typing import Optional

from pathtracer.core.vector import Vector3

_local = threading.local()


def thread_rng() -> random.Random:
    """
    Returns the random generator owned by the calling thread, creating an
    entropy-seeded one on first use.
    """
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = _local.rng = random.Random()
    return rng


def seed_thread_rng(seed: Optional[int]) -> random.Random:
    """
    Replaces the calling thread's generator with one seeded by `seed`
    (OS entropy when seed is None).
    """
    _local.rng = random.Random(seed)
    return _local.rng


def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    rng = thread_rng()
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere()
        if p.squared_length() > 1e-12:
            return p.normalize()


def random_in_unit_disk() -> Vector3:
    """Random point in the unit disk on the z = 0 plane, used for the lens."""
    rng = thread_rng()
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
