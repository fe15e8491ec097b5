"""Monte Carlo path tracer: BVH-accelerated geometry, materials and a multi-threaded integrator."""

from pathtracer.camera import Camera
from pathtracer.core import AABB, Axis, Ray, Vector3
from pathtracer.geometry import Scene
from pathtracer.renderer import Renderer, render, trace

__version__ = "0.1.0"

__all__ = ["AABB", "Axis", "Camera", "Ray", "Renderer", "Scene", "Vector3", "render", "trace"]
