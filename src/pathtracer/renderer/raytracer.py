# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.utils import seed_thread_rng
from pathtracer.core.vector import Vector3
from pathtracer.renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

# Ignore hits closer than this to suppress self-intersection ("shadow acne")
MIN_DISTANCE = 1e-6
MAX_DISTANCE = math.inf
DEPTH_MAX = 50

BLACK = Vector3(0.0, 0.0, 0.0)


def trace(ray: Ray, scene, depth: int = 0, max_depth: int = DEPTH_MAX) -> Vector3:
    """
    Radiance carried back along `ray`: what the material at the closest hit
    emits plus its attenuation times the radiance of the scattered ray.
    Recursion stops at `max_depth` bounces, returning black.
    """
    if depth >= max_depth:
        return BLACK

    rec = scene.hit(ray, MIN_DISTANCE, MAX_DISTANCE)
    if rec is None:
        return scene.background(ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    if emitted is None:
        emitted = BLACK

    scattered = rec.material.scatter(ray, rec)
    if scattered is None:
        return emitted

    attenuation, scattered_ray = scattered
    return emitted + attenuation * trace(scattered_ray, scene, depth + 1, max_depth)


class Renderer:
    """
    Multi-threaded Monte Carlo renderer.

    The image is cut into horizontal slices, one per thread. Each slice is
    rendered into its own buffer with its own random generator; the scene and
    camera are only read. Slices are stitched back together in row order.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16,
                 thread_count: int = 1, max_depth: int = DEPTH_MAX,
                 seed: Optional[int] = None):
        for name, value in (("width", width), ("height", height),
                            ("samples_per_pixel", samples_per_pixel),
                            ("thread_count", thread_count), ("max_depth", max_depth)):
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.thread_count = min(thread_count, height)
        self.max_depth = max_depth
        self.seed = seed

    def slices(self) -> List[Tuple[int, int]]:
        """(first_row, end_row) of each thread's slice, counted from the top."""
        rows_per_slice, remainder = divmod(self.height, self.thread_count)
        bounds = []
        start = 0
        for index in range(self.thread_count):
            end = start + rows_per_slice + (1 if index < remainder else 0)
            bounds.append((start, end))
            start = end
        return bounds

    def render(self, scene, camera) -> np.ndarray:
        """
        Render the scene to a (height, width, 3) uint8 array, rows top to bottom.
        Any exception raised while rendering a slice propagates from here.
        """
        logger.info("Rendering %dx%d, %d spp on %d thread(s)",
                    self.width, self.height, self.samples_per_pixel, self.thread_count)
        start_time = time.perf_counter()

        with ThreadPoolExecutor(max_workers=self.thread_count,
                                thread_name_prefix="render-slice") as pool:
            futures = [
                pool.submit(self.render_slice, scene, camera, index, first_row, end_row)
                for index, (first_row, end_row) in enumerate(self.slices())
            ]
            parts = [future.result() for future in futures]

        image = np.concatenate(parts, axis=0)

        elapsed = time.perf_counter() - start_time
        rays = self.width * self.height * self.samples_per_pixel
        logger.info("%d primary rays in %.2f s (%.0f rays/s)",
                    rays, elapsed, rays / elapsed if elapsed > 0 else float("inf"))
        return image

    def render_slice(self, scene, camera, index: int, first_row: int, end_row: int) -> np.ndarray:
        """Render image rows [first_row, end_row) into a private buffer."""
        rng = seed_thread_rng(None if self.seed is None else self.seed + index)
        width, height = self.width, self.height
        accumulated = np.zeros((end_row - first_row, width, 3), dtype=np.float64)

        for row in range(first_row, end_row):
            # Image rows run top to bottom; the image plane's v runs bottom to top
            j = height - 1 - row
            for i in range(width):
                r = g = b = 0.0
                for _ in range(self.samples_per_pixel):
                    u = (i + rng.random()) / width
                    v = (j + rng.random()) / height
                    color = trace(camera.get_ray(u, v), scene, 0, self.max_depth)
                    r += color.x
                    g += color.y
                    b += color.z
                accumulated[row - first_row, i] = (r, g, b)

        logger.debug("Slice %d (rows %d-%d) done", index, first_row, end_row - 1)
        return gamma_correct(accumulated, self.samples_per_pixel)


def render(scene, camera, width: int, height: int, samples_per_pixel: int,
           thread_count: int, seed: Optional[int] = None,
           max_depth: int = DEPTH_MAX) -> np.ndarray:
    """
    Render `scene` through `camera`. Returns a (height, width, 3) uint8 array
    of RGB triples, rows top to bottom.
    """
    renderer = Renderer(width, height, samples_per_pixel, thread_count, max_depth, seed)
    return renderer.render(scene, camera)
