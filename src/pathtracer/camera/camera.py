# camera/camera.py
import math
from typing import Optional

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk
from pathtracer.core.vector import Vector3


class Camera:
    """
    Thin-lens camera. (u, v) in [0, 1]^2 address the image plane from its
    lower-left corner.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: Optional[float] = None):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist if focus_dist is not None else (look_from - look_at).length()
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        half_height = math.tan(math.radians(self.vfov) / 2)
        half_width = self.aspect_ratio * half_height

        # Camera looks down -w
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.look_from
        self.horizontal = self.u * (2.0 * half_width * self.focus_dist)
        self.vertical = self.v * (2.0 * half_height * self.focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float) -> Ray:
        """Generates a ray through image-plane point (s, t) with depth of field."""
        if self.lens_radius <= 0:
            offset = Vector3(0, 0, 0)
        else:
            rd = random_in_unit_disk() * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y

        return Ray(self.origin + offset,
                   self.lower_left_corner +
                   self.horizontal * s +
                   self.vertical * t -
                   self.origin -
                   offset)
