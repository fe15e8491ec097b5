from pathtracer.renderer.image_output import check_output_path, save_image
from pathtracer.renderer.raytracer import DEPTH_MAX, MIN_DISTANCE, Renderer, render, trace
from pathtracer.renderer.tone_mapping import gamma_correct

__all__ = ["DEPTH_MAX", "MIN_DISTANCE", "Renderer", "check_output_path", "gamma_correct", "render", "save_image", "trace"]
