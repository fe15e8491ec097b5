# renderer/image_output.py
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def check_output_path(path: Union[str, Path]) -> Path:
    """Raise ValueError unless `path` ends in `.ppm` or an extension Pillow knows."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".ppm":
        return path
    Image.init()
    if suffix not in Image.registered_extensions():
        raise ValueError(f"Unsupported image format {suffix or '(none)'!r} for {path}")
    return path


def save_image(buffer: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Write a (height, width, 3) uint8 buffer to disk. `.ppm` files are written
    as plain-text P3; every other extension goes through Pillow.
    """
    path = check_output_path(path)
    buffer = np.asarray(buffer, dtype=np.uint8)
    if buffer.ndim != 3 or buffer.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) buffer, got shape {buffer.shape}")

    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".ppm":
        write_ppm(buffer, path)
    else:
        Image.fromarray(buffer).save(path)
    logger.info("Wrote %dx%d image to %s", buffer.shape[1], buffer.shape[0], path)
    return path


def write_ppm(buffer: np.ndarray, path: Path):
    height, width, _ = buffer.shape
    with open(path, "w") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for r, g, b in buffer.reshape(-1, 3):
            f.write(f"{r} {g} {b}\n")
