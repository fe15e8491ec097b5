# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit


def gamma_correct(accumulated: np.ndarray, samples: int) -> np.ndarray:
    """
    Turn a buffer of summed linear radiance into displayable 8-bit colour:
    average over `samples`, gamma 2 (sqrt), scale to 0..255 and clamp.
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    output = np.empty(accumulated.shape, dtype=np.uint8)
    gamma_correct_kernel(accumulated, samples, output)
    return output


@njit
def gamma_correct_kernel(accumulated, samples, output):
    height, width, channels = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = accumulated[y, x, c] / samples
                if value > 0.0:
                    value = math.sqrt(value) * 255.99
                else:
                    value = 0.0
                output[y, x, c] = int(min(value, 255.0))
