"""Render settings read from environment variables, with defaults."""

import os
from pathlib import Path

# Numeric settings stay strings; argparse converts them like flag values.

# Image settings
WIDTH = os.getenv("PATHTRACER_WIDTH", "200")
HEIGHT = os.getenv("PATHTRACER_HEIGHT", "200")
SAMPLES_PER_PIXEL = os.getenv("PATHTRACER_SAMPLES", "50")

# Integrator settings
THREAD_COUNT = os.getenv("PATHTRACER_THREADS", str(os.cpu_count() or 1))
MAX_DEPTH = os.getenv("PATHTRACER_MAX_DEPTH", "50")
SEED = os.getenv("PATHTRACER_SEED") or None

# Scene and output
SCENE = os.getenv("PATHTRACER_SCENE", "cornell")
OUTPUT_PATH = Path(os.getenv("PATHTRACER_OUTPUT", "out/out.png"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
