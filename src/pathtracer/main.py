import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pathtracer import config
from pathtracer.logging_config import setup_logging
from pathtracer.renderer import Renderer, check_output_path, save_image
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer.main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a demo scene with the Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default=config.SCENE)
    parser.add_argument("--width", type=int, default=config.WIDTH)
    parser.add_argument("--height", type=int, default=config.HEIGHT)
    parser.add_argument("--samples", type=int, default=config.SAMPLES_PER_PIXEL,
                        help="samples per pixel")
    parser.add_argument("--threads", type=int, default=config.THREAD_COUNT)
    parser.add_argument("--max-depth", type=int, default=config.MAX_DEPTH)
    parser.add_argument("--seed", type=int, default=config.SEED,
                        help="base seed for reproducible renders")
    parser.add_argument("--output", type=Path, default=config.OUTPUT_PATH,
                        help=".ppm for plain-text PPM, any Pillow format otherwise")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    parser.add_argument("--log-file", type=Path, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging("pathtracer", args.log_level, args.log_file)

    try:
        # Validates the image settings before any scene work
        renderer = Renderer(args.width, args.height, args.samples, args.threads,
                            args.max_depth, args.seed)
        check_output_path(args.output)
        scene, camera = build_scene(args.scene, args.width / args.height, args.seed)
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 2

    logger.info("Scene %r with %d objects", args.scene, len(scene))
    image = renderer.render(scene, camera)
    save_image(image, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
