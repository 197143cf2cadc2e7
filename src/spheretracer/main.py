# main.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from spheretracer.logging_config import setup_logging
from spheretracer.renderer.raytracer import Renderer
from spheretracer.renderer.settings import QUALITY_LEVELS, RenderSettings
from spheretracer.scenes import SCENES, build_scene

logger = logging.getLogger("spheretracer.main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="spheretracer",
                                description="Render a sphere scene to a plain-text PPM image.")
    p.add_argument("--scene", choices=sorted(SCENES), default="materials")
    p.add_argument("--quality", choices=list(QUALITY_LEVELS), default="final",
                   help="preset for samples per pixel and bounce depth")
    p.add_argument("--width", type=int, default=400, help="image width in pixels")
    p.add_argument("--aspect-ratio", type=float, default=16.0 / 9.0)
    p.add_argument("--samples", type=int, help="samples per pixel (overrides --quality)")
    p.add_argument("--max-depth", type=int, help="maximum bounces per path (overrides --quality)")
    p.add_argument("--chunks", type=int, default=10, help="number of row chunks rendered in parallel")
    p.add_argument("--workers", type=int, help="worker processes (default: CPU count)")
    p.add_argument("--seed", type=int, help="seed for reproducible renders")
    p.add_argument("--output", default="image/image.ppm", help='output path, or "-" for stdout')
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    p.add_argument("--log-file", type=Path, default=None)
    return p.parse_args(argv)


def run(args: argparse.Namespace):
    settings = RenderSettings.from_quality(
        args.quality,
        image_width=args.width,
        aspect_ratio=args.aspect_ratio,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        chunk_count=args.chunks,
        workers=args.workers,
        seed=args.seed,
    )

    logger.info("=== Creating World ===")
    # Scene layout draws from its own stream so the same seed gives the same world.
    world, camera = build_scene(args.scene, settings.aspect_ratio,
                                np.random.default_rng(settings.seed))

    logger.info("=== Initializing Renderer ===")
    logger.info("Settings: %r", settings)
    renderer = Renderer(settings)
    buffer = renderer.render(world, camera)
    buffer.save(args.output)
    return buffer


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)
    try:
        run(args)
    except Exception:
        logger.exception("Render failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
