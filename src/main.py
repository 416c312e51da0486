# main.py
"""Render one of the built-in scenes to a PPM (or any Pillow format) image.

Usage:
    python src/main.py [--scene NAME] [--width W] [--samples N] [--output PATH]

With no --output the image is written to stdout as plain-text PPM.

Example:
    python src/main.py --scene cornell --width 300 --samples 50 --output cornell.png
"""
import argparse
import logging
import random
import sys
from renderer.raytracer import Renderer, MAX_BOUNCES
from renderer.tone_mapping import TONE_MAPPERS
from renderer.image_writer import write_image, write_ppm
from core.aabb import BoundingBoxError
from scenes import SCENES, DEFAULT_EARTH_TEXTURE, earth

logger = logging.getLogger("pathtracer")

QUALITY_LEVELS = {
    "interactive": {"samples": 1, "bounces": 2},
    "balanced": {"samples": 16, "bounces": 8},
    "high_quality": {"samples": 100, "bounces": MAX_BOUNCES},
}

def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number

def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Offline Monte-Carlo path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="Scene to render (default: random)")
    parser.add_argument("--width", type=positive_int, default=None,
                        help="Image width in pixels (default: per scene)")
    parser.add_argument("--samples", type=positive_int, default=None,
                        help="Samples per pixel (default: per scene or quality level)")
    parser.add_argument("--max-depth", type=positive_int, default=None,
                        help=f"Maximum bounces per path (default: {MAX_BOUNCES})")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None,
                        help="Preset for samples and bounces")
    parser.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), default="gamma",
                        help="Linear to 8-bit conversion (default: gamma)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible render")
    parser.add_argument("--workers", type=positive_int, default=1,
                        help="Worker processes (default: 1)")
    parser.add_argument("--texture", default=DEFAULT_EARTH_TEXTURE,
                        help="Image used by the earth scene")
    parser.add_argument("--output", default=None,
                        help="Output path; .ppm or any Pillow format (default: PPM on stdout)")
    parser.add_argument("--preview", action="store_true",
                        help="Show the finished image in a window")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Log every scanline")
    verbosity.add_argument("--quiet", action="store_true", help="Only log warnings")
    return parser.parse_args(argv)

def resolve_settings(args: argparse.Namespace, scene) -> dict:
    """Merge scene defaults, the quality preset and explicit flags (highest wins)."""
    samples = scene.samples_per_pixel
    depth = MAX_BOUNCES
    if args.quality is not None:
        samples = QUALITY_LEVELS[args.quality]["samples"]
        depth = QUALITY_LEVELS[args.quality]["bounces"]
    if args.samples is not None:
        samples = args.samples
    if args.max_depth is not None:
        depth = args.max_depth
    width = args.width or scene.width
    return {
        "width": width,
        "height": scene.image_height(width),
        "samples_per_pixel": samples,
        "max_depth": depth,
    }

def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed)
    if args.scene == "earth":
        scene = earth(rng, args.texture)
    else:
        scene = SCENES[args.scene](rng)

    try:
        world = scene.root(rng)
        settings = resolve_settings(args, scene)
        renderer = Renderer(seed=args.seed, workers=args.workers, **settings)
    except (BoundingBoxError, ValueError) as e:
        logger.error("Cannot render scene %s: %s", args.scene, e)
        return 1

    linear = renderer.render(world, scene.camera(), scene.background)
    image = TONE_MAPPERS[args.tone_map](linear)

    if args.output is None:
        write_ppm(image, sys.stdout)
    else:
        write_image(image, args.output)

    if args.preview:
        from renderer.preview import show_image
        show_image(image, title=f"Path Tracer - {args.scene}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
