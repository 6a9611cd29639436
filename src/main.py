# main.py
import argparse
import logging
import os
import sys
from geometry.world import Scene
from renderer.raytracer import RECURSION_DEPTH, Renderer
from scenes.default import create_default_scene
from scenes.loader import load_scene

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

QUALITY_LEVELS = {
    "preview": {"antialias": False, "depth": 0},
    "balanced": {"antialias": False, "depth": RECURSION_DEPTH},
    "high_quality": {"antialias": True, "depth": RECURSION_DEPTH},
}

logger = logging.getLogger("raytracer")

def setup_logging(level: str = "INFO") -> None:
    """Send log records to the console. Does nothing if logging is already configured."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a scene of spheres to an image file.")
    parser.add_argument("-o", "--output", default="image.ppm",
                        help="output path; .ppm is written directly, other extensions go through Pillow")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=640)
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="high_quality")
    parser.add_argument("--depth", type=int, default=None,
                        help="number of mirror bounces, overrides the quality preset")
    parser.add_argument("--no-antialias", action="store_true",
                        help="trace one ray per pixel instead of a 5x5 grid")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1)
    parser.add_argument("--scene", default=None, help="JSON scene file; the built-in scene is used if omitted")
    parser.add_argument("--log-level", default="INFO", type=str.upper, choices=LOG_LEVELS)
    return parser

class RenderApplication:
    """Ties the command line options to a scene and a renderer."""

    def __init__(self, args: argparse.Namespace):
        quality = QUALITY_LEVELS[args.quality]
        self.output = args.output
        self.depth = quality["depth"] if args.depth is None else args.depth
        self.antialias = quality["antialias"] and not args.no_antialias
        self.scene = self.create_world(args.scene)
        self.renderer = Renderer(
            self.scene,
            args.width,
            args.height,
            max_depth=self.depth,
            antialias=self.antialias,
            workers=args.workers,
        )

    @staticmethod
    def create_world(scene_path) -> Scene:
        if scene_path is None:
            scene = create_default_scene()
            logger.info("Using built-in scene: %d lights, %d spheres", len(scene.lights), len(scene.spheres))
            return scene
        return load_scene(scene_path)

    def run(self) -> None:
        canvas = self.renderer.render()
        canvas.save(self.output)

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        app = RenderApplication(args)
    except (OSError, ValueError) as e:
        logger.error("Could not set up render: %s", e)
        return 1

    try:
        app.run()
    except (OSError, ValueError) as e:
        logger.error("Could not write image %s: %s", args.output, e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
