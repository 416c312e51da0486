# renderer/raytracer.py
import logging
import math
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional
import numpy as np
from core.ray import Ray
from core.vector import Color
from renderer.background import background_color

logger = logging.getLogger(__name__)

# Rays start this far along their direction to avoid re-hitting the surface
# they were scattered from.
T_MIN = 0.001
MAX_BOUNCES = 50

def ray_color(ray: Ray, background, world, depth: int, rng) -> Color:
    """
    Radiance carried back along `ray`.

    Follows scattered rays until they escape to the background, reach a
    surface that does not scatter, or `depth` bounces are spent.
    """
    if depth <= 0:
        return Color(0.0, 0.0, 0.0)

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background_color(background, ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    scattered, attenuation = scatter
    return emitted + attenuation * ray_color(scattered, background, world, depth - 1, rng)

def render_row(world, camera, background, j: int, width: int, height: int,
               samples_per_pixel: int, max_depth: int, rng) -> List[Color]:
    """Averaged linear colors of scanline j (counted from the bottom), left to right."""
    row = []
    scale = 1.0 / samples_per_pixel
    for i in range(width):
        pixel_color = Color(0.0, 0.0, 0.0)
        for _ in range(samples_per_pixel):
            s = (i + rng.random()) / (width - 1)
            t = (j + rng.random()) / (height - 1)
            ray = camera.get_ray(s, t, rng)
            pixel_color += ray_color(ray, background, world, max_depth, rng)
        pixel_color *= scale
        row.append(pixel_color)
    return row

def row_seeds(seed: Optional[int], height: int) -> List[int]:
    """One independent seed per scanline, derived from the run seed."""
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]

# Per-process scene state for worker processes, set once by the initializer.
_worker_state = None

def _init_worker(world, camera, background, width, height, samples_per_pixel, max_depth):
    global _worker_state
    _worker_state = (world, camera, background, width, height, samples_per_pixel, max_depth)

def _render_row_in_worker(args):
    j, seed = args
    world, camera, background, width, height, samples_per_pixel, max_depth = _worker_state
    return j, render_row(world, camera, background, j, width, height,
                         samples_per_pixel, max_depth, random.Random(seed))

class Renderer:
    """
    Drives the integrator over every pixel and averages the samples.

    Every scanline draws from its own generator seeded from `seed`, so a
    fixed seed reproduces the same image regardless of `workers`.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = MAX_BOUNCES, seed: Optional[int] = None, workers: int = 1):
        if width < 2 or height < 2:
            raise ValueError(f"Image must be at least 2x2 pixels, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError("samples_per_pixel must be at least 1")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        self.workers = max(1, workers)

    def render(self, world, camera, background) -> np.ndarray:
        """
        Render the scene.

        Returns a (height, width, 3) float array of averaged linear color,
        row 0 being the top of the image.
        """
        logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d worker(s)",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.workers)
        start = time.perf_counter()
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        seeds = row_seeds(self.seed, self.height)

        if self.workers == 1:
            for j in reversed(range(self.height)):
                logger.debug("Scanlines remaining: %d", j)
                row = render_row(world, camera, background, j, self.width, self.height,
                                 self.samples_per_pixel, self.max_depth,
                                 random.Random(seeds[j]))
                self._store_row(image, j, row)
        else:
            initargs = (world, camera, background, self.width, self.height,
                        self.samples_per_pixel, self.max_depth)
            with ProcessPoolExecutor(max_workers=self.workers,
                                     initializer=_init_worker,
                                     initargs=initargs) as executor:
                tasks = [(j, seeds[j]) for j in reversed(range(self.height))]
                for done, (j, row) in enumerate(executor.map(_render_row_in_worker, tasks), 1):
                    logger.debug("Scanlines remaining: %d", self.height - done)
                    self._store_row(image, j, row)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def _store_row(self, image: np.ndarray, j: int, row: List[Color]) -> None:
        image[self.height - 1 - j] = [[c.x, c.y, c.z] for c in row]
