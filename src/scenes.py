# scenes.py
import logging
import random
from typing import Callable, Dict, Optional
import numpy as np
from core.vector import Vector3, Point3, Color
from camera.camera import Camera
from geometry import (Sphere, MovingSphere, XYRect, XZRect, YZRect, Block,
                      HittableList, BVHNode)
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture, NoiseTexture
from materials.texture_loader import create_image_material
from renderer.background import SkyGradient

logger = logging.getLogger(__name__)

DEFAULT_EARTH_TEXTURE = "textures/earthmap.jpg"

class SceneConfig:
    """
    A world plus everything needed to look at it: camera placement,
    background and image defaults.
    """
    def __init__(self, world: HittableList,
                 look_from: Point3 = None, look_at: Point3 = None,
                 vfov: float = 20.0, aperture: float = 0.0, focus_dist: float = 10.0,
                 aspect_ratio: float = 3.0 / 2.0, background=None,
                 width: int = 400, samples_per_pixel: int = 100,
                 time0: float = 0.0, time1: float = 1.0):
        self.world = world
        self.look_from = look_from if look_from is not None else Point3(13, 2, 3)
        self.look_at = look_at if look_at is not None else Point3(0, 0, 0)
        self.vup = Vector3(0, 1, 0)
        self.vfov = vfov
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.aspect_ratio = aspect_ratio
        self.background = background if background is not None else Color(0.70, 0.80, 1.00)
        self.width = width
        self.samples_per_pixel = samples_per_pixel
        self.time0 = time0
        self.time1 = time1

    def image_height(self, width: Optional[int] = None) -> int:
        return int((width or self.width) / self.aspect_ratio)

    def camera(self) -> Camera:
        return Camera(self.look_from, self.look_at, self.vup, self.vfov,
                      self.aspect_ratio, self.aperture, self.focus_dist,
                      self.time0, self.time1)

    def root(self, rng: random.Random) -> BVHNode:
        """BVH over the scene objects for the camera's shutter interval."""
        return BVHNode.from_list(self.world, self.time0, self.time1, rng)

def _noise_rng(rng: random.Random) -> np.random.Generator:
    return np.random.default_rng(rng.getrandbits(64))

def random_spheres(rng: random.Random) -> SceneConfig:
    world = HittableList()
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse, bouncing during the shutter interval
                albedo = Color.random(rng) * Color.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = Color.random(rng, 0.5, 1)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    logger.debug("Random scene has %d objects", len(world))
    return SceneConfig(world, aperture=0.1)

def two_spheres(rng: random.Random) -> SceneConfig:
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world = HittableList([
        Sphere(Point3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Point3(0, 10, 0), 10, Lambertian(checker)),
    ])
    return SceneConfig(world)

def two_perlin_spheres(rng: random.Random) -> SceneConfig:
    pertext = NoiseTexture(4.0, _noise_rng(rng))
    world = HittableList([
        Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)),
        Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)),
    ])
    return SceneConfig(world)

def earth(rng: random.Random, texture_path: str = DEFAULT_EARTH_TEXTURE) -> SceneConfig:
    earth_surface = create_image_material(texture_path, Lambertian)
    world = HittableList([Sphere(Point3(0, 0, 0), 2, earth_surface)])
    return SceneConfig(world)

def simple_light(rng: random.Random) -> SceneConfig:
    pertext = NoiseTexture(4.0, _noise_rng(rng))
    difflight = DiffuseLight(Color(4, 4, 4))
    world = HittableList([
        Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)),
        Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)),
        XYRect(3, 5, 1, 3, -2, difflight),
    ])
    return SceneConfig(world, look_from=Point3(26, 3, 6), look_at=Point3(0, 2, 0),
                       background=Color(0, 0, 0), samples_per_pixel=400)

def cornell_box(rng: random.Random) -> SceneConfig:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light = DiffuseLight(Color(15, 15, 15))

    world = HittableList([
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(213, 343, 227, 332, 554, light),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
        Block(Point3(130, 0, 65), Point3(295, 165, 230), white),
        Block(Point3(265, 0, 295), Point3(430, 330, 460), white),
    ])
    return SceneConfig(world, look_from=Point3(278, 278, -800), look_at=Point3(278, 278, 0),
                       vfov=40.0, aspect_ratio=1.0, background=Color(0, 0, 0),
                       width=600, samples_per_pixel=200)

def two_sphere_test(rng: random.Random) -> SceneConfig:
    """Ground plus one red diffuse sphere straight ahead, under a sky gradient."""
    world = HittableList([
        Sphere(Point3(0, -1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5))),
        Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.7, 0.3, 0.3))),
    ])
    return SceneConfig(world, look_from=Point3(0, 0, 0), look_at=Point3(0, 0, -1),
                       vfov=90.0, focus_dist=1.0, aspect_ratio=2.0,
                       background=SkyGradient(), width=200, samples_per_pixel=20,
                       time1=0.0)

SCENES: Dict[str, Callable[[random.Random], SceneConfig]] = {
    "random": random_spheres,
    "two-spheres": two_spheres,
    "perlin": two_perlin_spheres,
    "earth": earth,
    "light": simple_light,
    "cornell": cornell_box,
    "test": two_sphere_test,
}
