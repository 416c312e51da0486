from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere, MovingSphere
from geometry.aarect import XYRect, XZRect, YZRect
from geometry.block import Block
from geometry.world import HittableList
from geometry.bvh import BVHNode

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
    "MovingSphere",
    "XYRect",
    "XZRect",
    "YZRect",
    "Block",
    "HittableList",
    "BVHNode",
]
