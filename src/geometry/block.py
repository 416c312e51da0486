# geometry/block.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.world import HittableList
from geometry.aarect import XYRect, XZRect, YZRect

class Block(Hittable):
    """
    Axis-aligned box made of six rectangles sharing one material.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box = AABB(p0, p1)
        lo, hi = self.box.minimum, self.box.maximum

        self.sides = HittableList([
            XYRect(lo.x, hi.x, lo.y, hi.y, hi.z, material),
            XYRect(lo.x, hi.x, lo.y, hi.y, lo.z, material),
            XZRect(lo.x, hi.x, lo.z, hi.z, hi.y, material),
            XZRect(lo.x, hi.x, lo.z, hi.z, lo.y, material),
            YZRect(lo.y, hi.y, lo.z, hi.z, hi.x, material),
            YZRect(lo.y, hi.y, lo.z, hi.z, lo.x, material),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

    def __repr__(self) -> str:
        return f"Block({self.box.minimum}, {self.box.maximum})"
