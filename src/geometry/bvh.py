# geometry/bvh.py
import functools
import logging
import random
from typing import List, Optional
from core.aabb import AABB, box_compare, bounding_box_or_raise
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a list of hittables.

    Each level sorts its span along a randomly chosen axis and splits it at
    the midpoint. Spans of one object store that object in both children;
    spans of two store the pair directly.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 0.0,
                 rng: Optional[random.Random] = None):
        object_span = end - start
        if object_span <= 0:
            raise ValueError("Cannot build a BVH node over an empty span of objects")
        if rng is None:
            rng = random.Random()

        axis = rng.randint(0, 2)
        key = functools.cmp_to_key(
            lambda a, b: box_compare(a, b, axis, time0, time1))

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start]) < key(objects[start + 1]):
                self.left = objects[start]
                self.right = objects[start + 1]
            else:
                self.left = objects[start + 1]
                self.right = objects[start]
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        box_left = bounding_box_or_raise(self.left, time0, time1)
        box_right = bounding_box_or_raise(self.right, time0, time1)
        self.box = AABB.surrounding_box(box_left, box_right)

    @classmethod
    def from_list(cls, world, time0: float = 0.0, time1: float = 0.0,
                  rng: Optional[random.Random] = None) -> "BVHNode":
        """Builds a tree over a copy of a HittableList's objects."""
        objects = list(world.objects)
        logger.debug("Building BVH over %d objects", len(objects))
        return cls(objects, 0, len(objects), time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Anything on the right farther than the left hit cannot win.
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

    def depth(self) -> int:
        """Height of the tree, counting this node."""
        def child_depth(child):
            return child.depth() if isinstance(child, BVHNode) else 0
        return 1 + max(child_depth(self.left), child_depth(self.right))
