# core/aabb.py
import math
from core.vector import Vector3

class BoundingBoxError(ValueError):
    """Raised when a BVH is built over an object that cannot be bounded."""

def _inverse(d: float) -> float:
    # 1/0 follows IEEE rules here: signed infinity instead of an exception.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        # Corners may come in any order; keep min <= max on every axis.
        self.minimum = Vector3(min(minimum.x, maximum.x),
                               min(minimum.y, maximum.y),
                               min(minimum.z, maximum.z))
        self.maximum = Vector3(max(minimum.x, maximum.x),
                               max(minimum.y, maximum.y),
                               max(minimum.z, maximum.z))

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in range(3):
            inv_d = _inverse(ray.direction[a])
            t0 = (self.minimum[a] - ray.origin[a]) * inv_d
            t1 = (self.maximum[a] - ray.origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"

def bounding_box_or_raise(obj, time0: float = 0.0, time1: float = 0.0) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BoundingBoxError(f"No bounding box in bvh_node constructor: {obj!r}")
    return box

def box_compare(a, b, axis: int, time0: float = 0.0, time1: float = 0.0) -> int:
    """
    Orders two hittables by the minimum of their bounding boxes on one axis.
    Returns -1, 0 or 1 so it can be used with functools.cmp_to_key.
    """
    box_a = bounding_box_or_raise(a, time0, time1)
    box_b = bounding_box_or_raise(b, time0, time1)
    lo_a = box_a.minimum[axis]
    lo_b = box_b.minimum[axis]
    return (lo_a > lo_b) - (lo_a < lo_b)

def box_x_compare(a, b) -> int:
    return box_compare(a, b, 0)

def box_y_compare(a, b) -> int:
    return box_compare(a, b, 1)

def box_z_compare(a, b) -> int:
    return box_compare(a, b, 2)
