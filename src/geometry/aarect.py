# geometry/aarect.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Thickness given to rectangle boxes along their fixed axis; a flat box
# would make the slab test degenerate.
PADDING = 0.0001

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in a coordinate plane.

    The plane is `axis == k`; (a0, a1) and (b0, b1) bound the two free
    axes `a_axis` and `b_axis`, which also give the texture coordinates.
    """
    def __init__(self, a_axis: int, b_axis: int, axis: int,
                 a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a_axis = a_axis
        self.b_axis = b_axis
        self.axis = axis
        self.a0, self.a1 = min(a0, a1), max(a0, a1)
        self.b0, self.b1 = min(b0, b1), max(b0, b1)
        self.k = k
        self.material = material

        normal = [0.0, 0.0, 0.0]
        normal[axis] = 1.0
        self.outward_normal = Vector3(*normal)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        # A zero-width side (e.g. a face of a flat block) maps to coordinate 0.
        rec.u = (a - self.a0) / (self.a1 - self.a0) if self.a1 > self.a0 else 0.0
        rec.v = (b - self.b0) / (self.b1 - self.b0) if self.b1 > self.b0 else 0.0
        rec.t = t
        rec.set_face_normal(ray, self.outward_normal)
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.a_axis], hi[self.a_axis] = self.a0, self.a1
        lo[self.b_axis], hi[self.b_axis] = self.b0, self.b1
        lo[self.axis], hi[self.axis] = self.k - PADDING, self.k + PADDING
        return AABB(Vector3(*lo), Vector3(*hi))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(({self.a0}, {self.a1}), "
                f"({self.b0}, {self.b1}), k={self.k})")

class XYRect(AxisAlignedRect):
    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(0, 1, 2, x0, x1, y0, y1, k, material)

class XZRect(AxisAlignedRect):
    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(0, 2, 1, x0, x1, z0, z1, k, material)

class YZRect(AxisAlignedRect):
    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(1, 2, 0, y0, y1, z0, z1, k, material)
