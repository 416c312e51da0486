# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3, Color
from geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Emissive materials also override emitted().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """Radiance emitted at the hit point; black unless overridden."""
        return Color(0.0, 0.0, 0.0)
