# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Area light: emits its texture's color from every point of the surface
    and absorbs whatever hits it.
    """
    def __init__(self, emit: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Radiance leaving the surface at (u, v), p.

        Values above 1 are expected; they are what lets a small light
        illuminate a dark scene.
        """
        return self.texture.value(u, v, p)
