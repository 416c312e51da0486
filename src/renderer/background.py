# renderer/background.py
from core.ray import Ray
from core.vector import Color

class SkyGradient:
    """
    Background that blends vertically between a horizon and a zenith color
    according to the height of the ray direction.
    """
    def __init__(self, horizon: Color = None, zenith: Color = None):
        self.horizon = horizon if horizon is not None else Color(1.0, 1.0, 1.0)
        self.zenith = zenith if zenith is not None else Color(0.5, 0.7, 1.0)

    def __call__(self, ray: Ray) -> Color:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.y + 1.0)
        return self.horizon * (1.0 - t) + self.zenith * t

    def __repr__(self) -> str:
        return f"SkyGradient({self.horizon}, {self.zenith})"

def background_color(background, ray: Ray) -> Color:
    """Evaluates a background that is either a constant color or a callable of the ray."""
    if callable(background):
        return background(ray)
    return background
