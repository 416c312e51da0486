# materials/textures.py
import logging
import math
from typing import Optional, Union
import numpy as np
from core.vector import Vector3, Color
from core.utils import clamp
from materials.perlin import Perlin

logger = logging.getLogger(__name__)

# Shown wherever an image texture has no usable pixels.
MISSING_TEXTURE_COLOR = Color(0.0, 1.0, 1.0)

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Color at surface coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx)sin(sy)sin(sz) picks between
    the even and odd textures.
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture],
                 scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Color:
        s = self.scale
        sines = math.sin(s * p.x) * math.sin(s * p.y) * math.sin(s * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """Marble-like grey pattern: a sine along z phase-shifted by turbulence."""
    def __init__(self, scale: float = 1.0, rng=None):
        self.noise = Perlin(rng)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return Color(1, 1, 1) * 0.5 * (
            1 + math.sin(self.scale * p.z + 10 * self.noise.turbulence(p)))

class ImageTexture(Texture):
    """
    A texture backed by a decoded (height, width, 3) uint8 pixel buffer.
    Without a buffer every lookup returns MISSING_TEXTURE_COLOR.
    """
    def __init__(self, data: Optional[np.ndarray] = None):
        if data is not None:
            data = np.asarray(data, dtype=np.uint8)
            if data.ndim != 3 or data.shape[2] != 3 or data.size == 0:
                raise ValueError(f"Expected a (height, width, 3) pixel buffer, got shape {data.shape}")
            self.height, self.width = data.shape[0], data.shape[1]
        else:
            self.width = self.height = 0
        self.data = data

    @classmethod
    def from_bytes(cls, buffer: bytes, width: int, height: int) -> "ImageTexture":
        """Wraps a packed RGB byte buffer; a buffer of the wrong size yields the placeholder."""
        if width <= 0 or height <= 0 or len(buffer) != width * height * 3:
            logger.warning("Pixel buffer of %d bytes does not match %dx%d RGB; "
                           "using placeholder texture", len(buffer), width, height)
            return cls(None)
        data = np.frombuffer(buffer, dtype=np.uint8).reshape(height, width, 3)
        return cls(data)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        if self.data is None:
            return MISSING_TEXTURE_COLOR

        # Clamp input texture coordinates to [0,1] x [1,0]
        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)  # Flip V to image row order

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        color_scale = 1.0 / 255.0
        pixel = self.data[j, i]
        return Color(color_scale * int(pixel[0]),
                     color_scale * int(pixel[1]),
                     color_scale * int(pixel[2]))
