# renderer/tone_mapping.py
import numpy as np

def gamma_correct(linear: np.ndarray) -> np.ndarray:
    """
    Convert averaged linear radiance to 8-bit values.

    Applies gamma 2 (a square root), clamps to [0, 0.999] and scales by 256,
    so every channel lands in 0..255.
    """
    mapped = np.sqrt(np.maximum(linear, 0.0))
    mapped = np.clip(mapped, 0.0, 0.999)
    return (mapped * 256).astype(np.uint8)

def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    Useful for light-heavy scenes whose radiance is far above 1.
    """
    scaled = np.maximum(accumulated, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output

TONE_MAPPERS = {
    "gamma": gamma_correct,
    "reinhard": reinhard_tone_mapping,
}
