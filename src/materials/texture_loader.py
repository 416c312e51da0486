# materials/texture_loader.py
import logging
from PIL import Image, UnidentifiedImageError
import numpy as np
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, converting it to RGB.

    A missing or undecodable file does not abort rendering: the failure is
    logged and the returned texture renders as the placeholder color.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object
    """
    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.array(img, dtype=np.uint8)
    except (OSError, UnidentifiedImageError, ValueError) as e:
        logger.warning("Could not load texture %s: %s", image_path, e)
        return ImageTexture(None)

    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return ImageTexture(data)

def create_image_material(image_path: str, material_class, **material_params):
    """Build `material_class(texture, **material_params)` around the image at image_path."""
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
