# renderer/image_writer.py
import logging
import os
from typing import TextIO, Union
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def write_ppm(image: np.ndarray, out: Union[str, os.PathLike, TextIO]) -> None:
    """
    Write an 8-bit (height, width, 3) image as plain-text PPM (P3).

    The header is "P3", "<width> <height>" and "255"; then one "R G B" line
    per pixel, top row first.
    """
    if isinstance(out, (str, os.PathLike)):
        with open(out, "w") as stream:
            write_ppm(image, stream)
        return

    height, width = image.shape[0], image.shape[1]
    out.write(f"P3\n{width} {height}\n255\n")
    for row in image.tolist():
        out.write("".join(f"{r} {g} {b}\n" for r, g, b in row))

def write_image(image: np.ndarray, path: Union[str, os.PathLike]) -> None:
    """Write PPM for .ppm paths, anything else through Pillow."""
    if str(path).lower().endswith(".ppm"):
        write_ppm(image, path)
    else:
        Image.fromarray(np.asarray(image, dtype=np.uint8)).save(path)
    logger.info("Wrote %dx%d image to %s", image.shape[1], image.shape[0], path)
