"""
Helpers for handing rendered signatures to callers as bytes, arrays or files.
"""

import io
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def to_png_bytes(image: Image.Image) -> bytes:
    """Encode an image as PNG."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def to_array(image: Image.Image) -> np.ndarray:
    """RGBA pixels as a uint8 array of shape (height, width, 4)."""
    return np.asarray(image.convert("RGBA"), dtype=np.uint8).copy()


def save_image(image: Image.Image, path: Union[str, Path]) -> Path:
    """
    Write an image to disk, creating parent directories.
    The format follows the file suffix; formats without alpha get an RGB copy.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() in (".jpg", ".jpeg", ".bmp") and image.mode == "RGBA":
        with image.convert("RGB") as rgb:
            rgb.save(path)
    else:
        image.save(path)

    logger.debug(f"Saved {image.size[0]}x{image.size[1]} image to {path}")
    return path
