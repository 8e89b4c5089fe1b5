"""
IO Module - Image Loading
=========================

Load images from disk with OpenCV and turn them into pixel fields.
"""

import os

import cv2
import numpy as np

from .field import PixelField
from .log import get_logger

logger = get_logger(__name__)

IMAGE_EXTENSIONS = [".png", ".bmp", ".tif", ".tiff", ".webp", ".jpg", ".jpeg"]


def load_image_cv2(path):
    """
    Read an image file keeping its alpha channel.

    Parameters
    ----------
    path : str or os.PathLike
        Path to the image file.

    Returns
    -------
    np.ndarray
        uint8 image as returned by OpenCV: (H, W), (H, W, 3) BGR or
        (H, W, 4) BGRA. 16-bit images are reduced to 8 bits per channel.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the extension is unknown or the image cannot be decoded.
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"File does not exist: {path}")

    extension = os.path.splitext(path)[1].lower()
    if extension not in IMAGE_EXTENSIONS:
        raise ValueError(f"Unknown file extension: {extension}")

    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not read image: {path}")

    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        raise ValueError(f"Unsupported image depth {img.dtype}: {path}")

    return img


def load_pixel_field(path, max_background_alpha=0):
    """
    Load an image file as a PixelField.

    Images without an alpha channel load as fully opaque.

    Parameters
    ----------
    path : str or os.PathLike
        Path to the image file.
    max_background_alpha : int
        Highest alpha value still classified as background.

    Returns
    -------
    PixelField
    """
    img = load_image_cv2(path)
    field = PixelField.from_channels(img, order="BGRA", max_background_alpha=max_background_alpha)
    logger.debug("Loaded %s as %dx%d field", os.fspath(path), field.width, field.height)
    return field
