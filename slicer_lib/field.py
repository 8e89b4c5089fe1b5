"""
Field Module - Pixel Field and Background Classification
========================================================

An immutable raster of packed ARGB pixels with bounds-safe access and an
alpha-threshold background predicate.
"""

from typing import NamedTuple, Tuple

import numpy as np
from PIL import Image

from .errors import InvalidDimensionsError, OutOfBoundsError

ALPHA_SHIFT = 24
MAX_ALPHA = 255


class Point(NamedTuple):
    """Integer pixel coordinate. x grows rightward, y grows downward."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


def check_threshold(max_background_alpha):
    if isinstance(max_background_alpha, bool) or not isinstance(
        max_background_alpha, (int, np.integer)
    ):
        raise ValueError(
            f"max_background_alpha must be an integer, got {max_background_alpha!r}."
        )
    if not 0 <= max_background_alpha <= MAX_ALPHA:
        raise ValueError(
            f"max_background_alpha must be in [0, {MAX_ALPHA}], got {max_background_alpha}."
        )
    return int(max_background_alpha)


def pack_argb(alpha, red, green, blue):
    """
    Pack per-channel uint8 arrays into 32-bit ARGB values.

    Parameters
    ----------
    alpha, red, green, blue : np.ndarray
        Channel arrays of identical shape.

    Returns
    -------
    np.ndarray
        uint32 array of packed ARGB values.
    """
    return (
        (alpha.astype(np.uint32) << 24)
        | (red.astype(np.uint32) << 16)
        | (green.astype(np.uint32) << 8)
        | blue.astype(np.uint32)
    )


class PixelField:
    """
    Read-only 2-D raster of packed ARGB pixels.

    The background threshold is fixed at construction: a pixel is background
    when its alpha channel is ``<= max_background_alpha``. Points outside the
    field are always background.
    """

    def __init__(self, pixels, max_background_alpha: int = 0):
        """
        Parameters
        ----------
        pixels : array-like
            2-D array of packed ARGB integers, indexed ``[y, x]``. Signed
            32-bit values are accepted and reinterpreted as unsigned.
        max_background_alpha : int
            Highest alpha value (0-255) still classified as background.

        Raises
        ------
        InvalidDimensionsError
            If the array is not 2-D or has a zero-sized axis.
        ValueError
            If the threshold is not an integer in [0, 255].
        """
        self._max_background_alpha = check_threshold(max_background_alpha)

        values = np.asarray(pixels)
        if values.ndim != 2:
            raise InvalidDimensionsError(
                f"pixels must be a 2-D array, got {values.ndim} dimension(s)."
            )
        height, width = values.shape
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"Field dimensions must be positive, got {width}x{height}."
            )

        # Copy so later changes to the source buffer do not leak in.
        packed = (values.astype(np.int64) & 0xFFFFFFFF).astype(np.uint32)
        packed.flags.writeable = False
        background = (packed >> ALPHA_SHIFT) <= self._max_background_alpha
        background.flags.writeable = False

        self._pixels = packed
        self._background = background
        self._width = width
        self._height = height

    @classmethod
    def from_flat(cls, values, width: int, height: int, max_background_alpha: int = 0):
        """Build a field from a linear buffer addressed as ``y * width + x``."""
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"Field dimensions must be positive, got {width}x{height}."
            )
        flat = np.asarray(values).ravel()
        if flat.size != width * height:
            raise InvalidDimensionsError(
                f"Buffer holds {flat.size} pixels, expected {width}x{height}={width * height}."
            )
        return cls(flat.reshape(height, width), max_background_alpha)

    @classmethod
    def from_channels(cls, image, order: str = "BGRA", max_background_alpha: int = 0):
        """
        Build a field from a channel-interleaved uint8 image.

        Parameters
        ----------
        image : np.ndarray
            (H, W), (H, W, 1), (H, W, 3) or (H, W, 4) uint8 array. Images
            without an alpha channel are treated as fully opaque.
        order : str
            Channel order of 3/4-channel images: "BGRA" (OpenCV) or "RGBA".
        max_background_alpha : int
            Highest alpha value still classified as background.

        Returns
        -------
        PixelField
        """
        if image is None:
            raise ValueError("Input image is None.")
        if order not in ("BGRA", "RGBA"):
            raise ValueError("order must be 'BGRA' or 'RGBA'.")

        img = np.asarray(image)
        if img.dtype != np.uint8:
            raise ValueError(f"Image must be uint8, got {img.dtype}.")

        if img.ndim == 3 and img.shape[2] == 1:
            img = img[:, :, 0]

        if img.ndim == 2:
            opaque = np.full(img.shape, MAX_ALPHA, dtype=np.uint8)
            packed = pack_argb(opaque, img, img, img)
        elif img.ndim == 3 and img.shape[2] in (3, 4):
            if order == "BGRA":
                blue, green, red = img[:, :, 0], img[:, :, 1], img[:, :, 2]
            else:
                red, green, blue = img[:, :, 0], img[:, :, 1], img[:, :, 2]
            if img.shape[2] == 4:
                alpha = img[:, :, 3]
            else:
                alpha = np.full(img.shape[:2], MAX_ALPHA, dtype=np.uint8)
            packed = pack_argb(alpha, red, green, blue)
        else:
            raise InvalidDimensionsError(
                f"Unsupported image shape {img.shape}; expected (H, W[, 1|3|4])."
            )

        return cls(packed, max_background_alpha)

    @classmethod
    def from_pil(cls, image, max_background_alpha: int = 0):
        """Build a field from a Pillow image (converted to RGBA first)."""
        if image is None:
            raise ValueError("Input image is None.")
        if not isinstance(image, Image.Image):
            raise TypeError(f"Expected a PIL image, got {type(image).__name__}.")
        rgba = np.asarray(image.convert("RGBA"))
        return cls.from_channels(rgba, order="RGBA", max_background_alpha=max_background_alpha)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def max_background_alpha(self) -> int:
        return self._max_background_alpha

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (H, W) uint32 view of the packed ARGB values."""
        return self._pixels

    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    def is_in_bounds(self, point) -> bool:
        x, y = point
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, point) -> int:
        """
        Return the packed ARGB value at ``point``.

        Raises
        ------
        OutOfBoundsError
            If the point lies outside the field.
        """
        if not self.is_in_bounds(point):
            raise OutOfBoundsError(point, self.size())
        x, y = point
        return int(self._pixels[y, x])

    def alpha(self, point) -> int:
        return self.get(point) >> ALPHA_SHIFT

    def is_background(self, point) -> bool:
        if not self.is_in_bounds(point):
            return True
        x, y = point
        return bool(self._background[y, x])

    def __eq__(self, other):
        if not isinstance(other, PixelField):
            return NotImplemented
        return (
            self.size() == other.size()
            and self._max_background_alpha == other._max_background_alpha
            and np.array_equal(self._pixels, other._pixels)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"PixelField(width={self._width}, height={self._height}, "
            f"max_background_alpha={self._max_background_alpha})"
        )
