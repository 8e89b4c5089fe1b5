"""
Errors Module - Library Exceptions
==================================

Exceptions raised by pixel field construction and raw pixel access.
"""


class SlicerError(Exception):
    """Base class for slicer_lib errors."""


class OutOfBoundsError(SlicerError, IndexError):
    """Raised when a pixel outside the field is accessed directly."""

    def __init__(self, point, size):
        self.point = tuple(point)
        self.size = tuple(size)
        super().__init__(
            f"Point {self.point} is outside the field of size {self.size[0]}x{self.size[1]}."
        )


class InvalidDimensionsError(SlicerError, ValueError):
    """Raised when a pixel buffer has non-positive or inconsistent dimensions."""
