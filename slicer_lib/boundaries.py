"""
Boundaries Module - Bounding Rectangles from Contours
=====================================================

Axis-aligned rectangles around traced contours, one per detected sprite.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass
class RectBoundary:
    """A named bounding rectangle of one traced region."""
    rect: Tuple[int, int, int, int]  # x, y, w, h
    name: str

    @property
    def x(self) -> int:
        return self.rect[0]

    @property
    def y(self) -> int:
        return self.rect[1]

    @property
    def width(self) -> int:
        return self.rect[2]

    @property
    def height(self) -> int:
        return self.rect[3]

    def contains(self, point) -> bool:
        """True if ``point`` lies on or inside the rectangle's edges."""
        px, py = point
        x, y, w, h = self.rect
        return x <= px <= x + w and y <= py <= y + h


def contour_bounding_rect(contour: Sequence) -> Tuple[int, int, int, int]:
    """
    Compute the axis-aligned bounding rectangle of a contour.

    Width and height are coordinate spans (``maxX - minX``, ``maxY - minY``),
    so the rectangle's right and bottom edges pass through the outermost
    pixels.

    Parameters
    ----------
    contour : sequence of (x, y)
        Contour points.

    Returns
    -------
    tuple of int
        (x, y, w, h).

    Raises
    ------
    ValueError
        If the contour is empty.
    """
    if not contour:
        raise ValueError("Cannot compute bounding rect of an empty contour.")

    xs = [p[0] for p in contour]
    ys = [p[1] for p in contour]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    return min_x, min_y, max_x - min_x, max_y - min_y


def build_rect_boundaries(contours, name_prefix: str = "Boundary") -> List[RectBoundary]:
    """
    Turn traced contours into named bounding rectangles.

    Names are ``"<prefix> 0"``, ``"<prefix> 1"``, ... in contour order.
    """
    return [
        RectBoundary(contour_bounding_rect(contour), f"{name_prefix} {idx}")
        for idx, contour in enumerate(contours)
    ]
