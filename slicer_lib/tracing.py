"""
Tracing Module - Moore-Neighbor Contour Tracing
===============================================

Raster scan plus Moore-neighborhood boundary walks that extract the outer
contour of every foreground blob in a PixelField.

The walk uses Jacob's stopping criterion: returning to the seed closes the
loop only when the step into the seed resumes at neighbor 1, or on the third
return. Seeds without any foreground neighbor are dropped as noise.
"""

from typing import List, Optional, Set

from .field import PixelField, Point
from .log import get_logger

logger = get_logger(__name__)

Contour = List[Point]

# Position i-1 holds neighbor i: (offset, resume index). Neighbors run
# clockwise starting due west. The resume index is where the search restarts
# after stepping onto that neighbor.
NEIGHBORHOOD = (
    ((-1, 0), 7),
    ((-1, -1), 7),
    ((0, -1), 1),
    ((1, -1), 1),
    ((1, 0), 3),
    ((1, 1), 3),
    ((0, 1), 5),
    ((-1, 1), 5),
)

NEIGHBOR_COUNT = len(NEIGHBORHOOD)


def neighbor(point, idx: int) -> Point:
    """Return the Moore neighbor ``idx`` (1..8) of ``point``."""
    (dx, dy), _ = NEIGHBORHOOD[idx - 1]
    return Point(*point).offset(dx, dy)


def next_clockwise(idx: int) -> int:
    """Neighbor index following ``idx`` clockwise, wrapping 8 -> 1."""
    return 1 + (idx % NEIGHBOR_COUNT)


class ContourTracer:
    """Extracts closed outer contours of foreground regions."""

    def __init__(self, field: PixelField):
        if field is None:
            raise ValueError("field is None.")
        self.field = field

    def trace(self) -> List[Contour]:
        """
        Scan the field row by row and trace every undiscovered foreground blob.

        Returns
        -------
        list of list of Point
            Closed contours in the scan order of their seed points. Isolated
            single pixels are not included.
        """
        width, height = self.field.size()
        visited: Set[Point] = set()
        contours: List[Contour] = []
        # Carried across row ends, so a blob starting at x=0 right after a row
        # that ended inside another region is not seeded.
        inside = False
        discarded = 0

        for y in range(height):
            for x in range(width):
                point = Point(x, y)

                if point in visited and not inside:
                    # Re-entering a region whose border is already traced
                    inside = True
                    continue

                background = self.field.is_background(point)
                if not background and inside:
                    continue
                if background and inside:
                    inside = False
                    continue
                if background:
                    continue

                contour = self._follow_border(point, visited)
                if contour is None:
                    discarded += 1
                    logger.debug("Discarded isolated pixel at (%d, %d)", x, y)
                    continue

                # The walk ended back on the seed, which is inside the region
                inside = True
                contours.append(contour)

        logger.debug(
            "Traced %d contour(s) in %dx%d field, %d isolated pixel(s) discarded",
            len(contours), width, height, discarded,
        )
        return contours

    def _follow_border(self, seed: Point, visited: Set[Point]) -> Optional[Contour]:
        """
        Walk the border clockwise from ``seed``.

        Returns the contour when the loop closes, or None when the seed has no
        foreground neighbor. Every point reached is added to ``visited``.
        """
        is_background = self.field.is_background
        contour = [seed]
        visited.add(seed)

        check_idx = 1
        close_counter = 0
        dead_counter = 0
        current = seed

        while True:
            (dx, dy), resume_idx = NEIGHBORHOOD[check_idx - 1]
            candidate = current.offset(dx, dy)

            if not is_background(candidate):
                if candidate == seed:
                    close_counter += 1
                    if resume_idx == 1 or close_counter >= 3:
                        return contour

                check_idx = resume_idx
                current = candidate
                dead_counter = 0
                visited.add(candidate)
                contour.append(candidate)
            else:
                check_idx = next_clockwise(check_idx)
                dead_counter += 1
                if dead_counter > NEIGHBOR_COUNT:
                    return None


def trace_contours(field: PixelField) -> List[Contour]:
    """Shortcut for ``ContourTracer(field).trace()``."""
    return ContourTracer(field).trace()
