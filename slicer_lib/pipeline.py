"""
Pipeline Module - High-Level Orchestration
==========================================

Load an image, trace its opaque regions and derive sprite rectangles in one
call.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .boundaries import RectBoundary, build_rect_boundaries
from .config import get_tracing_config
from .field import PixelField
from .io import load_pixel_field
from .log import get_logger
from .tracing import Contour, ContourTracer

logger = get_logger(__name__)


@dataclass
class SliceResult:
    """Container for slicing results."""
    image_size: Tuple[int, int]  # width, height
    max_background_alpha: int
    contours: List[Contour]
    boundaries: List[RectBoundary]
    source_path: Optional[str] = None


def slice_image(source, max_background_alpha=None, config=None, name_prefix="Boundary"):
    """
    Trace every opaque region of an image and compute its bounding rectangle.

    This function performs:
    1. Threshold resolution (argument, then config, then default)
    2. Image loading (skipped when a PixelField is given)
    3. Contour tracing
    4. Bounding rectangle computation

    Parameters
    ----------
    source : str, os.PathLike or PixelField
        Image path, or an already-built field. A field keeps its own
        threshold and ``max_background_alpha`` must then be None or equal.
    max_background_alpha : int or None
        Highest alpha value still classified as background.
    config : dict or None
        Configuration dictionary (see ``slicer_lib.config``).
    name_prefix : str
        Prefix of the generated boundary names.

    Returns
    -------
    SliceResult

    Raises
    ------
    ValueError
        If a PixelField is given together with a different threshold.
    """
    source_path = None

    if isinstance(source, PixelField):
        if max_background_alpha is not None and max_background_alpha != source.max_background_alpha:
            raise ValueError(
                f"Field was built with max_background_alpha={source.max_background_alpha}, "
                f"got {max_background_alpha}."
            )
        field = source
    else:
        if max_background_alpha is None:
            max_background_alpha = get_tracing_config(config)["max_background_alpha"]
        source_path = os.fspath(source)
        field = load_pixel_field(source_path, max_background_alpha)

    contours = ContourTracer(field).trace()
    boundaries = build_rect_boundaries(contours, name_prefix=name_prefix)

    logger.info(
        "%s: %d boundaries (%dx%d, max background alpha %d)",
        source_path or "<field>", len(boundaries), field.width, field.height,
        field.max_background_alpha,
    )
    for b in boundaries:
        logger.debug("%s: x=%d y=%d w=%d h=%d", b.name, b.x, b.y, b.width, b.height)

    return SliceResult(
        image_size=field.size(),
        max_background_alpha=field.max_background_alpha,
        contours=contours,
        boundaries=boundaries,
        source_path=source_path,
    )
