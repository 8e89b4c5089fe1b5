"""
Slicer Image Processing Library
===============================

A library for finding opaque regions on a transparent background and
cutting them into sprite rectangles using Moore-neighbor contour tracing.

Modules:
    - field: Pixel field with alpha-threshold background classification
    - tracing: Moore-neighbor contour tracing
    - boundaries: Bounding rectangles from contours
    - io: Image loading utilities
    - config: JSON configuration management
    - pipeline: High-level orchestration functions
    - errors: Library exceptions
    - log: Logger setup
"""

# Field
from .field import Point, PixelField, pack_argb

# Tracing
from .tracing import (
    ContourTracer,
    NEIGHBORHOOD,
    neighbor,
    next_clockwise,
    trace_contours,
)

# Boundaries
from .boundaries import (
    RectBoundary,
    contour_bounding_rect,
    build_rect_boundaries,
)

# IO functions
from .io import load_image_cv2, load_pixel_field

# Config
from .config import (
    load_config,
    save_config,
    get_tracing_config,
    update_tracing_config,
    DEFAULT_CONFIG_PATH,
)

# Pipeline
from .pipeline import slice_image, SliceResult

# Errors
from .errors import SlicerError, OutOfBoundsError, InvalidDimensionsError

__version__ = "1.0.0"
__all__ = [
    # Field
    "Point",
    "PixelField",
    "pack_argb",
    # Tracing
    "ContourTracer",
    "NEIGHBORHOOD",
    "neighbor",
    "next_clockwise",
    "trace_contours",
    # Boundaries
    "RectBoundary",
    "contour_bounding_rect",
    "build_rect_boundaries",
    # IO
    "load_image_cv2",
    "load_pixel_field",
    # Config
    "load_config",
    "save_config",
    "get_tracing_config",
    "update_tracing_config",
    "DEFAULT_CONFIG_PATH",
    # Pipeline
    "slice_image",
    "SliceResult",
    # Errors
    "SlicerError",
    "OutOfBoundsError",
    "InvalidDimensionsError",
]
