from __future__ import annotations

from typing import Callable, Sequence

import numpy as np
import pytest

from slicer_lib import PixelField

OPAQUE_RED = 0xFFFF0000
TRANSPARENT = 0x00000000


def rows_to_pixels(rows: Sequence[str]) -> np.ndarray:
    """'#' is an opaque pixel, anything else fully transparent."""
    return np.array(
        [[OPAQUE_RED if ch == "#" else TRANSPARENT for ch in row] for row in rows],
        dtype=np.uint32,
    )


@pytest.fixture()
def field_from_rows() -> Callable[..., PixelField]:
    def _build(rows: Sequence[str], max_background_alpha: int = 0) -> PixelField:
        return PixelField(rows_to_pixels(rows), max_background_alpha)

    return _build


@pytest.fixture()
def rgba_sheet() -> np.ndarray:
    """9x6 RGBA image: two opaque sprites, an isolated speck and a faint bar."""
    img = np.zeros((6, 9, 4), dtype=np.uint8)
    img[0:2, 0:3] = (255, 0, 0, 255)
    img[3:6, 5:8] = (0, 0, 255, 200)
    img[3, 3] = (0, 255, 0, 255)
    img[5, 0:3] = (10, 10, 10, 40)
    return img
