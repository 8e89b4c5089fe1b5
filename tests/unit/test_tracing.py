from __future__ import annotations

import logging

import numpy as np
import pytest

from slicer_lib import (
    NEIGHBORHOOD,
    ContourTracer,
    PixelField,
    Point,
    contour_bounding_rect,
    neighbor,
    next_clockwise,
    trace_contours,
)


def test_neighborhood_table() -> None:
    offsets = [offset for offset, _ in NEIGHBORHOOD]
    resumes = [resume for _, resume in NEIGHBORHOOD]
    assert offsets == [(-1, 0), (-1, -1), (0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1)]
    assert resumes == [7, 7, 1, 1, 3, 3, 5, 5]


def test_neighbor_and_rotation() -> None:
    assert Point(5, 5).offset(-1, 1) == Point(4, 6)
    assert neighbor((5, 5), 1) == Point(4, 5)
    assert neighbor((5, 5), 4) == Point(6, 4)
    assert neighbor((5, 5), 8) == Point(4, 6)
    assert [next_clockwise(i) for i in range(1, 9)] == [2, 3, 4, 5, 6, 7, 8, 1]


def test_all_background_yields_nothing(field_from_rows) -> None:
    field = field_from_rows(["....", "....", "...."])
    assert trace_contours(field) == []


def test_threshold_can_turn_everything_into_background() -> None:
    field = PixelField(np.full((3, 3), 0x80000000, dtype=np.uint32), max_background_alpha=128)
    assert trace_contours(field) == []


def test_isolated_pixel_is_discarded(field_from_rows) -> None:
    field = field_from_rows(["...", ".#.", "..."])
    assert trace_contours(field) == []


def test_single_pixel_field_is_discarded(field_from_rows) -> None:
    assert trace_contours(field_from_rows(["#"])) == []


def test_full_3x3_field(field_from_rows) -> None:
    field = field_from_rows(["###", "###", "###"])
    contours = trace_contours(field)
    assert len(contours) == 1
    (contour,) = contours
    assert contour[0] == (0, 0)
    assert set(contour) == {(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (0, 1)}
    assert (1, 1) not in contour
    assert contour_bounding_rect(contour) == (0, 0, 2, 2)


def test_full_3x3_walk_is_clockwise(field_from_rows) -> None:
    (contour,) = trace_contours(field_from_rows(["###", "###", "###"]))
    assert contour == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (0, 1)]


@pytest.mark.parametrize("width,height", [(1, 2), (2, 1), (4, 3), (7, 5)])
def test_fully_foreground_field_is_one_contour(width, height) -> None:
    field = PixelField(np.full((height, width), 0xFF000000, dtype=np.uint32))
    contours = trace_contours(field)
    assert len(contours) == 1
    assert contour_bounding_rect(contours[0]) == (0, 0, width - 1, height - 1)


def test_filled_rectangle_on_background(field_from_rows) -> None:
    field = field_from_rows([
        "......",
        ".####.",
        ".####.",
        ".####.",
        "......",
    ])
    contours = trace_contours(field)
    assert len(contours) == 1
    assert contour_bounding_rect(contours[0]) == (1, 1, 3, 2)
    assert (2, 2) not in contours[0]


def test_plus_shape(field_from_rows) -> None:
    field = field_from_rows([
        "..#..",
        ".###.",
        "..#..",
        ".....",
        ".....",
    ])
    contours = trace_contours(field)
    assert len(contours) == 1
    assert contours[0] == [(2, 0), (3, 1), (2, 2), (1, 1)]
    assert contour_bounding_rect(contours[0]) == (1, 0, 2, 2)


def test_two_separate_blobs(field_from_rows) -> None:
    field = field_from_rows([
        "##.....",
        "##..##.",
        "....##.",
        ".......",
    ])
    contours = trace_contours(field)
    assert len(contours) == 2

    first = {(0, 0), (1, 0), (0, 1), (1, 1)}
    second = {(4, 1), (5, 1), (4, 2), (5, 2)}
    assert set(contours[0]) == first
    assert set(contours[1]) == second


def test_discovery_order_follows_seed_scan(field_from_rows) -> None:
    field = field_from_rows([
        ".....##",
        ".....##",
        ".......",
        "##.....",
        "##.....",
    ])
    contours = trace_contours(field)
    assert [c[0] for c in contours] == [(5, 0), (0, 3)]


def test_inside_flag_carries_across_rows(field_from_rows) -> None:
    field = field_from_rows([
        "..##",
        "#..#",
        "#..#",
    ])
    contours = trace_contours(field)
    assert len(contours) == 1
    assert contours[0][0] == (2, 0)
    assert set(contours[0]) == {(2, 0), (3, 0), (3, 1), (3, 2)}
    assert all(point[0] != 0 for point in contours[0])


def test_diagonal_touch_is_one_region(field_from_rows) -> None:
    field = field_from_rows([
        "##...",
        "##...",
        "..##.",
        "..##.",
        ".....",
    ])
    contours = trace_contours(field)
    assert len(contours) == 1
    assert contour_bounding_rect(contours[0]) == (0, 0, 3, 3)


def test_isolated_pixel_next_to_blob_is_skipped(field_from_rows) -> None:
    field = field_from_rows([
        "#....",
        ".....",
        "..##.",
        "..##.",
    ])
    contours = trace_contours(field)
    assert len(contours) == 1
    assert set(contours[0]) == {(2, 2), (3, 2), (2, 3), (3, 3)}


def test_one_pixel_wide_line_terminates(field_from_rows) -> None:
    field = field_from_rows([
        ".....",
        ".###.",
        ".....",
    ])
    contours = trace_contours(field)
    assert len(contours) == 1
    assert set(contours[0]) == {(1, 1), (2, 1), (3, 1)}
    assert contour_bounding_rect(contours[0]) == (1, 1, 2, 0)


def test_interior_hole_is_not_traced(field_from_rows) -> None:
    field = field_from_rows([
        ".......",
        ".#####.",
        ".#...#.",
        ".#...#.",
        ".#####.",
        ".......",
    ])
    contours = trace_contours(field)
    assert len(contours) == 1
    assert contour_bounding_rect(contours[0]) == (1, 1, 4, 3)


def test_contour_points_are_foreground_and_in_bounds(field_from_rows) -> None:
    field = field_from_rows([
        "..#.......",
        ".###..##..",
        "..#...##..",
        "..........",
        ".###....#.",
        "..........",
        "##..##....",
        "##..##....",
    ])
    contours = trace_contours(field)
    assert [c[0] for c in contours] == [(2, 0), (6, 1), (1, 4), (0, 6), (4, 6)]
    for contour in contours:
        for point in contour:
            assert field.is_in_bounds(point)
            assert not field.is_background(point)


def test_trace_is_repeatable(field_from_rows) -> None:
    field = field_from_rows([
        "##..#.",
        "##..##",
        "......",
        ".###..",
    ])
    tracer = ContourTracer(field)
    first = tracer.trace()
    second = tracer.trace()
    assert first == second
    assert first is not second


def test_tracer_requires_field() -> None:
    with pytest.raises(ValueError):
        ContourTracer(None)


def test_isolated_pixel_is_logged_through_package_logger(field_from_rows, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="slicer_lib.tracing")
    trace_contours(field_from_rows(["...", ".#.", "..."]))
    messages = [r.getMessage() for r in caplog.records if r.name == "slicer_lib.tracing"]
    assert "Discarded isolated pixel at (1, 1)" in messages
