from __future__ import annotations

import pytest

from plunge.api.transitions import (
    HIDDEN_FRAME,
    ContainerPosition,
    ContainerSize,
    PanelState,
    Region,
)
from plunge.runtime.bounds import resolve_bounds
from plunge.runtime.projector import clip_axis, project, project_region, region_visible
from tests.plunge.conftest import diagonal_position, fixed_position

_SIZE = ContainerSize(width=200.0, height=100.0)


def _at(top: float, left: float = 0.0) -> ContainerPosition:
    return ContainerPosition(top=top, left=left)


def test_project_places_container_from_position_function() -> None:
    projection = project(10.0, diagonal_position, _SIZE, [])

    assert projection.container_position == ContainerPosition(top=20.0, left=20.0)
    assert projection.frames == ()


def test_project_scenario_at_origin(readme_specs) -> None:
    regions = resolve_bounds(readme_specs)
    projection = project(0.0, fixed_position(0.0), _SIZE, regions)

    assert projection.frames[0].visible is True
    assert projection.frames[1].visible is False
    assert projection.frames[2].visible is False


def test_project_unbounded_region_is_fully_visible() -> None:
    frame = project_region(Region(), _at(-40.0, 15.0), _SIZE)

    assert frame.visible is True
    assert (frame.frame_top, frame.frame_left) == (0.0, 0.0)
    assert (frame.frame_width, frame.frame_height) == (200.0, 100.0)
    assert (frame.content_offset_top, frame.content_offset_left) == (0.0, 0.0)
    assert frame.state is PanelState.FULLY_VISIBLE


def test_project_hidden_region_emits_hidden_frame() -> None:
    frame = project_region(Region(bottom=300.0), _at(300.0), _SIZE)

    assert frame == HIDDEN_FRAME
    assert frame.state is PanelState.HIDDEN


def test_project_clipping_top_only_shrinks_from_above() -> None:
    frame = project_region(Region(top=300.0), _at(250.0), _SIZE)

    assert frame.clipping_top is True
    assert frame.clipping_bottom is False
    assert frame.frame_height == 100.0 + 250.0 - 300.0
    assert frame.frame_top == 50.0
    assert frame.content_offset_top == -50.0
    assert frame.state is PanelState.CLIPPED_TOP


def test_project_clipping_bottom_only_keeps_window_anchored() -> None:
    frame = project_region(Region(bottom=300.0), _at(250.0), _SIZE)

    assert frame.frame_height == 50.0
    assert frame.frame_top == 0.0
    assert frame.content_offset_top == 0.0
    assert frame.state is PanelState.CLIPPED_BOTTOM


def test_project_clipping_both_ends_uses_region_span() -> None:
    frame = project_region(Region(top=300.0, bottom=340.0), _at(280.0), _SIZE)

    assert frame.frame_height == 40.0
    assert frame.frame_top == 20.0
    assert frame.content_offset_top == -20.0
    assert frame.state is PanelState.CLIPPED_BOTH


def test_project_horizontal_clipping_mirrors_vertical_rules() -> None:
    left_only = project_region(Region(left=700.0), _at(0.0, 600.0), _SIZE)
    right_only = project_region(Region(right=700.0), _at(0.0, 600.0), _SIZE)
    both = project_region(Region(left=650.0, right=700.0), _at(0.0, 600.0), _SIZE)

    assert (left_only.frame_left, left_only.frame_width, left_only.content_offset_left) == (
        100.0,
        100.0,
        -100.0,
    )
    assert (right_only.frame_left, right_only.frame_width, right_only.content_offset_left) == (
        0.0,
        100.0,
        0.0,
    )
    assert (both.frame_left, both.frame_width, both.content_offset_left) == (50.0, 50.0, -50.0)
    assert left_only.state is PanelState.FULLY_VISIBLE


def test_project_no_clipping_at_exact_top_boundary() -> None:
    frame = project_region(Region(top=300.0), _at(300.0), _SIZE)

    assert frame.clipping_top is False
    assert frame.frame_height == _SIZE.height


def test_project_visibility_flips_across_top_bound_with_unit_height() -> None:
    size = ContainerSize(width=10.0, height=1.0)
    region = Region(top=300.0)

    assert region_visible(region, _at(299.0), size) is False
    assert region_visible(region, _at(301.0), size) is True


@pytest.mark.parametrize(
    ("y", "visible"),
    [(199.0, False), (200.5, True), (399.0, True), (400.0, False)],
)
def test_project_visibility_edges_are_exclusive(y: float, visible: bool) -> None:
    region = Region(top=300.0, bottom=400.0)

    assert region_visible(region, _at(y), _SIZE) is visible


def test_project_is_idempotent(readme_specs) -> None:
    regions = resolve_bounds(readme_specs)

    first = project(140.0, diagonal_position, _SIZE, regions)
    second = project(140.0, diagonal_position, _SIZE, regions)

    assert first == second


def test_project_handoff_between_horizontal_panels() -> None:
    regions = (Region(bottom=300.0), Region(top=300.0))

    projection = project(0.0, fixed_position(260.0), _SIZE, regions)
    upper, lower = projection.frames

    # Both halves of the container are covered with no gap or overlap.
    assert upper.frame_top == 0.0 and upper.frame_height == 40.0
    assert lower.frame_top == 40.0 and lower.frame_height == 60.0
    assert upper.frame_height + lower.frame_height == _SIZE.height


def test_project_accepts_mapping_position_results() -> None:
    projection = project(5.0, lambda t: {"top": t, "left": -t}, _SIZE, [Region()])

    assert projection.container_position == ContainerPosition(top=5.0, left=-5.0)


def test_project_propagates_position_function_errors() -> None:
    def _broken(t: float) -> ContainerPosition:
        raise ValueError("no position")

    with pytest.raises(ValueError):
        project(0.0, _broken, _SIZE, [Region()])


def test_clip_axis_branches() -> None:
    assert clip_axis(0.0, 100.0, None, None, False, False) == (0.0, 100.0, 0.0)
    assert clip_axis(0.0, 100.0, 30.0, None, True, False) == (30.0, 70.0, -30.0)
    assert clip_axis(0.0, 100.0, None, 60.0, False, True) == (0.0, 60.0, 0.0)
    assert clip_axis(0.0, 100.0, 30.0, 60.0, True, True) == (30.0, 30.0, -30.0)
