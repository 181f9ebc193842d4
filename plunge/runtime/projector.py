"""Scroll-offset projection of resolved regions into panel frames."""

from __future__ import annotations

from collections.abc import Sequence

from plunge.api.transitions import (
    HIDDEN_FRAME,
    ContainerPosition,
    ContainerSize,
    PanelFrame,
    PositionFunction,
    Projection,
    Region,
    as_container_position,
)


def project(
    t: float,
    position: PositionFunction,
    size: ContainerSize,
    regions: Sequence[Region],
) -> Projection:
    """Place the container for offset ``t`` and compute every panel frame."""
    container_position = as_container_position(position(t))
    frames = tuple(project_region(region, container_position, size) for region in regions)
    return Projection(container_position=container_position, frames=frames)


def project_region(region: Region, position: ContainerPosition, size: ContainerSize) -> PanelFrame:
    """Return the frame of one region for a placed container."""
    x = position.left
    y = position.top
    if not region_visible(region, position, size):
        return HIDDEN_FRAME

    clipping_top = region.top is not None and y < region.top
    clipping_bottom = region.bottom is not None and y + size.height > region.bottom
    clipping_left = region.left is not None and x < region.left
    clipping_right = region.right is not None and x + size.width > region.right

    frame_top, frame_height, content_offset_top = clip_axis(
        y, size.height, region.top, region.bottom, clipping_top, clipping_bottom
    )
    frame_left, frame_width, content_offset_left = clip_axis(
        x, size.width, region.left, region.right, clipping_left, clipping_right
    )
    return PanelFrame(
        visible=True,
        frame_top=frame_top,
        frame_left=frame_left,
        frame_width=frame_width,
        frame_height=frame_height,
        content_offset_top=content_offset_top,
        content_offset_left=content_offset_left,
        clipping_top=clipping_top,
        clipping_bottom=clipping_bottom,
        clipping_left=clipping_left,
        clipping_right=clipping_right,
    )


def region_visible(region: Region, position: ContainerPosition, size: ContainerSize) -> bool:
    """Return whether any part of the container overlaps the region."""
    x = position.left
    y = position.top
    return (
        (region.top is None or y + size.height > region.top)
        and (region.bottom is None or y < region.bottom)
        and (region.left is None or x + size.width > region.left)
        and (region.right is None or x < region.right)
    )


def clip_axis(
    origin: float,
    extent: float,
    low: float | None,
    high: float | None,
    clipping_low: bool,
    clipping_high: bool,
) -> tuple[float, float, float]:
    """Return (frame start, frame extent, content offset) along one axis.

    Clipping the low edge shifts the window forward and the content back by
    the same amount so the content stays anchored to the container.
    """
    if clipping_low and low is not None:
        if clipping_high and high is not None:
            frame_extent = high - low
        else:
            frame_extent = extent + origin - low
        return low - origin, frame_extent, origin - low
    if clipping_high and high is not None:
        return 0.0, high - origin, 0.0
    return 0.0, extent, 0.0
