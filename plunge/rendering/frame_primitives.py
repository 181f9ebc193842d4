"""Array builders for consuming projections in batch renderers."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from plunge.api.transitions import ContainerSize, PositionFunction, Projection, Region
from plunge.runtime.projector import project


def clip_rects(projection: Projection) -> np.ndarray:
    """Build page-space ``[x, y, w, h]`` clip windows, NaN rows for hidden panels."""
    rects = np.full((len(projection.frames), 4), np.nan, dtype=np.float32)
    origin_x = projection.container_position.left
    origin_y = projection.container_position.top
    for index, frame in enumerate(projection.frames):
        if not frame.visible:
            continue
        rects[index] = (
            origin_x + frame.frame_left,
            origin_y + frame.frame_top,
            frame.frame_width,
            frame.frame_height,
        )
    return rects


def visibility_timeline(
    regions: Sequence[Region],
    position: PositionFunction,
    size: ContainerSize,
    offsets: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """Sample panel visibility over scroll offsets; shape (offsets, panels)."""
    samples = np.asarray(offsets, dtype=np.float64).reshape(-1)
    timeline = np.zeros((samples.shape[0], len(regions)), dtype=bool)
    for row, t in enumerate(samples):
        projection = project(float(t), position, size, regions)
        timeline[row] = [frame.visible for frame in projection.frames]
    return timeline
