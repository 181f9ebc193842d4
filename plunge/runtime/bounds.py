"""Breakpoint interpolation into resolved activation regions."""

from __future__ import annotations

from collections.abc import Sequence

from plunge.api.transitions import Axis, Region, TransitionSpec


def resolve_bounds(specs: Sequence[TransitionSpec]) -> tuple[Region, ...]:
    """Resolve sparse transition breakpoints into one region per spec.

    Tops and lefts come straight from each spec's breakpoint; a spec without a
    horizontal breakpoint inherits the previous top. Rights and bottoms are
    filled by walking backwards, closing each region against the next one's
    breakpoint and carrying the last known bottom so that only the final
    region stays open downwards.
    """
    axes = [spec.axis for spec in specs]
    tops: list[float | None] = []
    lefts: list[float | None] = []
    for spec in specs:
        top = tops[-1] if tops else None
        left = None
        if spec.breakpoint is not None:
            if spec.axis is Axis.VERTICAL:
                left = spec.breakpoint
            else:
                top = spec.breakpoint
        tops.append(top)
        lefts.append(left)

    count = len(axes)
    rights: list[float | None] = [None] * count
    bottoms: list[float | None] = [None] * count
    tracked_bottom: float | None = None
    for index in range(count - 2, -1, -1):
        following = index + 1
        if axes[following] is Axis.VERTICAL:
            # Unbounded vertical neighbours share a boundary at the origin.
            if lefts[following] is None:
                lefts[following] = 0.0
            rights[index] = lefts[following]
        else:
            bottoms[index] = tops[following]

        if bottoms[index] is not None:
            tracked_bottom = bottoms[index]
        else:
            bottoms[index] = tracked_bottom

    return tuple(
        Region(
            top=tops[index],
            bottom=bottoms[index],
            left=lefts[index],
            right=rights[index],
            axis=axes[index],
        )
        for index in range(count)
    )
