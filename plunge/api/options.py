"""Widget option sanitizing."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from plunge.api.transitions import (
    ContainerSize,
    PositionFunction,
    TransitionSpec,
    default_position,
)


@dataclass(frozen=True, slots=True)
class PlungeOptions:
    """Sanitized widget options."""

    size: ContainerSize = ContainerSize(width=0.0, height=0.0)
    transitions: tuple[TransitionSpec, ...] = field(default_factory=tuple)
    position: PositionFunction = default_position
    style: object = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, object] | None) -> PlungeOptions:
        """Fill missing option keys with defaults.

        Accepts the loose option shape::

            {
                "style": {"width": 200, "height": 100},
                "transitions": [
                    {"style": "red"},
                    {"at": 300, "style": "blue"},
                    {"at": 700, "vertical": True, "style": "yellow"},
                ],
                "position": lambda t: {"top": 2 * t, "left": 2 * t},
            }

        ``size`` may be given explicitly; otherwise width/height are read from
        a mapping ``style``. Transitions may be ``TransitionSpec`` instances or
        option mappings.
        """
        if options is None:
            options = {}
        style = options.get("style")
        position = options.get("position")
        return cls(
            size=_resolve_size(options.get("size"), style),
            transitions=_resolve_transitions(options.get("transitions")),
            position=position if callable(position) else default_position,
            style=style,
        )


def _resolve_transitions(raw: object) -> tuple[TransitionSpec, ...]:
    if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
        return ()
    specs: list[TransitionSpec] = []
    for item in raw:
        if isinstance(item, TransitionSpec):
            specs.append(item)
        elif isinstance(item, Mapping):
            specs.append(TransitionSpec.from_options(item))
        else:
            specs.append(TransitionSpec(content=item))
    return tuple(specs)


def _resolve_size(raw: object, style: object) -> ContainerSize:
    if isinstance(raw, ContainerSize):
        return raw
    if isinstance(raw, Mapping):
        return _size_from_mapping(raw)
    if isinstance(style, Mapping):
        return _size_from_mapping(style)
    return ContainerSize(width=0.0, height=0.0)


def _size_from_mapping(raw: Mapping[str, object]) -> ContainerSize:
    return ContainerSize(width=_dimension(raw.get("width")), height=_dimension(raw.get("height")))


def _dimension(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip().lower().removesuffix("px")
        try:
            return float(text)
        except ValueError:
            return 0.0
    return 0.0
