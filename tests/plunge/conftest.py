from __future__ import annotations

import pytest

from plunge.api.transitions import Axis, ContainerPosition, ContainerSize, TransitionSpec
from plunge.runtime.config import PlungeConfig


def fixed_position(top: float, left: float = 0.0):
    def _position(t: float) -> ContainerPosition:
        _ = t
        return ContainerPosition(top=top, left=left)

    return _position


def diagonal_position(t: float) -> dict[str, float]:
    return {"top": 2 * t, "left": 2 * t}


def make_readme_specs() -> tuple[TransitionSpec, ...]:
    return (
        TransitionSpec(content="red"),
        TransitionSpec(breakpoint=300.0, content="blue"),
        TransitionSpec(axis=Axis.VERTICAL, breakpoint=700.0, content="yellow"),
    )


@pytest.fixture
def readme_specs() -> tuple[TransitionSpec, ...]:
    return make_readme_specs()


@pytest.fixture
def box_size() -> ContainerSize:
    return ContainerSize(width=200.0, height=100.0)


@pytest.fixture
def quiet_config() -> PlungeConfig:
    return PlungeConfig(
        log_level="INFO",
        log_console_format="text",
        log_file_path=None,
        log_file_format="json",
        trace_projection_enabled=False,
        trace_sampling_n=1,
    )
