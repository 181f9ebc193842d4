"""Plunge runtime modules."""

from plunge.runtime.bounds import resolve_bounds
from plunge.runtime.config import (
    PlungeConfig,
    get_plunge_config,
    initialize_plunge_config,
    load_plunge_config,
    set_plunge_config,
)
from plunge.runtime.events import ScrollEventBus
from plunge.runtime.logging import configure_plunge_logging, get_plunge_logger, setup_plunge_logging
from plunge.runtime.projector import clip_axis, project, project_region, region_visible
from plunge.runtime.widget import PlungeWidget, create_plunge

__all__ = [
    "PlungeConfig",
    "PlungeWidget",
    "ScrollEventBus",
    "clip_axis",
    "configure_plunge_logging",
    "create_plunge",
    "get_plunge_config",
    "get_plunge_logger",
    "initialize_plunge_config",
    "load_plunge_config",
    "project",
    "project_region",
    "region_visible",
    "resolve_bounds",
    "set_plunge_config",
    "setup_plunge_logging",
]
