"""Scroll-driven transition panels that hand off to one another."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from plunge.api.events import ScrollSource
    from plunge.api.options import PlungeOptions
    from plunge.api.surface import PanelSurface
    from plunge.runtime.widget import PlungeWidget


def create_plunge(
    options: "PlungeOptions | Mapping[str, object] | None",
    *,
    surface: "PanelSurface",
    scroll_source: "ScrollSource | None" = None,
) -> "PlungeWidget":
    """Create a widget bound to a scroll source and rendered onto a surface."""
    from plunge.runtime.widget import create_plunge as runtime_create_plunge

    return runtime_create_plunge(options, surface=surface, scroll_source=scroll_source)

__all__ = ["create_plunge"]
