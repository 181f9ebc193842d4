"""Plunge widget assembly: resolve once, project on every scroll."""

from __future__ import annotations

from collections.abc import Mapping

from plunge.api.events import ScrollEvent, ScrollSource, Subscription
from plunge.api.options import PlungeOptions
from plunge.api.surface import PanelSurface
from plunge.api.transitions import Projection, Region
from plunge.runtime.bounds import resolve_bounds
from plunge.runtime.config import PlungeConfig, get_plunge_config
from plunge.runtime.events import ScrollEventBus
from plunge.runtime.logging import get_plunge_logger, setup_plunge_logging
from plunge.runtime.projector import project

_LOG = get_plunge_logger("plunge.widget")


class PlungeWidget:
    """Container that moves with scrolling and hands off between panels."""

    def __init__(
        self,
        *,
        options: PlungeOptions,
        surface: PanelSurface,
        scroll_source: ScrollSource,
        config: PlungeConfig | None = None,
    ) -> None:
        self._options = options
        self._surface = surface
        self._scroll_source = scroll_source
        self._config = config if config is not None else get_plunge_config()
        self._regions = resolve_bounds(options.transitions)
        self._subscription: Subscription | None = None
        self._projection_count = 0
        self._last_projection: Projection | None = None

    @property
    def options(self) -> PlungeOptions:
        return self._options

    @property
    def regions(self) -> tuple[Region, ...]:
        return self._regions

    @property
    def scroll_source(self) -> ScrollSource:
        return self._scroll_source

    @property
    def last_projection(self) -> Projection | None:
        return self._last_projection

    @property
    def attached(self) -> bool:
        return self._subscription is not None

    def attach(self) -> Projection:
        """Mount panels, place the container, then bind to the scroll source.

        A failing initial projection unmounts the surface and leaves the
        widget unbound before the error propagates.
        """
        if self._subscription is not None:
            raise RuntimeError("plunge widget is already attached")
        self._surface.mount(self._options.size, self._options.transitions)
        try:
            projection = self._apply(self._scroll_source.scroll_offset())
        except Exception:
            self._surface.unmount()
            raise
        self._subscription = self._scroll_source.subscribe(self._on_scroll)
        _LOG.info(
            "plunge_widget_attached panels=%d width=%s height=%s",
            len(self._regions),
            self._options.size.width,
            self._options.size.height,
        )
        return projection

    def refresh(self, offset: float | None = None) -> Projection:
        """Project the given (or current) offset and apply it to the surface."""
        if self._subscription is None:
            raise RuntimeError("plunge widget is not attached")
        return self._apply(self._scroll_source.scroll_offset() if offset is None else offset)

    def destroy(self) -> None:
        """Unbind from the scroll source and unmount; safe to call twice."""
        subscription = self._subscription
        if subscription is None:
            return
        self._subscription = None
        self._scroll_source.unsubscribe(subscription)
        self._surface.unmount()
        _LOG.debug("plunge_widget_destroyed projections=%d", self._projection_count)

    def _on_scroll(self, event: ScrollEvent) -> None:
        # Sources may still deliver an event already in flight when destroy() ran.
        if self._subscription is None:
            return
        self._apply(event.offset)

    def _apply(self, t: float) -> Projection:
        projection = project(t, self._options.position, self._options.size, self._regions)
        self._surface.move_container(projection.container_position)
        for index, frame in enumerate(projection.frames):
            self._surface.apply_frame(index, frame)
        self._projection_count += 1
        self._last_projection = projection
        self._trace(t, projection)
        return projection

    def _trace(self, t: float, projection: Projection) -> None:
        if not self._config.trace_projection_enabled:
            return
        if self._projection_count % self._config.trace_sampling_n != 0:
            return
        _LOG.debug(
            "plunge_projection t=%s top=%s left=%s visible=%d",
            t,
            projection.container_position.top,
            projection.container_position.left,
            sum(1 for frame in projection.frames if frame.visible),
            extra={"states": [frame.state.name for frame in projection.frames]},
        )


def create_plunge(
    options: PlungeOptions | Mapping[str, object] | None,
    *,
    surface: PanelSurface,
    scroll_source: ScrollSource | None = None,
    config: PlungeConfig | None = None,
) -> PlungeWidget:
    """Create, attach and initially place a plunge widget.

    Installs plunge logging from ``config`` when the host has not configured
    any handlers yet.
    """
    resolved_config = config if config is not None else get_plunge_config()
    setup_plunge_logging(resolved_config)
    resolved = options if isinstance(options, PlungeOptions) else PlungeOptions.from_mapping(options)
    widget = PlungeWidget(
        options=resolved,
        surface=surface,
        scroll_source=scroll_source if scroll_source is not None else ScrollEventBus(),
        config=resolved_config,
    )
    widget.attach()
    return widget
