"""Applying input events to a viewport."""

import logging
from enum import Enum

from .keys import (
    InputEvent, IterAdjust, Pan, Quit, Reset, SelectPreset, ToggleColor, Unknown, Zoom,
)
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Outcome(Enum):
    REDRAW = "redraw"
    QUIT = "quit"
    IGNORE = "ignore"


class Dispatcher:
    """Stateless mapping from input events to viewport mutations."""

    def __init__(self, viewport: Viewport):
        self.viewport = viewport

    def handle(self, event: InputEvent) -> Outcome:
        handler = self._event_handlers.get(type(event))
        if handler is None:
            return Outcome.IGNORE
        outcome = handler(self, event)
        logger.debug("%s -> %s", event, outcome.value)
        return outcome

    @property
    def _event_handlers(self) -> dict:
        """Map event types to handler methods."""
        return {
            Quit: lambda s, e: Outcome.QUIT,
            Reset: Dispatcher._reset,
            ToggleColor: Dispatcher._toggle_color,
            SelectPreset: Dispatcher._select_preset,
            Zoom: Dispatcher._zoom,
            IterAdjust: Dispatcher._adjust_iter,
            Pan: Dispatcher._pan,
            Unknown: lambda s, e: Outcome.IGNORE,
        }

    def _reset(self, event: Reset) -> Outcome:
        self.viewport.reset()
        return Outcome.REDRAW

    def _toggle_color(self, event: ToggleColor) -> Outcome:
        self.viewport.toggle_color()
        return Outcome.REDRAW

    def _select_preset(self, event: SelectPreset) -> Outcome:
        self.viewport.select_preset(event.index)
        logger.info("Preset %d: %s", event.index, self.viewport.active_preset)
        return Outcome.REDRAW

    def _zoom(self, event: Zoom) -> Outcome:
        if event.inward:
            self.viewport.zoom_in()
        else:
            self.viewport.zoom_out()
        return Outcome.REDRAW

    def _adjust_iter(self, event: IterAdjust) -> Outcome:
        if event.sign > 0:
            self.viewport.increase_iter()
        else:
            self.viewport.decrease_iter()
        return Outcome.REDRAW

    def _pan(self, event: Pan) -> Outcome:
        self.viewport.pan(event.direction)
        return Outcome.REDRAW
