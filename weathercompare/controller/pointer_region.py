"""Pointer-down dispatch and click-outside dismissal of suggestions."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

SEARCH_REGION_ID = "city-search"


@dataclass(frozen=True)
class PointerEvent:
    # element ids from the event target up to the document root
    path: tuple[str, ...]


PointerListener = Callable[[PointerEvent], None]


class PointerEvents:
    """Minimal pointer-down dispatcher with explicit subscription."""

    def __init__(self) -> None:
        self._listeners: list[PointerListener] = []

    def subscribe(self, listener: PointerListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: PointerListener) -> None:
        self._listeners.remove(listener)

    def dispatch(self, event: PointerEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


@dataclass(frozen=True)
class PointerRegion:
    root_id: str = SEARCH_REGION_ID

    def contains(self, event: PointerEvent) -> bool:
        return self.root_id in event.path


class SupportsHideSuggestions(Protocol):
    def hide_suggestions(self) -> object: ...


@contextmanager
def dismiss_outside(
    target: SupportsHideSuggestions,
    events: PointerEvents,
    region: PointerRegion = PointerRegion(),
) -> Iterator[PointerListener]:
    """Hide suggestions on any pointer-down outside ``region`` while active.

    The listener is released when the block exits, including on error.
    """

    def on_pointer_down(event: PointerEvent) -> None:
        if not region.contains(event):
            target.hide_suggestions()

    events.subscribe(on_pointer_down)
    logger.debug("Pointer dismissal listener attached to #%s", region.root_id)
    try:
        yield on_pointer_down
    finally:
        events.unsubscribe(on_pointer_down)
        logger.debug("Pointer dismissal listener released from #%s", region.root_id)
