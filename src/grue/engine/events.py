"""Turn scheduler for daemons and countdown interrupts.

Daemons run on every turn while enabled. Interrupts count down once per
turn and fire when their counter reaches zero; firing disables them unless
the callback queues them again. Entries run in registration order.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..logging import get_logger
from .narration import Narration

if TYPE_CHECKING:
    from .state import GameState

logger = get_logger(__name__)

EventHandler = Callable[["GameState", Narration], bool]


@dataclass
class Event:
    id: str
    handler: EventHandler
    ticks: int = 0
    enabled: bool = True
    is_daemon: bool = False


class EventSystem:
    """Per-session registry of timed callbacks."""

    def __init__(self) -> None:
        self._events: dict[str, Event] = {}

    def register_daemon(
        self, event_id: str, handler: EventHandler, enabled: bool = True
    ) -> None:
        self._events[event_id] = Event(event_id, handler, 0, enabled, is_daemon=True)

    def register_interrupt(
        self, event_id: str, handler: EventHandler, ticks: int, enabled: bool = True
    ) -> None:
        self._events[event_id] = Event(event_id, handler, ticks, enabled)

    def queue_interrupt(self, event_id: str, ticks: int) -> None:
        """Re-arm an interrupt with a fresh counter and enable it."""
        event = self._events.get(event_id)
        if event is not None:
            event.ticks = ticks
            event.enabled = True

    def enable(self, event_id: str) -> None:
        if event_id in self._events:
            self._events[event_id].enabled = True

    def disable(self, event_id: str) -> None:
        if event_id in self._events:
            self._events[event_id].enabled = False

    def remove(self, event_id: str) -> None:
        self._events.pop(event_id, None)

    def has(self, event_id: str) -> bool:
        return event_id in self._events

    def is_enabled(self, event_id: str) -> bool:
        event = self._events.get(event_id)
        return event is not None and event.enabled

    def remaining_ticks(self, event_id: str) -> int:
        """Ticks left on an interrupt, or -1 when it is not registered."""
        event = self._events.get(event_id)
        return event.ticks if event is not None else -1

    @property
    def ids(self) -> list[str]:
        return list(self._events)

    def process_turn(self, state: "GameState", out: Narration) -> bool:
        """Run one scheduler pass and advance the move counter.

        A callback that raises is logged and skipped; the remaining entries
        still run.
        """
        changed = False
        for event in list(self._events.values()):
            if not event.enabled:
                continue
            if not event.is_daemon:
                if event.ticks > 0:
                    event.ticks -= 1
                if event.ticks > 0:
                    continue
                event.enabled = False
            try:
                if event.handler(state, out):
                    changed = True
            except Exception:
                logger.exception("event_failed", event_id=event.id, moves=state.moves)

        state.moves += 1
        return changed

    def snapshot(self) -> dict[str, tuple[bool, int]]:
        return {e.id: (e.enabled, e.ticks) for e in self._events.values()}

    def restore(self, data: dict[str, tuple[bool, int]]) -> None:
        for event_id, (enabled, ticks) in data.items():
            event = self._events.get(event_id)
            if event is not None:
                event.enabled = enabled
                event.ticks = ticks
