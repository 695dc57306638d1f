from __future__ import annotations

import inspect
from collections.abc import Callable
from enum import Enum
from typing import Any, get_type_hints

from skycast.shared.logging_mixin import LoggingMixin


class QueryEvent(Enum):
    """Events published by the query controller"""

    STATE_CHANGED = "state_changed"

    QUERY_STARTED = "query_started"
    QUERY_SUCCEEDED = "query_succeeded"
    QUERY_FAILED = "query_failed"
    QUERY_RESET = "query_reset"

    def __str__(self) -> str:
        return self.value


class EventBus(LoggingMixin):
    """
    EventBus with parameter detection from callback signatures.

    Rules:
    - Parameters with type hint QueryEvent get the event
    - Other parameters get the data
    - No parameters (after self): gets nothing

    Callbacks run on the publishing coroutine's loop; sync callbacks are
    called inline, coroutine callbacks are awaited in subscription order.
    """

    def __init__(self):
        self._subscribers: dict[QueryEvent, list[tuple[Callable, bool, bool]]] = {
            event_type: [] for event_type in QueryEvent
        }

    def subscribe(self, event_type: QueryEvent, callback: Callable) -> None:
        sig = inspect.signature(callback)
        try:
            type_hints = get_type_hints(callback)
        except (NameError, AttributeError, TypeError):
            type_hints = {}

        params = [name for name in sig.parameters if name != "self"]

        pass_event = False
        pass_data = False
        for param_name in params:
            if type_hints.get(param_name) is QueryEvent:
                pass_event = True
            else:
                pass_data = True

        self._subscribers[event_type].append((callback, pass_event, pass_data))

    def unsubscribe(self, event_type: QueryEvent, callback: Callable) -> None:
        self._subscribers[event_type] = [
            (cb, pe, pd) for cb, pe, pd in self._subscribers[event_type] if cb != callback
        ]

    def subscriber_count(self, event_type: QueryEvent) -> int:
        return len(self._subscribers[event_type])

    async def publish_async(self, event_type: QueryEvent, data: Any = None) -> None:
        for callback, pass_event, pass_data in list(self._subscribers[event_type]):
            args = self._build_args(event_type, data, pass_event, pass_data)
            try:
                result = callback(*args)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                self.logger.error(
                    "Error in callback %s for event %s",
                    getattr(callback, "__name__", callback),
                    event_type,
                    exc_info=True,
                )

    def _build_args(
        self, event: QueryEvent, data: Any, pass_event: bool, pass_data: bool
    ) -> tuple:
        args = []
        if pass_event:
            args.append(event)
        if pass_data:
            args.append(data)
        return tuple(args)
