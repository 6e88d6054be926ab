"""Event bus carrying semantic UI events to their subscribers.

Usage:
    bus = EventBus(dispatcher=app.run_on_ui_thread)

    def on_event(event: Event) -> None:
        print(f"Received: {event.value}")

    subscription = bus.subscribe(on_event)

    # Publish events
    bus.publish(Event.CHANGE_BOTH_SIDES_COLORS)

    subscription.cancel()
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
import logging
from typing import Any

from .domain import Event

LOGGER = logging.getLogger(__name__)

EventHandler = Callable[[Event], None]
Dispatcher = Callable[[Callable[[], None]], Any]


def _call_inline(callback: Callable[[], None]) -> None:
    callback()


@dataclass(eq=False)
class Subscription:
    """Handle returned by ``subscribe``; cancelling it removes the handler."""

    handler: Callable[..., None]
    _cancel: Callable[[Subscription], None] = field(repr=False)
    active: bool = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._cancel(self)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.cancel()


class EventBus:
    """Synchronous broadcast channel for :class:`Event` values.

    Handlers run in registration order. Delivery goes through ``dispatcher``,
    which receives a zero-argument callback and is responsible for running it
    on the UI thread; by default the callback runs inline.

    With ``replay_last`` enabled the bus behaves as a current-value channel:
    a new subscriber is immediately handed the most recently published event.
    """

    def __init__(
        self,
        dispatcher: Dispatcher | None = None,
        *,
        replay_last: bool = False,
    ) -> None:
        self._dispatch: Dispatcher = dispatcher or _call_inline
        self._replay_last = replay_last
        self._subscribers: list[Subscription] = []
        self._current = Event.INITIAL

    @property
    def current(self) -> Event:
        """The most recently published event."""
        return self._current

    @property
    def replay_last(self) -> bool:
        return self._replay_last

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, handler: EventHandler) -> Subscription:
        """Register ``handler`` for every future event.

        Args:
            handler: Called with each published event on the UI thread.
        """
        subscription = Subscription(handler=handler, _cancel=self.unsubscribe)
        self._subscribers.append(subscription)
        LOGGER.debug(
            "events.subscribe",
            extra={"event": "events.subscribe", "subscribers": len(self._subscribers)},
        )
        if self._replay_last:
            self._dispatch(partial(self._deliver, subscription, self._current))
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription; unknown subscriptions are ignored."""
        subscription.active = False
        try:
            self._subscribers.remove(subscription)
        except ValueError:
            return
        LOGGER.debug(
            "events.unsubscribe",
            extra={"event": "events.unsubscribe", "subscribers": len(self._subscribers)},
        )

    def publish(self, event: Event) -> None:
        """Broadcast ``event`` to all current subscribers.

        Args:
            event: Event value to deliver
        """
        self._current = event
        LOGGER.debug(
            "events.publish",
            extra={
                "event": "events.publish",
                "event_name": event.value,
                "subscribers": len(self._subscribers),
            },
        )
        self._dispatch(partial(self._broadcast, event, list(self._subscribers)))

    def clear(self) -> None:
        """Drop every subscriber."""
        for subscription in self._subscribers:
            subscription.active = False
        self._subscribers.clear()

    def _broadcast(self, event: Event, subscribers: list[Subscription]) -> None:
        for subscription in subscribers:
            self._deliver(subscription, event)

    def _deliver(self, subscription: Subscription, event: Event) -> None:
        if not subscription.active:
            return
        try:
            subscription.handler(event)
        except Exception:
            LOGGER.exception(
                "events.handler.failed",
                extra={"event": "events.handler.failed", "event_name": event.value},
            )
