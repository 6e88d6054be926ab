"""Per-screen holder of the current routed action."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Generic, TypeVar

from .events.bus import Subscription
from .events.domain import ViewAction
from .routing import ActionRouter

LOGGER = logging.getLogger(__name__)

A = TypeVar("A", bound=ViewAction)


class ActionSubscription(Generic[A]):
    """Observable current action for one screen, self-resetting after delivery.

    Each delivered action is assigned and then immediately replaced by the
    idle action, so observers see one ``action -> idle`` tick per delivery and
    a repeated action still produces a fresh tick. The construction-time idle
    value is never sent to observers.
    """

    def __init__(self, router: ActionRouter, action_type: type[A]) -> None:
        self._action_type = action_type
        self._observers: list[Callable[[A], None]] = []
        self._delivered = 0
        # The router rejects non-screen types before idle() is looked up.
        self._subscription: Subscription | None = router.subscribe(
            action_type, self._receive
        )
        self._idle: A = action_type.idle()  # type: ignore[assignment]
        self._value: A = self._idle

    @property
    def action_type(self) -> type[A]:
        return self._action_type

    @property
    def value(self) -> A:
        return self._value

    @property
    def delivered(self) -> int:
        """Number of real actions received since construction."""
        return self._delivered

    @property
    def closed(self) -> bool:
        return self._subscription is None or not self._subscription.active

    def watch(self, observer: Callable[[A], None]) -> Callable[[], None]:
        """Register ``observer`` and return a callable that removes it."""
        self._observers.append(observer)

        def unwatch() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unwatch

    def close(self) -> None:
        if self._subscription is None:
            return
        self._subscription.cancel()
        self._subscription = None
        self._observers.clear()

    def __enter__(self) -> ActionSubscription[A]:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def _receive(self, action: A) -> None:
        self._delivered += 1
        LOGGER.debug(
            "subscription.delivered",
            extra={
                "event": "subscription.delivered",
                "action": f"{self._action_type.__name__}.{action.name}",
                "delivered": self._delivered,
            },
        )
        try:
            self._assign(action)
        finally:
            self._assign(self._idle)

    def _assign(self, action: A) -> None:
        self._value = action
        for observer in list(self._observers):
            try:
                observer(action)
            except Exception:
                LOGGER.exception(
                    "subscription.observer.failed",
                    extra={
                        "event": "subscription.observer.failed",
                        "action": f"{self._action_type.__name__}.{action.name}",
                    },
                )
