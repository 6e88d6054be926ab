"""Fan semantic events out into screen-scoped actions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from types import MappingProxyType
from typing import Any

from .events.bus import EventBus, Subscription
from .events.domain import Event, LeftAction, RightAction, ViewAction
from .exceptions import RoutingError

LOGGER = logging.getLogger(__name__)

ActionHandler = Callable[[Any], None]

ROUTING_TABLE: Mapping[Event, tuple[ViewAction, ...]] = MappingProxyType(
    {
        Event.INITIAL: (),
        Event.CHANGE_BOTH_SIDES_COLORS: (
            LeftAction.CHANGE_LEFT_COLOR,
            RightAction.CHANGE_RIGHT_COLOR,
        ),
    }
)


@dataclass(frozen=True)
class _Route:
    action_type: type[ViewAction]
    subscription: Subscription


def _validate_routes(
    routes: Mapping[Event, tuple[ViewAction, ...]],
) -> Mapping[Event, tuple[ViewAction, ...]]:
    validated: dict[Event, tuple[ViewAction, ...]] = {}
    for event, actions in routes.items():
        if not isinstance(event, Event):
            raise RoutingError(f"Routing key {event!r} is not an Event.")
        for action in actions:
            if not isinstance(action, ViewAction):
                raise RoutingError(
                    f"Route for {event.value!r} contains non-action value {action!r}."
                )
        validated[event] = tuple(actions)
    return MappingProxyType(validated)


class ActionRouter:
    """Expand each bus event into its actions and deliver them by type.

    A subscriber declares the concrete action enum it wants; only members of
    exactly that enum reach it. Actions for other screens are skipped for that
    subscriber rather than reported.
    """

    def __init__(
        self,
        bus: EventBus,
        routes: Mapping[Event, tuple[ViewAction, ...]] = ROUTING_TABLE,
    ) -> None:
        self._routes = _validate_routes(routes)
        self._subscribers: list[_Route] = []
        self._bus_subscription: Subscription | None = bus.subscribe(self._on_event)

    @property
    def routes(self) -> Mapping[Event, tuple[ViewAction, ...]]:
        return self._routes

    def actions_for(self, event: Event) -> tuple[ViewAction, ...]:
        """Return the ordered actions ``event`` expands into."""
        return self._routes.get(event, ())

    def subscribe(
        self, action_type: type[ViewAction], handler: ActionHandler
    ) -> Subscription:
        """Deliver every routed member of ``action_type`` to ``handler``."""
        if not (isinstance(action_type, type) and issubclass(action_type, ViewAction)):
            raise RoutingError(f"{action_type!r} is not a ViewAction type.")
        if action_type is ViewAction or not list(action_type):
            raise RoutingError(f"{action_type.__name__} defines no actions to route.")
        subscription = Subscription(handler=handler, _cancel=self._remove)
        self._subscribers.append(_Route(action_type, subscription))
        return subscription

    def close(self) -> None:
        """Stop listening to the bus and drop all action subscribers."""
        if self._bus_subscription is not None:
            self._bus_subscription.cancel()
            self._bus_subscription = None
        for route in self._subscribers:
            route.subscription.active = False
        self._subscribers.clear()

    def _remove(self, subscription: Subscription) -> None:
        subscription.active = False
        self._subscribers = [
            route for route in self._subscribers if route.subscription is not subscription
        ]

    def _on_event(self, event: Event) -> None:
        actions = self.actions_for(event)
        if not actions:
            LOGGER.debug(
                "router.unrouted",
                extra={"event": "router.unrouted", "event_name": event.value},
            )
            return
        for action in actions:
            for route in list(self._subscribers):
                if route.action_type is not type(action):
                    continue
                if not route.subscription.active:
                    continue
                LOGGER.debug(
                    "router.dispatch",
                    extra={
                        "event": "router.dispatch",
                        "event_name": event.value,
                        "action": f"{type(action).__name__}.{action.name}",
                    },
                )
                try:
                    route.subscription.handler(action)
                except Exception:
                    LOGGER.exception(
                        "router.handler.failed",
                        extra={"event": "router.handler.failed", "event_name": event.value},
                    )
