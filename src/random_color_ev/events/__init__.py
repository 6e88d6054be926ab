"""Event-driven communication between the three pages.

The bus carries screen-agnostic events; see ``random_color_ev.routing`` for
how they fan out into screen-scoped actions.
"""

from .bus import EventBus, Subscription
from .domain import Event, LeftAction, RightAction, ViewAction

__all__ = [
    "Event",
    "EventBus",
    "LeftAction",
    "RightAction",
    "Subscription",
    "ViewAction",
]
