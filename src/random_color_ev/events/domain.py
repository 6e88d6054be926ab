"""Semantic events and the screen-scoped action sets they route to."""

from __future__ import annotations

from enum import Enum


class Event(str, Enum):
    """Screen-agnostic triggers originating from user interaction."""

    INITIAL = "initial"
    CHANGE_BOTH_SIDES_COLORS = "change_both_sides_colors"


class ViewAction(str, Enum):
    """Routable action set owned by one screen.

    Subclasses must declare an ``INITIAL`` member; it is the idle value a
    subscription starts in and returns to after every delivered action.
    """

    @classmethod
    def idle(cls) -> ViewAction:
        return cls("initial")

    @property
    def is_idle(self) -> bool:
        return self.value == "initial"


class LeftAction(ViewAction):
    INITIAL = "initial"
    CHANGE_LEFT_COLOR = "change_left_color"


class RightAction(ViewAction):
    INITIAL = "initial"
    CHANGE_RIGHT_COLOR = "change_right_color"
