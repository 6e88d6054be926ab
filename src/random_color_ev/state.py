"""Per-page state machine for the color-changing side pages."""

from __future__ import annotations

from enum import Enum


class ScreenState(str, Enum):
    """Finite state machine for a side page's color lifecycle."""

    IDLE = "IDLE"
    COLOR_JUST_CHANGED = "COLOR_JUST_CHANGED"


class ScreenStateMachine:
    """Track a side page's state; all transitions happen on the UI thread."""

    def __init__(self) -> None:
        self._state = ScreenState.IDLE

    @property
    def state(self) -> ScreenState:
        return self._state

    def transition_to(self, new_state: ScreenState) -> ScreenState:
        """Transition to a new state and return it."""
        self._state = new_state
        return self._state

    def transition_if(
        self,
        expected_state: ScreenState,
        new_state: ScreenState,
    ) -> bool:
        """Transition only when current state matches expected state."""
        if self._state != expected_state:
            return False
        self._state = new_state
        return True
