"""Side pages that repaint themselves when their own action is routed to them."""

from __future__ import annotations

import logging
import random
from typing import Any, ClassVar

from textual.reactive import reactive
from textual.widgets import Static

from ..colors import RGBColor, random_color
from ..events.domain import LeftAction, RightAction, ViewAction
from ..routing import ActionRouter
from ..state import ScreenState, ScreenStateMachine
from ..subscription import ActionSubscription

LOGGER = logging.getLogger(__name__)


class SidePanel(Static):
    """Base for full-page labels whose background is a randomly sampled color.

    Subclasses set ``TITLE`` and ``ACTION_TYPE`` and override
    ``handle_action``. The panel subscribes to its own action type when mounted and releases the
    subscription when unmounted. Until the first color is picked it renders
    the idle palette.
    """

    DEFAULT_CSS = """
    SidePanel {
        width: 100%;
        height: 100%;
        content-align: center middle;
        text-style: bold;
    }
    """

    TITLE: ClassVar[str] = ""
    ACTION_TYPE: ClassVar[type[ViewAction]]

    color: reactive[RGBColor | None] = reactive(None, always_update=True)

    def __init__(
        self,
        router: ActionRouter,
        *,
        rng: random.Random | None = None,
        idle_background: str = "#ffffff",
        idle_text_color: str = "#000000",
        colored_text_color: str = "#ffffff",
        **kwargs: Any,
    ) -> None:
        super().__init__(self.TITLE, **kwargs)
        self._router = router
        self._rng = rng
        self._idle_background = idle_background
        self._idle_text_color = idle_text_color
        self._colored_text_color = colored_text_color
        self._machine = ScreenStateMachine()
        self._subscription: ActionSubscription[Any] | None = None
        self.color_changes = 0

    @property
    def state(self) -> ScreenState:
        return self._machine.state

    @property
    def subscription(self) -> ActionSubscription[Any] | None:
        return self._subscription

    def on_mount(self) -> None:
        self._apply_palette(self.color)
        self._subscription = ActionSubscription(self._router, self.ACTION_TYPE)
        self._subscription.watch(self.handle_action)

    def on_unmount(self) -> None:
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None

    def handle_action(self, action: Any) -> None:  # noqa: ANN401
        """React to one routed action; the base panel ignores every action."""
        return None

    def change_color(self) -> RGBColor:
        """Sample a new background and enter ``COLOR_JUST_CHANGED``."""
        color = random_color(self._rng)
        self._machine.transition_to(ScreenState.COLOR_JUST_CHANGED)
        self.color_changes += 1
        self.color = color
        LOGGER.info(
            "panel.color.changed",
            extra={
                "event": "panel.color.changed",
                "panel": self.TITLE,
                "color": color.to_hex(),
                "changes": self.color_changes,
            },
        )
        return color

    def settle(self) -> None:
        """Return to ``IDLE`` after the subscription's idle tick."""
        self._machine.transition_if(ScreenState.COLOR_JUST_CHANGED, ScreenState.IDLE)

    def watch_color(self, color: RGBColor | None) -> None:
        self._apply_palette(color)

    def _apply_palette(self, color: RGBColor | None) -> None:
        if color is None:
            self.styles.background = self._idle_background
            self.styles.color = self._idle_text_color
        else:
            self.styles.background = color.to_hex()
            self.styles.color = self._colored_text_color


class LeftPanel(SidePanel):
    TITLE = "Left"
    ACTION_TYPE = LeftAction

    def handle_action(self, action: LeftAction) -> None:
        if action is LeftAction.CHANGE_LEFT_COLOR:
            self.change_color()
        elif action is LeftAction.INITIAL:
            self.settle()


class RightPanel(SidePanel):
    TITLE = "Right"
    ACTION_TYPE = RightAction

    def handle_action(self, action: RightAction) -> None:
        if action is RightAction.CHANGE_RIGHT_COLOR:
            self.change_color()
        elif action is RightAction.INITIAL:
            self.settle()
