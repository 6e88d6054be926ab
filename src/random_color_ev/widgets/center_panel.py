"""Center page: the only producer of events."""

from __future__ import annotations

import logging
from typing import Any

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Static

from ..events.bus import EventBus
from ..events.domain import Event

LOGGER = logging.getLogger(__name__)


class CenterPanel(Vertical):
    """Title plus the "Change colors" button."""

    DEFAULT_CSS = """
    CenterPanel {
        width: 100%;
        height: 100%;
        align: center middle;
    }
    CenterPanel #center_title {
        width: auto;
        padding: 1;
        color: white;
        text-style: bold;
    }
    CenterPanel #change_colors_button {
        width: auto;
    }
    """

    def __init__(
        self,
        bus: EventBus,
        *,
        background: str = "#008080",
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._bus = bus
        self._background = background
        self.presses = 0

    def compose(self) -> ComposeResult:
        yield Static("Center", id="center_title")
        yield Button("Change colors", id="change_colors_button")

    def on_mount(self) -> None:
        self.styles.background = self._background

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "change_colors_button":
            return
        event.stop()
        self.presses += 1
        LOGGER.debug(
            "center.change_requested",
            extra={"event": "center.change_requested", "presses": self.presses},
        )
        self._bus.publish(Event.CHANGE_BOTH_SIDES_COLORS)
