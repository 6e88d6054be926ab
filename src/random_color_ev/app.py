"""Main Textual application: three pages and one color-changing event."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging
import random
import sys
import threading
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, TabbedContent, TabPane

from .config import load_config
from .events.bus import EventBus
from .events.domain import Event
from .logging_utils import configure_logging
from .routing import ActionRouter
from .widgets.center_panel import CenterPanel
from .widgets.side_panel import LeftPanel, RightPanel

LOGGER = logging.getLogger(__name__)

PAGE_ORDER: tuple[str, ...] = ("left", "center", "right")


class RandomColorApp(App[None]):
    """Swipe between Left, Center and Right; Center recolors both sides."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #pages {
        height: 1fr;
    }

    #pages ContentSwitcher {
        height: 1fr;
    }

    #pages TabPane {
        height: 1fr;
        padding: 0;
    }
    """

    DEFAULT_ACTION_DESCRIPTIONS: dict[str, str] = {
        "previous_page": "Previous",
        "next_page": "Next",
        "change_colors": "Change colors",
        "quit": "Quit",
    }

    def __init__(
        self,
        config: dict[str, dict[str, Any]] | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config if config is not None else load_config()
        self.window_title = str(self.config["app"]["title"])
        configure_logging(self.config["logging"])
        LOGGER.info(
            "app.python",
            extra={
                "event": "app.python",
                "executable": sys.executable,
                "version": sys.version.split()[0],
            },
        )

        events_cfg = self.config["events"]
        self.rng = rng or random.Random(events_cfg.get("color_seed"))
        self._ui_loop: asyncio.AbstractEventLoop | None = None
        self._ui_thread_id: int | None = None
        self.event_bus = EventBus(
            dispatcher=self.run_on_ui_thread,
            replay_last=bool(events_cfg.get("replay_last_event", False)),
        )
        self.router = ActionRouter(self.event_bus)
        self._binding_specs = self._binding_specs_from_config(self.config)
        super().__init__()

    @classmethod
    def _binding_specs_from_config(
        cls, config: dict[str, dict[str, Any]]
    ) -> list[Binding]:
        keybinds = config.get("keybinds", {})
        bindings: list[Binding] = []
        for action_name in cls.DEFAULT_ACTION_DESCRIPTIONS:
            binding_key = keybinds.get(action_name)
            if isinstance(binding_key, str) and binding_key.strip():
                bindings.append(
                    Binding(
                        key=binding_key.strip(),
                        action=action_name,
                        description=cls.DEFAULT_ACTION_DESCRIPTIONS[action_name],
                        show=True,
                    )
                )
        return bindings

    def run_on_ui_thread(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` on the UI loop without waiting for it.

        Calls made on the UI thread, or before the app is running, execute
        inline so that delivery stays synchronous.
        """
        loop = self._ui_loop
        if loop is None or threading.get_ident() == self._ui_thread_id:
            callback()
            return
        loop.call_soon_threadsafe(callback)

    def publish_from_thread(self, event: Event) -> None:
        """Publish ``event`` from any thread; delivery happens on the UI loop."""
        self.event_bus.publish(event)

    def compose(self) -> ComposeResult:
        """Compose the three pages in swipe order."""
        ui_cfg = self.config["ui"]
        palette = {
            "idle_background": str(ui_cfg["idle_background"]),
            "idle_text_color": str(ui_cfg["idle_text_color"]),
            "colored_text_color": str(ui_cfg["colored_text_color"]),
        }
        yield Header()
        with TabbedContent(initial=str(self.config["app"]["initial_page"]), id="pages"):
            with TabPane("Left", id="left"):
                yield LeftPanel(self.router, rng=self.rng, id="left_panel", **palette)
            with TabPane("Center", id="center"):
                yield CenterPanel(
                    self.event_bus,
                    background=str(ui_cfg["center_background"]),
                    id="center_panel",
                )
            with TabPane("Right", id="right"):
                yield RightPanel(self.router, rng=self.rng, id="right_panel", **palette)
        yield Footer()

    def on_mount(self) -> None:
        """Capture the UI loop and register runtime keybindings."""
        self._ui_loop = asyncio.get_running_loop()
        self._ui_thread_id = threading.get_ident()
        self.title = self.window_title
        for binding in self._binding_specs:
            self.bind(
                binding.key,
                binding.action,
                description=binding.description,
                show=binding.show,
            )
        LOGGER.info(
            "app.startup",
            extra={
                "event": "app.startup",
                "page": self.active_page,
                "replay_last_event": self.event_bus.replay_last,
            },
        )

    def on_unmount(self) -> None:
        """Detach the router and drop bus subscribers during shutdown."""
        self.router.close()
        self.event_bus.clear()
        self._ui_loop = None
        self._ui_thread_id = None

    @property
    def active_page(self) -> str:
        return self.query_one("#pages", TabbedContent).active

    def show_page(self, page: str) -> None:
        """Switch to ``page`` (one of ``PAGE_ORDER``)."""
        if page not in PAGE_ORDER:
            raise ValueError(f"Unknown page {page!r}.")
        pages = self.query_one("#pages", TabbedContent)
        if pages.active == page:
            return
        previous = pages.active
        pages.active = page
        LOGGER.debug(
            "app.page.changed",
            extra={"event": "app.page.changed", "from_page": previous, "to_page": page},
        )

    def _step_page(self, offset: int) -> None:
        current = self.active_page
        index = PAGE_ORDER.index(current) if current in PAGE_ORDER else 1
        target = max(0, min(len(PAGE_ORDER) - 1, index + offset))
        self.show_page(PAGE_ORDER[target])

    def action_previous_page(self) -> None:
        """Swipe one page to the left; stays put on the first page."""
        self._step_page(-1)

    def action_next_page(self) -> None:
        """Swipe one page to the right; stays put on the last page."""
        self._step_page(1)

    def action_change_colors(self) -> None:
        """Broadcast the same event as the center page's button."""
        self.event_bus.publish(Event.CHANGE_BOTH_SIDES_COLORS)
