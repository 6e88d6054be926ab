"""Runtime-style tests for the real Textual app class."""

from __future__ import annotations

from copy import deepcopy
import logging
import random
import threading
from typing import Any
import unittest

from random_color_ev.colors import random_color
from random_color_ev.config import DEFAULT_CONFIG
from random_color_ev.events.domain import Event, LeftAction, RightAction
from random_color_ev.state import ScreenState

try:
    from random_color_ev.app import RandomColorApp
    from random_color_ev.widgets.center_panel import CenterPanel
    from random_color_ev.widgets.side_panel import LeftPanel, RightPanel
except ModuleNotFoundError:
    RandomColorApp = None  # type: ignore[assignment,misc]
    CenterPanel = None  # type: ignore[assignment,misc]
    LeftPanel = None  # type: ignore[assignment,misc]
    RightPanel = None  # type: ignore[assignment,misc]

_SEED = 3


@unittest.skipIf(RandomColorApp is None, "textual is not installed")
class AppRuntimeTests(unittest.IsolatedAsyncioTestCase):
    """Drive the real app through Textual's test pilot."""

    def setUp(self) -> None:
        root = logging.getLogger()
        self._original_level = root.level
        self._original_handlers = list(root.handlers)

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.setLevel(self._original_level)
        root.handlers.clear()
        root.handlers.extend(self._original_handlers)

    def _build_app(self, **events: Any) -> RandomColorApp:
        assert RandomColorApp is not None
        config = deepcopy(DEFAULT_CONFIG)
        config["logging"]["structured"] = False
        config["events"]["color_seed"] = _SEED
        config["events"].update(events)
        return RandomColorApp(config)

    def _panels(self, app: RandomColorApp) -> tuple[LeftPanel, CenterPanel, RightPanel]:
        return (
            app.query_one("#left_panel", LeftPanel),
            app.query_one("#center_panel", CenterPanel),
            app.query_one("#right_panel", RightPanel),
        )

    async def test_starts_on_center_with_idle_sides(self) -> None:
        app = self._build_app()
        async with app.run_test():
            left, _center, right = self._panels(app)
            self.assertEqual(app.active_page, "center")
            self.assertIsNone(left.color)
            self.assertIsNone(right.color)
            self.assertEqual(left.state, ScreenState.IDLE)
            self.assertEqual(app.title, DEFAULT_CONFIG["app"]["title"])

    async def test_button_press_recolors_both_sides_once(self) -> None:
        app = self._build_app()
        async with app.run_test() as pilot:
            left, center, right = self._panels(app)
            await pilot.click("#change_colors_button")
            await pilot.pause()

            self.assertEqual(center.presses, 1)
            self.assertEqual(left.color_changes, 1)
            self.assertEqual(right.color_changes, 1)
            self.assertIsNotNone(left.color)
            self.assertIsNotNone(right.color)
            self.assertEqual(left.state, ScreenState.IDLE)
            self.assertEqual(right.state, ScreenState.IDLE)

    async def test_colors_follow_seeded_sampler_left_then_right(self) -> None:
        app = self._build_app()
        rng = random.Random(_SEED)
        expected_left = random_color(rng)
        expected_right = random_color(rng)
        async with app.run_test():
            left, _center, right = self._panels(app)
            app.action_change_colors()
            self.assertEqual(left.color, expected_left)
            self.assertEqual(right.color, expected_right)

    async def test_initial_event_changes_nothing(self) -> None:
        app = self._build_app()
        async with app.run_test() as pilot:
            left, center, right = self._panels(app)
            app.event_bus.publish(Event.INITIAL)
            await pilot.pause()
            self.assertIsNone(left.color)
            self.assertIsNone(right.color)
            self.assertEqual(left.color_changes, 0)
            self.assertEqual(right.color_changes, 0)
            self.assertEqual(center.presses, 0)

    async def test_rapid_publishing_applies_every_color_in_order(self) -> None:
        app = self._build_app()
        rng = random.Random(_SEED)
        expected_left = []
        for _ in range(5):
            expected_left.append(random_color(rng))
            random_color(rng)
        async with app.run_test():
            left, _center, right = self._panels(app)
            assert left.subscription is not None
            applied: list[Any] = []
            left.subscription.watch(
                lambda action: applied.append(left.color)
                if action is LeftAction.CHANGE_LEFT_COLOR
                else None
            )
            for _ in range(5):
                app.action_change_colors()

            self.assertEqual(applied, expected_left)
            self.assertEqual(left.color_changes, 5)
            self.assertEqual(right.color_changes, 5)
            for color in applied:
                for channel in color.channels:
                    self.assertTrue(0.0 <= channel <= 1.0)

    async def test_side_subscriptions_only_see_their_own_actions(self) -> None:
        app = self._build_app()
        async with app.run_test():
            left, _center, right = self._panels(app)
            assert left.subscription is not None and right.subscription is not None
            left_seen: list[object] = []
            right_seen: list[object] = []
            left.subscription.watch(left_seen.append)
            right.subscription.watch(right_seen.append)
            app.action_change_colors()
            self.assertTrue(left_seen)
            self.assertTrue(right_seen)
            self.assertTrue(all(isinstance(a, LeftAction) for a in left_seen))
            self.assertTrue(all(isinstance(a, RightAction) for a in right_seen))

    async def test_publish_from_worker_thread_is_delivered_on_ui_thread(self) -> None:
        app = self._build_app()
        async with app.run_test() as pilot:
            left, _center, right = self._panels(app)
            ui_thread = threading.get_ident()
            handler_threads: list[int] = []
            assert left.subscription is not None
            left.subscription.watch(lambda _action: handler_threads.append(threading.get_ident()))

            worker = threading.Thread(
                target=app.publish_from_thread,
                args=(Event.CHANGE_BOTH_SIDES_COLORS,),
            )
            worker.start()
            worker.join()
            await pilot.pause()

            self.assertEqual(left.color_changes, 1)
            self.assertEqual(right.color_changes, 1)
            self.assertTrue(handler_threads)
            self.assertTrue(all(ident == ui_thread for ident in handler_threads))

    async def test_page_navigation_is_clamped(self) -> None:
        app = self._build_app()
        async with app.run_test() as pilot:
            app.action_previous_page()
            await pilot.pause()
            self.assertEqual(app.active_page, "left")
            app.action_previous_page()
            await pilot.pause()
            self.assertEqual(app.active_page, "left")
            app.action_next_page()
            app.action_next_page()
            app.action_next_page()
            await pilot.pause()
            self.assertEqual(app.active_page, "right")

    async def test_hidden_page_still_receives_its_action(self) -> None:
        app = self._build_app()
        async with app.run_test() as pilot:
            left, _center, right = self._panels(app)
            app.show_page("right")
            await pilot.pause()
            app.action_change_colors()
            self.assertEqual(left.color_changes, 1)
            self.assertEqual(right.color_changes, 1)

    async def test_show_page_rejects_unknown_page(self) -> None:
        app = self._build_app()
        async with app.run_test():
            with self.assertRaises(ValueError):
                app.show_page("up")

    async def test_replay_enabled_does_not_recolor_at_startup(self) -> None:
        app = self._build_app(replay_last_event=True)
        async with app.run_test() as pilot:
            await pilot.pause()
            left, _center, right = self._panels(app)
            self.assertTrue(app.event_bus.replay_last)
            self.assertEqual(left.color_changes, 0)
            self.assertEqual(right.color_changes, 0)

    async def test_replay_hands_last_event_to_late_bus_listener(self) -> None:
        app = self._build_app(replay_last_event=True)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.action_change_colors()
            received: list[Event] = []
            app.event_bus.subscribe(received.append)
            self.assertEqual(received, [Event.CHANGE_BOTH_SIDES_COLORS])

    async def test_late_bus_listener_gets_nothing_without_replay(self) -> None:
        app = self._build_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.action_change_colors()
            received: list[Event] = []
            app.event_bus.subscribe(received.append)
            self.assertEqual(received, [])

    async def test_unmount_releases_all_subscriptions(self) -> None:
        app = self._build_app()
        async with app.run_test():
            left, _center, right = self._panels(app)
            left_subscription = left.subscription
            right_subscription = right.subscription
        assert left_subscription is not None and right_subscription is not None
        self.assertTrue(left_subscription.closed)
        self.assertTrue(right_subscription.closed)
        self.assertEqual(app.event_bus.subscriber_count, 0)


if __name__ == "__main__":
    unittest.main()
