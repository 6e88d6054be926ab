"""Top-level package for random-color-ev."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .app import RandomColorApp
    from .colors import RGBColor, random_color
    from .config import ensure_config_dir, load_config
    from .events import Event, EventBus, LeftAction, RightAction, ViewAction
    from .exceptions import ConfigValidationError, RandomColorError, RoutingError
    from .routing import ROUTING_TABLE, ActionRouter
    from .subscription import ActionSubscription

__all__ = [
    "ROUTING_TABLE",
    "ActionRouter",
    "ActionSubscription",
    "ConfigValidationError",
    "Event",
    "EventBus",
    "LeftAction",
    "RGBColor",
    "RandomColorApp",
    "RandomColorError",
    "RightAction",
    "RoutingError",
    "ViewAction",
    "ensure_config_dir",
    "load_config",
    "random_color",
]

_LAZY_EXPORTS: dict[str, str] = {
    "ROUTING_TABLE": ".routing",
    "ActionRouter": ".routing",
    "ActionSubscription": ".subscription",
    "ConfigValidationError": ".exceptions",
    "Event": ".events",
    "EventBus": ".events",
    "LeftAction": ".events",
    "RGBColor": ".colors",
    "RandomColorApp": ".app",
    "RandomColorError": ".exceptions",
    "RightAction": ".events",
    "RoutingError": ".exceptions",
    "ViewAction": ".events",
    "ensure_config_dir": ".config",
    "load_config": ".config",
    "random_color": ".colors",
}


def __getattr__(name: str) -> Any:
    """Lazily import symbols to keep the UI dependency optional at import time."""
    module_name = _LAZY_EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module

    return getattr(import_module(module_name, __name__), name)
