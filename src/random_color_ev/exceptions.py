"""Domain exception hierarchy for the random color application."""

from __future__ import annotations


class RandomColorError(RuntimeError):
    """Base class for all domain-level application errors."""


class ConfigValidationError(RandomColorError):
    """Raised when configuration cannot be validated safely."""


class RoutingError(RandomColorError):
    """Raised when the action router is given a type or route it cannot serve."""
