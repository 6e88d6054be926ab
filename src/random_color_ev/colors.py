"""Random background colors for the side pages."""

from __future__ import annotations

from dataclasses import dataclass
import random

_CHANNEL_MAX = 255


@dataclass(frozen=True)
class RGBColor:
    """Opaque color with each channel in ``[0.0, 1.0]``."""

    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"Color channel {channel!r} is outside [0.0, 1.0].")

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def to_rgb255(self) -> tuple[int, int, int]:
        return tuple(round(channel * _CHANNEL_MAX) for channel in self.channels)  # type: ignore[return-value]

    def to_hex(self) -> str:
        """Render as ``#RRGGBB``."""
        red, green, blue = self.to_rgb255()
        return f"#{red:02x}{green:02x}{blue:02x}"


def random_color(rng: random.Random | None = None) -> RGBColor:
    """Sample each channel independently and uniformly from ``[0.0, 1.0]``."""
    source = rng or random
    return RGBColor(
        red=source.uniform(0.0, 1.0),
        green=source.uniform(0.0, 1.0),
        blue=source.uniform(0.0, 1.0),
    )
