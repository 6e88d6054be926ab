"""Tests for random color sampling."""

from __future__ import annotations

import random
import unittest

from random_color_ev.colors import RGBColor, random_color


class RandomColorTests(unittest.TestCase):
    """Validate channel ranges and rendering."""

    def test_channels_within_unit_interval(self) -> None:
        rng = random.Random(1234)
        for _ in range(500):
            color = random_color(rng)
            for channel in color.channels:
                self.assertGreaterEqual(channel, 0.0)
                self.assertLessEqual(channel, 1.0)

    def test_seeded_samples_are_reproducible(self) -> None:
        first = [random_color(random.Random(7)) for _ in range(3)]
        second = [random_color(random.Random(7)) for _ in range(3)]
        self.assertEqual(first, second)

    def test_default_source_is_module_random(self) -> None:
        color = random_color()
        self.assertIsInstance(color, RGBColor)

    def test_hex_rendering(self) -> None:
        self.assertEqual(RGBColor(0.0, 0.0, 0.0).to_hex(), "#000000")
        self.assertEqual(RGBColor(1.0, 1.0, 1.0).to_hex(), "#ffffff")
        self.assertEqual(RGBColor(1.0, 0.5, 0.0).to_hex(), "#ff8000")

    def test_out_of_range_channel_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RGBColor(1.5, 0.0, 0.0)
        with self.assertRaises(ValueError):
            RGBColor(0.0, -0.1, 0.0)


if __name__ == "__main__":
    unittest.main()
