"""CLI entrypoint for random-color-ev."""

from __future__ import annotations

import argparse
from importlib import metadata
from typing import Sequence

from .app import RandomColorApp
from .config import ensure_config_dir


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="random-color-ev", description="Three swipeable pages of random color"
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Ensure configuration exists, handle CLI flags, and run the TUI."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version:
        try:
            version = metadata.version("random-color-ev")
        except metadata.PackageNotFoundError:
            version = "0.0.0"
        print(f"random-color-ev {version}")
        return

    ensure_config_dir()
    app = RandomColorApp()
    app.run()


if __name__ == "__main__":
    main()
