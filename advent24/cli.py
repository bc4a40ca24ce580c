"""Command line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

GREETING = "Hello, Advent of Code!"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="advent24", description="Puzzle solutions for Advent of Code 2024."
    )
    parser.parse_args(argv)
    print(GREETING)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())