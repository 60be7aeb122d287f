"""Filling a sequence with consecutive integers and spot-checking it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

DEFAULT_START = -6
TEST_SIZE = 1_000_000_000
NUM_CHECK_VALUES = 500


def iota(count: int, start: int = DEFAULT_START) -> list[int]:
    """Return count consecutive integers beginning at start."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return list(range(start, start + count))


def check_iota(
    values: Sequence[int], start: int = DEFAULT_START, num_checks: int = NUM_CHECK_VALUES
) -> list[int]:
    """Spot-check evenly spaced positions and return the positions checked.

    Checking begins at position 6 and steps by len(values) // num_checks.
    Raises ValueError at the first position whose value is not start + position.
    """
    step = len(values) // num_checks if num_checks > 0 else 0
    checked: list[int] = []
    position = 6
    while position < len(values) and len(checked) < num_checks:
        expected = start + position
        if values[position] != expected:
            raise ValueError(
                f"Values do not match for position {position}: "
                f"{values[position]} != {expected}"
            )
        checked.append(position)
        position += step
    return checked


def main(argv: list[str] | None = None) -> int:
    """Fill a sequence of the requested size and verify it."""
    parser = argparse.ArgumentParser(
        prog="datahash-iota", description="Fill and spot-check a sequence of integers."
    )
    parser.add_argument("count", nargs="?", type=int, default=TEST_SIZE)
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("count must not be negative")
    values = iota(args.count)
    try:
        check_iota(values)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    return 0