"""Wall-clock timing of code blocks, reported to a text stream."""

from __future__ import annotations

import inspect
import sys
import time
from enum import Enum
from typing import TextIO


class Unit(Enum):
    """Time units a timer can report in."""

    SECONDS = (" s", 1_000_000_000)
    MILLI = (" ms", 1_000_000)
    MICRO = (" μs", 1_000)
    NANO = (" ns", 1)

    def __init__(self, suffix: str, nanoseconds: int) -> None:
        self.suffix = suffix
        self.nanoseconds = nanoseconds


class ScopeTimer:
    """Measures time from creation and reports it when asked or on exit.

    The report is the message, the elapsed time with 15 significant
    digits and the unit suffix, written as one line.
    """

    def __init__(
        self,
        message: str = "",
        unit: Unit = Unit.NANO,
        stream: TextIO | None = None,
    ) -> None:
        if message and not message.endswith(" "):
            message += " "
        self.message = message
        self.unit = unit
        self.stream = stream
        self.start = time.perf_counter_ns()

    def elapsed(self) -> float:
        """Write the time since the timer started and return it in its unit."""
        end = time.perf_counter_ns()
        value = (end - self.start) / self.unit.nanoseconds
        out = self.stream if self.stream is not None else sys.stderr
        out.write(f"{self.message}{value:.15g}{self.unit.suffix}\n")
        out.flush()
        return value

    def __enter__(self) -> ScopeTimer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed()


def time_block(unit: Unit = Unit.NANO, stream: TextIO | None = None) -> ScopeTimer:
    """Return a timer labelled with the calling function's name and line."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is None:
            label = "[?:0] "
        else:
            label = f"[{caller.f_code.co_name}:{caller.f_lineno}] "
    finally:
        del frame, caller
    timer = ScopeTimer(unit=unit, stream=stream)
    timer.message = label
    return timer