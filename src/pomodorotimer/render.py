"""Progress rendering for the terminal countdown.

Everything here except :class:`TerminalWriter` is a pure function of its
arguments, so progress lines can be checked without a terminal.
"""
from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, TextIO

BAR_WIDTH = 20
FILLED = "█"
EMPTY = "░"

RESET = "\x1b[0m"
CYAN = "\x1b[36m"
YELLOW = "\x1b[33m"
GREEN = "\x1b[32m"
CLEAR_LINE = "\x1b[K"


@dataclass(frozen=True)
class Progress:
    """One rendered state of an interval."""

    elapsed: int
    total: int
    percent: float
    filled: int
    width: int

    @property
    def remaining(self) -> int:
        return self.total - self.elapsed


def compute_progress(elapsed: int, total: int, width: int = BAR_WIDTH) -> Progress:
    if total <= 0:
        raise ValueError("total must be positive")
    percent = min(1.0, elapsed / total)
    # integer floor so the last tick fills the bar exactly
    filled = min(width, max(0, elapsed * width // total))
    return Progress(elapsed=elapsed, total=total, percent=percent, filled=filled, width=width)


def percent_label(progress: Progress) -> int:
    return math.floor(progress.percent * 100 + 0.5)


def remaining_minutes(remaining_seconds: int) -> int:
    return math.ceil(remaining_seconds / 60)


def render_bar(progress: Progress) -> str:
    return FILLED * progress.filled + EMPTY * (progress.width - progress.filled)


def render_line(progress: Progress) -> str:
    return f"[{render_bar(progress)}] {percent_label(progress)}% - {remaining_minutes(progress.remaining)}m remaining"


def format_clock(moment: datetime) -> str:
    """Format ``moment`` as ``H:MMAM`` on a 12-hour clock."""
    suffix = "PM" if moment.hour >= 12 else "AM"
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d}{suffix}"


class TerminalWriter:
    """Writes status lines and a single progress line updated in place."""

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color
        self._open = False
        self._width = 0

    def _paint(self, text: str, color: Optional[str]) -> str:
        if color and self.color:
            return f"{color}{text}{RESET}"
        return text

    def line(self, text: str = "", color: Optional[str] = None) -> None:
        self.finish()
        self.stream.write(self._paint(text, color) + "\n")
        self.stream.flush()

    def update(self, text: str) -> None:
        if self.color:
            self.stream.write("\r" + CLEAR_LINE + text)
        else:
            # pad over what is left of a longer previous line
            self.stream.write("\r" + text.ljust(self._width))
        self._width = max(self._width, len(text))
        self.stream.flush()
        self._open = True

    def finish(self) -> None:
        if self._open:
            self.stream.write("\n")
            self.stream.flush()
            self._open = False
            self._width = 0

    def bell(self) -> None:
        self.stream.write("\a")
        self.stream.flush()
