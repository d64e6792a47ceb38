"""Pomodoro schedule helpers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List

WORK = "work"
BREAK = "break"

DEFAULTS = {
    "work_minutes": 25,
    "break_minutes": 5,
    "sessions": 4,
}


def parse_positive_number(text: str) -> float:
    """Parse a finite number greater than zero."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise ValueError(f"{text!r} is not a number") from None
    if not math.isfinite(value):
        raise ValueError(f"{text!r} is not a number")
    if value <= 0:
        raise ValueError(f"{text!r} must be greater than zero")
    return value


def parse_positive_int(text: str) -> int:
    """Parse a positive whole number. ``"4.0"`` is accepted, ``"4.5"`` is not."""
    value = parse_positive_number(text)
    if not value.is_integer():
        raise ValueError(f"{text!r} must be a whole number")
    return int(value)


def parse_minutes(text: str) -> float:
    """Parse a positive number of minutes that still fits in a float once converted to seconds."""
    value = parse_positive_number(text)
    if not math.isfinite(value * 60):
        raise ValueError(f"{text!r} minutes is too long")
    return value


def minutes_to_seconds(minutes: float) -> int:
    return max(1, round(minutes * 60))


@dataclass(frozen=True)
class SessionPlan:
    """The three numbers a run is configured with."""

    work_minutes: float = DEFAULTS["work_minutes"]
    break_minutes: float = DEFAULTS["break_minutes"]
    sessions: int = DEFAULTS["sessions"]

    def __post_init__(self) -> None:
        if isinstance(self.sessions, bool) or not isinstance(self.sessions, int):
            raise ValueError("sessions must be a whole number")
        if self.sessions < 1:
            raise ValueError("sessions must be at least 1")
        if min(self.work_minutes, self.break_minutes) <= 0:
            raise ValueError("all durations must be positive")
        if not all(math.isfinite(minutes * 60) for minutes in (self.work_minutes, self.break_minutes)):
            raise ValueError("durations are too long")


@dataclass(frozen=True)
class Interval:
    """Represents one work or break interval."""

    kind: str
    label: str
    duration_seconds: int
    session: int

    @property
    def minutes(self) -> float:
        return self.duration_seconds / 60


@dataclass
class PomodoroPlan:
    """Holds a full Pomodoro schedule."""

    settings: SessionPlan
    intervals: List[Interval]

    @property
    def total_seconds(self) -> int:
        return sum(interval.duration_seconds for interval in self.intervals)

    @property
    def work_count(self) -> int:
        return sum(1 for interval in self.intervals if interval.kind == WORK)

    @property
    def break_count(self) -> int:
        return sum(1 for interval in self.intervals if interval.kind == BREAK)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)


def expand(settings: SessionPlan) -> PomodoroPlan:
    """Expand ``settings`` into alternating work and break intervals.

    Every session gets a work interval. A break follows each work interval
    except the last one, so a plan of N sessions has N - 1 breaks.
    """
    work_seconds = minutes_to_seconds(settings.work_minutes)
    break_seconds = minutes_to_seconds(settings.break_minutes)

    intervals: List[Interval] = []
    for index in range(1, settings.sessions + 1):
        intervals.append(Interval(kind=WORK, label="Work", duration_seconds=work_seconds, session=index))
        if index < settings.sessions:
            intervals.append(Interval(kind=BREAK, label="Break", duration_seconds=break_seconds, session=index))

    return PomodoroPlan(settings, intervals)


def build_plan(
    *,
    work_minutes: float = DEFAULTS["work_minutes"],
    break_minutes: float = DEFAULTS["break_minutes"],
    sessions: int = DEFAULTS["sessions"],
) -> PomodoroPlan:
    """Create a Pomodoro plan with the requested durations.

    Args:
        work_minutes: Length of each work session.
        break_minutes: Length of the breaks between work sessions.
        sessions: Number of work sessions.

    Raises:
        ValueError: if a duration is not positive or ``sessions`` is below 1.
    """
    return expand(SessionPlan(work_minutes=work_minutes, break_minutes=break_minutes, sessions=sessions))


def format_minutes(minutes: float) -> str:
    if float(minutes).is_integer():
        return f"{int(minutes)}"
    return f"{minutes:g}"


def describe(plan: PomodoroPlan) -> List[str]:
    lines = [f"- {item.label} ({item.session}): {format_minutes(item.minutes)} minute(s)" for item in plan]
    lines.append(f"Total: {format_minutes(plan.total_seconds / 60)} minute(s)")
    return lines
