"""Countdown state machine for a single interval.

An :class:`IntervalTimer` moves ``IDLE -> RUNNING -> COMPLETED``. Each call to
:meth:`IntervalTimer.tick` yields the progress for the current second and
then counts down, so an interval of ``n`` seconds produces ``n + 1`` progress
states, from 0% to 100%. Time only enters through a :class:`Clock`, which lets
tests drive ticks without waiting.
"""
from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

from . import render
from .notify import Notification
from .scheduler import Interval, format_minutes

logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0
PAUSE_SECONDS = 1.0


class TimerCancelled(Exception):
    """Raised when the cancel token fires while an interval is running."""


class CancelToken:
    """Cancellation flag checked by the timer loop at every tick boundary."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class Clock(Protocol):
    def now(self) -> datetime:
        ...

    def sleep(self, seconds: float, cancel: CancelToken) -> bool:
        """Block for ``seconds``. Return True if ``cancel`` fired meanwhile."""
        ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()

    def sleep(self, seconds: float, cancel: CancelToken) -> bool:
        try:
            time.sleep(seconds)
        except KeyboardInterrupt:
            cancel.cancel()
        return cancel.cancelled


class Notifier(Protocol):
    def send(self, notification: Notification) -> bool:
        ...


class TimerStatus(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass
class IntervalState:
    total_seconds: int
    remaining_seconds: int
    started_at: Optional[datetime] = None

    @property
    def elapsed_seconds(self) -> int:
        return self.total_seconds - self.remaining_seconds


class IntervalTimer:
    def __init__(self, total_seconds: int, width: int = render.BAR_WIDTH) -> None:
        if total_seconds <= 0:
            raise ValueError("total_seconds must be positive")
        self.state = IntervalState(total_seconds=total_seconds, remaining_seconds=total_seconds)
        self.status = TimerStatus.IDLE
        self.width = width

    def start(self, now: datetime) -> None:
        if self.status is not TimerStatus.IDLE:
            raise RuntimeError(f"cannot start a {self.status.value} timer")
        self.state.started_at = now
        self.status = TimerStatus.RUNNING

    def progress(self) -> render.Progress:
        return render.compute_progress(self.state.elapsed_seconds, self.state.total_seconds, self.width)

    def tick(self) -> render.Progress:
        if self.status is not TimerStatus.RUNNING:
            raise RuntimeError(f"cannot tick a {self.status.value} timer")
        snapshot = self.progress()
        if self.state.remaining_seconds == 0:
            self.status = TimerStatus.COMPLETED
        else:
            self.state.remaining_seconds -= 1
        return snapshot

    @property
    def done(self) -> bool:
        return self.status is TimerStatus.COMPLETED


def run_interval(
    interval: Interval,
    *,
    clock: Clock,
    writer: render.TerminalWriter,
    notifier: Notifier,
    cancel: CancelToken,
    tick_seconds: float = TICK_SECONDS,
    pause_seconds: float = PAUSE_SECONDS,
    width: int = render.BAR_WIDTH,
) -> int:
    """Count ``interval`` down to zero and announce it. Returns the tick count.

    Raises:
        TimerCancelled: if ``cancel`` fires before the interval and its
            trailing pause are over.
    """
    timer = IntervalTimer(interval.duration_seconds, width)
    timer.start(clock.now())
    logger.debug("Starting %s interval of %ss", interval.label, interval.duration_seconds)

    writer.line()
    writer.line(f"⏳ {interval.label} session started ({format_minutes(interval.minutes)} minutes)")
    writer.line(f"Started at: {render.format_clock(timer.state.started_at)}")

    ticks = 0
    while not timer.done:
        if cancel.cancelled or clock.sleep(tick_seconds, cancel):
            writer.finish()
            logger.debug("%s interval cancelled after %d tick(s)", interval.label, ticks)
            raise TimerCancelled(interval.label)
        writer.update(render.render_line(timer.tick()))
        ticks += 1

    writer.line(f"✓ {interval.label} Complete!", render.GREEN)
    notifier.send(Notification(title="Pomodoro 🍅", message=f"{interval.label} finished!", sound=True))
    logger.debug("%s interval finished after %d tick(s)", interval.label, ticks)

    if clock.sleep(pause_seconds, cancel):
        raise TimerCancelled(interval.label)
    return ticks
