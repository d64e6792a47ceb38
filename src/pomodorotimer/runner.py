"""Runs a full Pomodoro plan one interval at a time."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from . import render
from .scheduler import WORK, Interval, PomodoroPlan
from .timer import PAUSE_SECONDS, TICK_SECONDS, CancelToken, Clock, Notifier, TimerCancelled, run_interval

logger = logging.getLogger(__name__)

STOPPED_MESSAGE = "⏹️  Pomodoro timer stopped. Have a great day!"


@dataclass
class RunReport:
    completed: List[Interval] = field(default_factory=list)
    ticks: int = 0
    cancelled: bool = False


def summary(sessions: int) -> str:
    noun = "session" if sessions == 1 else "sessions"
    return f"🎉 {sessions} {noun} complete! Great work!"


def run_plan(
    plan: PomodoroPlan,
    *,
    clock: Clock,
    writer: render.TerminalWriter,
    notifier: Notifier,
    cancel: CancelToken,
    tick_seconds: float = TICK_SECONDS,
    pause_seconds: float = PAUSE_SECONDS,
) -> RunReport:
    """Run every interval of ``plan`` in order.

    Each interval finishes, notification included, before the next one
    starts. A cancelled interval stops the whole plan.
    """
    report = RunReport()
    total = plan.settings.sessions
    try:
        for interval in plan:
            if interval.kind == WORK:
                writer.line(f"=== Session {interval.session}/{total} ===", render.CYAN)
            report.ticks += run_interval(
                interval,
                clock=clock,
                writer=writer,
                notifier=notifier,
                cancel=cancel,
                tick_seconds=tick_seconds,
                pause_seconds=pause_seconds,
            )
            report.completed.append(interval)
    except TimerCancelled:
        report.cancelled = True
        writer.line()
        writer.line(STOPPED_MESSAGE)
        logger.debug("Run cancelled after %d interval(s)", len(report.completed))
        return report

    writer.line()
    writer.line(summary(total), render.CYAN)
    return report
