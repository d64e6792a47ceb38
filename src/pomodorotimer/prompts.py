"""Interactive collection of the session settings."""
from __future__ import annotations

from typing import Callable, TypeVar

from . import scheduler

T = TypeVar("T", int, float)

Ask = Callable[[str], str]
Say = Callable[[str], object]


class PromptCancelled(Exception):
    """The user interrupted a prompt."""


def ask_value(question: str, default: T, parse: Callable[[str], T], *, ask: Ask = input, say: Say = print) -> T:
    """Ask ``question`` until the answer parses. An empty answer means ``default``."""
    while True:
        try:
            answer = ask(f"{question} [{scheduler.format_minutes(default)}]: ")
        except (KeyboardInterrupt, EOFError):
            raise PromptCancelled() from None
        answer = answer.strip()
        if not answer:
            return default
        try:
            return parse(answer)
        except ValueError as exc:
            say(f"❌ {exc}")


def collect_plan(*, ask: Ask = input, say: Say = print) -> scheduler.SessionPlan:
    defaults = scheduler.DEFAULTS
    work = ask_value("Work minutes", defaults["work_minutes"], scheduler.parse_minutes, ask=ask, say=say)
    rest = ask_value("Break minutes", defaults["break_minutes"], scheduler.parse_minutes, ask=ask, say=say)
    sessions = ask_value("Number of sessions", defaults["sessions"], scheduler.parse_positive_int, ask=ask, say=say)
    return scheduler.SessionPlan(work_minutes=work, break_minutes=rest, sessions=sessions)
