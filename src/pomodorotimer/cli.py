"""Command line interface for the Pomodoro timer."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from . import prompts, render, runner, scheduler
from .notify import DesktopNotifier
from .timer import PAUSE_SECONDS, TICK_SECONDS, CancelToken, SystemClock

logger = logging.getLogger(__name__)

EPILOG = """examples:
  pomodoro 25 5 4    25min work, 5min break, 4 sessions
  pomodoro 50 10 2   50min work, 10min break, 2 sessions
  pomodoro           defaults: 25min work, 5min break, 4 sessions
  pomodoro -i        ask for each value interactively
"""


def _argument_type(parse, name):
    def convert(text: str):
        try:
            return parse(text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid {name}: {exc}") from None

    convert.__name__ = name
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomodoro",
        description="🍅 Run a Pomodoro timer in your terminal.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "work_minutes",
        nargs="?",
        type=_argument_type(scheduler.parse_minutes, "work minutes"),
        help=f"minutes per work session (default: {scheduler.DEFAULTS['work_minutes']})",
    )
    parser.add_argument(
        "break_minutes",
        nargs="?",
        type=_argument_type(scheduler.parse_minutes, "break minutes"),
        help=f"minutes per break (default: {scheduler.DEFAULTS['break_minutes']})",
    )
    parser.add_argument(
        "sessions",
        nargs="?",
        type=_argument_type(scheduler.parse_positive_int, "session count"),
        help=f"number of work sessions (default: {scheduler.DEFAULTS['sessions']})",
    )
    parser.add_argument("-i", "--interactive", action="store_true", help="prompt for each value instead of using arguments")
    parser.add_argument("--fast", action="store_true", help="treat one real second as one timer minute (handy for demos)")
    parser.add_argument("--dry-run", action="store_true", help="show the schedule without running timers")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    return parser


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(list(argv))
    given = [name for name in scheduler.DEFAULTS if getattr(args, name) is not None]
    if args.interactive and given:
        parser.error("positional values cannot be combined with --interactive")
    for name in scheduler.DEFAULTS:
        if getattr(args, name) is None:
            setattr(args, name, scheduler.DEFAULTS[name])
    return args


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def print_banner(writer: render.TerminalWriter, settings: scheduler.SessionPlan) -> None:
    work = scheduler.format_minutes(settings.work_minutes)
    rest = scheduler.format_minutes(settings.break_minutes)
    writer.line("🍅 Pomodoro Timer Starting", render.CYAN)
    writer.line(f"Work: {work}min | Break: {rest}min | Sessions: {settings.sessions}")
    writer.line("Press Ctrl+C to stop at any time")


def run(argv: Iterable[str], writer: render.TerminalWriter) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if args.interactive:
        try:
            settings = prompts.collect_plan()
        except prompts.PromptCancelled:
            writer.line()
            writer.line("Cancelled.")
            return 0
    else:
        settings = scheduler.SessionPlan(
            work_minutes=args.work_minutes,
            break_minutes=args.break_minutes,
            sessions=args.sessions,
        )

    plan = scheduler.expand(settings)
    logger.debug("Planned %d interval(s), %ss in total", len(plan), plan.total_seconds)
    print_banner(writer, settings)

    if args.dry_run:
        writer.line()
        writer.line("Planned intervals:")
        for line in scheduler.describe(plan):
            writer.line(line)
        return 0

    runner.run_plan(
        plan,
        clock=SystemClock(),
        writer=writer,
        notifier=DesktopNotifier(writer),
        cancel=CancelToken(),
        tick_seconds=TICK_SECONDS / 60 if args.fast else TICK_SECONDS,
        pause_seconds=PAUSE_SECONDS,
    )
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    writer = render.TerminalWriter()
    try:
        return run(sys.argv[1:] if argv is None else list(argv), writer)
    except KeyboardInterrupt:
        # Ctrl+C outside a timer wait, e.g. while parsing or printing
        writer.line()
        writer.line(runner.STOPPED_MESSAGE)
        return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
