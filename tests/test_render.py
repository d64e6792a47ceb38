from datetime import datetime

import pytest

from pomodorotimer import render
from pomodorotimer.render import TerminalWriter


def test_compute_progress_floors_filled_cells():
    progress = render.compute_progress(3, 10, width=20)
    assert progress.filled == 6
    assert progress.percent == pytest.approx(0.3)
    assert progress.remaining == 7


def test_compute_progress_is_pure():
    assert render.compute_progress(17, 60) == render.compute_progress(17, 60)


def test_final_tick_fills_bar_exactly():
    for total in (1, 3, 7, 59, 60, 1500):
        progress = render.compute_progress(total, total)
        assert progress.percent == 1.0
        assert progress.filled == progress.width


def test_percent_is_clamped():
    progress = render.compute_progress(12, 10)
    assert progress.percent == 1.0
    assert progress.filled == render.BAR_WIDTH


def test_compute_progress_requires_positive_total():
    with pytest.raises(ValueError):
        render.compute_progress(0, 0)


def test_percent_label_rounds_half_up():
    assert render.percent_label(render.compute_progress(1, 8)) == 13
    assert render.percent_label(render.compute_progress(1, 3)) == 33
    assert render.percent_label(render.compute_progress(2, 3)) == 67


def test_remaining_minutes_rounds_up():
    assert render.remaining_minutes(0) == 0
    assert render.remaining_minutes(1) == 1
    assert render.remaining_minutes(60) == 1
    assert render.remaining_minutes(61) == 2


def test_render_line():
    assert render.render_line(render.compute_progress(0, 60)) == "[" + "░" * 20 + "] 0% - 1m remaining"
    assert render.render_line(render.compute_progress(30, 120)) == "[" + "█" * 5 + "░" * 15 + "] 25% - 2m remaining"
    assert render.render_line(render.compute_progress(60, 60)) == "[" + "█" * 20 + "] 100% - 0m remaining"


@pytest.mark.parametrize(
    "hour, minute, expected",
    [(0, 5, "12:05AM"), (9, 30, "9:30AM"), (12, 0, "12:00PM"), (13, 7, "1:07PM"), (23, 59, "11:59PM")],
)
def test_format_clock(hour, minute, expected):
    assert render.format_clock(datetime(2024, 1, 1, hour, minute)) == expected


def test_writer_updates_progress_in_place(stream, writer):
    writer.update("[###] 10%")
    writer.update("[##] 9%")
    assert stream.getvalue() == "\r[###] 10%\r[##] 9%  "
    writer.line("done")
    assert stream.getvalue().endswith("\ndone\n")
    assert stream.getvalue().count("\n") == 2


def test_writer_colors_only_when_enabled(stream):
    TerminalWriter(stream, color=True).line("ok", render.GREEN)
    TerminalWriter(stream, color=False).line("plain", render.GREEN)
    assert stream.getvalue() == f"{render.GREEN}ok{render.RESET}\nplain\n"


def test_writer_detects_non_tty(stream):
    assert TerminalWriter(stream).color is False
