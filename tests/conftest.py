import io
from datetime import datetime

import pytest

from pomodorotimer.render import TerminalWriter


class FakeClock:
    """Clock that never waits and can cancel on the Nth sleep."""

    def __init__(self, cancel_on_sleep=None, start=datetime(2024, 1, 1, 9, 5)):
        self.cancel_on_sleep = cancel_on_sleep
        self.start = start
        self.sleeps = []

    def now(self):
        return self.start

    def sleep(self, seconds, cancel):
        self.sleeps.append(seconds)
        if self.cancel_on_sleep is not None and len(self.sleeps) >= self.cancel_on_sleep:
            cancel.cancel()
        return cancel.cancelled


class FakeNotifier:
    def __init__(self, ok=True):
        self.ok = ok
        self.sent = []

    def send(self, notification):
        self.sent.append(notification)
        return self.ok


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def writer(stream):
    return TerminalWriter(stream, color=False)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def make_clock():
    return FakeClock
