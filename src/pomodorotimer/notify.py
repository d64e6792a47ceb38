"""Desktop notifications for finished intervals."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from plyer import notification as plyer_notification

from .render import TerminalWriter, YELLOW

logger = logging.getLogger(__name__)

APP_NAME = "Pomodoro"
FALLBACK_ALERT = "🔔 Time's up!"


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    sound: bool = True


class DesktopNotifier:
    """Sends notifications through plyer.

    A failing backend never interrupts the timer: the error is logged and a
    plain text alert is printed instead.
    """

    def __init__(self, writer: Optional[TerminalWriter] = None, app_name: str = APP_NAME, timeout: int = 10) -> None:
        self.writer = writer or TerminalWriter()
        self.app_name = app_name
        self.timeout = timeout

    def _deliver(self, notification: Notification) -> None:
        plyer_notification.notify(
            title=notification.title,
            message=notification.message,
            app_name=self.app_name,
            timeout=self.timeout,
        )

    def send(self, notification: Notification) -> bool:
        if notification.sound:
            self.writer.bell()
        try:
            self._deliver(notification)
        except Exception:
            logger.debug("Desktop notification failed", exc_info=True)
            self.writer.line(FALLBACK_ALERT, YELLOW)
            return False
        return True
