import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    title: str
    text: str
    type: str = "error"


class Notifier:
    """Collects user-facing notifications; a UI can subclass and render them."""

    def __init__(self):
        self.history: List[Notification] = []

    def notify(self, title: str, text: str, type: str = "error") -> Notification:
        notification = Notification(title=title, text=text, type=type)
        self.history.append(notification)
        level = logging.WARNING if type == "error" else logging.INFO
        logger.log(level, f"{title or 'Notice'}: {text}")
        return notification

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None


class Navigator:
    """Records route changes requested by the client layer."""

    def __init__(self, current: str = "/"):
        self.current = current
        self.history: List[str] = [current]

    def push(self, target: str):
        logger.debug(f"Navigating to {target}")
        self.current = target
        self.history.append(target)
