"""
Console alert channel.

Stands in for a pager or messaging integration: alerts are printed with rich
and recorded as structured log events.
"""

import structlog
from rich.console import Console
from rich.text import Text


class ConsoleAlertService:
    """SendAlertService that prints alerts to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)
        self.sent: list[str] = []
        self.logger = structlog.get_logger(__name__, component="console_alert")

    def send(self, message: str) -> None:
        self.console.print(Text.assemble(("ALERT ", "bold red"), message))
        self.sent.append(message)
        self.logger.warning("alert_sent", message=message)
