"""Terminal telemetry: progress, warnings and errors on stderr."""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

from clean_code_conventions.domain.constants import TOOL_NAME

logger = logging.getLogger(__name__)


class ProjectTelemetry:
    """TelemetryPort implementation backed by a rich Console."""

    def __init__(self, name: str = TOOL_NAME, color: str = "cyan", console: Optional[Console] = None) -> None:
        self.name = name
        self.color = color
        self.console = console or Console(stderr=True)
        self.quiet = False

    def handshake(self) -> None:
        if not self.quiet:
            self.console.print(f"[bold {self.color}]{escape('[' + self.name + ']')}[/] Checking member conventions")

    def step(self, message: str) -> None:
        logger.debug(message)
        if not self.quiet:
            self.console.print(f"[{self.color}]>[/] {escape(message)}")

    def warning(self, message: str) -> None:
        logger.warning(message)
        self.console.print(f"[yellow]! {escape(message)}[/]")

    def error(self, message: str) -> None:
        logger.error(message)
        self.console.print(f"[bold red]x {escape(message)}[/]")
