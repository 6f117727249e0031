import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from objcreate.services.logger.interface import LoggingInterface

_COLORS = {
    "INFO": "\033[32m",   # green
    "WARN": "\033[33m",   # yellow
    "ERROR": "\033[31m",  # red
    "DEBUG": "\033[36m",  # cyan
}
_RESET = "\033[0m"


class PrettyLogger(LoggingInterface):
    """Colorized one-line-per-entry logger writing to stderr."""

    def __init__(self, level: str = "WARN", stream: TextIO | None = None) -> None:
        super().__init__(level)
        self._stream = stream

    def write(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        color = _COLORS.get(level, "")
        extra = "  " + " ".join(f"{k}={v}" for k, v in ctx.items()) if ctx else ""
        print(f"{color}{ts} [{level}]{_RESET} {msg}{extra}", file=self._stream or sys.stderr)
