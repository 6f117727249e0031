from dataclasses import dataclass
from typing import Any

from objcreate.services.logger.interface import LoggingInterface


@dataclass
class LogEntry:
    level: str
    msg: str
    ctx: dict[str, Any]


class MemoryLogger(LoggingInterface):
    """In-memory logger that keeps entries for test assertions."""

    def __init__(self, level: str = "DEBUG") -> None:
        super().__init__(level)
        self.entries: list[LogEntry] = []

    def write(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        self.entries.append(LogEntry(level, msg, ctx))

    @property
    def messages(self) -> list[str]:
        return [e.msg for e in self.entries]

    def at_level(self, level: str) -> list[LogEntry]:
        return [e for e in self.entries if e.level == level]
