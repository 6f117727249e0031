from abc import ABC, abstractmethod
from typing import Any

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


def level_rank(level: str) -> int:
    """Position of *level* in LEVELS; raises ValueError for unknown names."""
    try:
        return LEVELS.index(level.upper())
    except ValueError:
        raise ValueError(
            f"Unknown log level: '{level}' (available: {', '.join(LEVELS)})"
        ) from None


class LoggingInterface(ABC):
    """Structured logging: a message plus keyword context.

    Entries below the logger's minimum level are dropped before they reach
    the backend.
    """

    def __init__(self, level: str = "DEBUG") -> None:
        self._min_rank = level_rank(level)

    def info(self, msg: str, **ctx: Any) -> None:
        self._emit("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self._emit("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self._emit("ERROR", msg, ctx)

    def debug(self, msg: str, **ctx: Any) -> None:
        self._emit("DEBUG", msg, ctx)

    def enabled(self, level: str) -> bool:
        return level_rank(level) >= self._min_rank

    def _emit(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        if LEVELS.index(level) >= self._min_rank:
            self.write(level, msg, ctx)

    @abstractmethod
    def write(self, level: str, msg: str, ctx: dict[str, Any]) -> None: ...
