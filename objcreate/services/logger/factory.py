from __future__ import annotations

from objcreate.services.logger.interface import LoggingInterface, level_rank
from objcreate.services.logger.memory_logger import MemoryLogger
from objcreate.services.logger.pretty_logger import PrettyLogger


class LoggerFactory:
    """Creates loggers by implementation name and caches one per name."""

    _registry: dict[str, type[LoggingInterface]] = {
        "pretty": PrettyLogger,
        "memory": MemoryLogger,
    }

    def __init__(self, default_impl: str = "pretty", level: str = "WARN") -> None:
        self._check(default_impl)
        level_rank(level)
        self._default_impl = default_impl
        self._level = level
        self._instances: dict[str, LoggingInterface] = {}

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        """Return the logger for *impl_name*, creating it on first use."""
        name = impl_name or self._default_impl
        if name not in self._instances:
            self._instances[name] = self._check(name)(level=self._level)
        return self._instances[name]

    def _check(self, name: str) -> type[LoggingInterface]:
        cls = self._registry.get(name)
        if cls is None:
            raise ValueError(
                f"Unknown logger implementation: '{name}' "
                f"(available: {', '.join(self._registry)})"
            )
        return cls
