from __future__ import annotations

import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator


class MetricsInterface(ABC):
    """Counters, gauges and histograms with optional string tags."""

    @abstractmethod
    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        ...

    @abstractmethod
    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None: ...

    @abstractmethod
    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None: ...

    @contextmanager
    def timed(self, name: str, tags: dict[str, str] | None = None) -> Iterator[None]:
        """Observe the wall-clock seconds spent in the block as a histogram sample."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.histogram(name, time.perf_counter() - start, tags)
