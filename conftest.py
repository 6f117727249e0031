"""Root-level pytest fixtures: an ObjectCreator wired to in-memory services."""

from __future__ import annotations

import pytest

from objcreate.creation.creator import ObjectCreator
from objcreate.services.logger.memory_logger import MemoryLogger
from objcreate.services.metrics.memory_metrics import MemoryMetrics


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def memory_metrics() -> MemoryMetrics:
    return MemoryMetrics()


@pytest.fixture
def creator(memory_logger: MemoryLogger, memory_metrics: MemoryMetrics) -> ObjectCreator:
    """Fresh creator per test, so every test starts from an empty cache."""
    return ObjectCreator(logger=memory_logger, metrics=memory_metrics)
