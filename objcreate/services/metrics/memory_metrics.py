from __future__ import annotations

from objcreate.services.metrics.interface import MetricsInterface


def series_key(name: str, tags: dict[str, str] | None) -> str:
    """``name`` or ``name{k=v,...}`` with tags sorted by key."""
    if not tags:
        return name
    return name + "{" + ",".join(f"{k}={tags[k]}" for k in sorted(tags)) + "}"


class MemoryMetrics(MetricsInterface):
    """In-memory metrics for asserting on recorded values in tests.

    Untagged totals live under the bare metric name; tagged samples are also
    recorded under their ``name{k=v}`` series key.
    """

    def __init__(self) -> None:
        self.counters: dict[str, float] = {}
        self.gauges: dict[str, float] = {}
        self.histograms: dict[str, list[float]] = {}

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        for key in self._keys(name, tags):
            self.counters[key] = self.counters.get(key, 0) + value

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        for key in self._keys(name, tags):
            self.gauges[key] = value

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        for key in self._keys(name, tags):
            self.histograms.setdefault(key, []).append(value)

    @staticmethod
    def _keys(name: str, tags: dict[str, str] | None) -> tuple[str, ...]:
        return (name, series_key(name, tags)) if tags else (name,)
