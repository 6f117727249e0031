"""Prometheus metrics implementation using prometheus_client."""

from __future__ import annotations

from objcreate.config.settings import CreatorConfig
from objcreate.services.metrics.interface import MetricsInterface


def _label_names(tags: dict[str, str] | None) -> list[str]:
    return sorted(tags.keys()) if tags else []


class PrometheusMetrics(MetricsInterface):
    """Metrics backend backed by prometheus_client collectors.

    Config:
        OBJCREATE_PROMETHEUS_PORT - Port to expose /metrics on. 0 (the default)
                                    skips the HTTP server, for processes that
                                    already expose a registry another way.

    Dots and dashes in metric names become underscores, as Prometheus requires.
    Collectors are registered on *registry* when given, else the global one.
    """

    def __init__(self, config: CreatorConfig, registry: object | None = None) -> None:
        import prometheus_client as prom

        self._prom = prom
        self._registry = registry if registry is not None else prom.REGISTRY
        self._collectors: dict[tuple[str, str, tuple[str, ...]], object] = {}

        port = config.prometheus_port
        if port:
            prom.start_http_server(port, registry=self._registry)

    @staticmethod
    def _sanitize(name: str) -> str:
        return name.replace("-", "_").replace(".", "_")

    def _collector(self, kind: str, name: str, tags: dict[str, str] | None):
        safe = self._sanitize(name)
        label_names = tuple(_label_names(tags))
        key = (kind, safe, label_names)
        if key not in self._collectors:
            factory = getattr(self._prom, kind)
            self._collectors[key] = factory(safe, safe, label_names, registry=self._registry)
        collector = self._collectors[key]
        if label_names:
            return collector.labels(*[tags[n] for n in label_names])
        return collector

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        self._collector("Counter", name, tags).inc(value)

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self._collector("Gauge", name, tags).set(value)

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self._collector("Histogram", name, tags).observe(value)
