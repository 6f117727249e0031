from objcreate.services.metrics.interface import MetricsInterface


class NoopMetrics(MetricsInterface):
    """Drops every sample. The creator's default when no backend is configured."""

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        pass

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        pass

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        pass
