import time
from unittest.mock import patch

import pytest

from objcreate.config.settings import CreatorConfig
from objcreate.services.metrics.memory_metrics import MemoryMetrics, series_key
from objcreate.services.metrics.noop_metrics import NoopMetrics


def test_counter_increments():
    m = MemoryMetrics()
    m.counter("builds")
    m.counter("builds")
    m.counter("builds", value=3)
    assert m.counters["builds"] == 5


def test_tagged_counter_keeps_total_and_series():
    m = MemoryMetrics()
    m.counter("failures", tags={"reason": "a"})
    m.counter("failures", tags={"reason": "b"})
    m.counter("failures", tags={"reason": "a"})
    assert m.counters["failures"] == 3
    assert m.counters["failures{reason=a}"] == 2
    assert m.counters["failures{reason=b}"] == 1


def test_gauge_sets_value():
    m = MemoryMetrics()
    m.gauge("cached_types", 1)
    m.gauge("cached_types", 4)
    assert m.gauges["cached_types"] == 4


def test_histogram_records_values():
    m = MemoryMetrics()
    m.histogram("latency", 10.0)
    m.histogram("latency", 20.0)
    assert m.histograms["latency"] == [10.0, 20.0]


def test_series_key_sorts_tags():
    assert series_key("m", None) == "m"
    assert series_key("m", {"b": "2", "a": "1"}) == "m{a=1,b=2}"


def test_timed_observes_elapsed_seconds():
    m = MemoryMetrics()
    with patch("objcreate.services.metrics.interface.time") as mock_time:
        mock_time.perf_counter.side_effect = [10.0, 10.25]
        with m.timed("build_seconds"):
            pass
    assert m.histograms["build_seconds"] == [0.25]


def test_timed_records_even_when_block_raises():
    m = MemoryMetrics()
    with pytest.raises(RuntimeError):
        with m.timed("build_seconds"):
            raise RuntimeError("boom")
    assert len(m.histograms["build_seconds"]) == 1


def test_noop_metrics_accepts_everything():
    m = NoopMetrics()
    m.counter("a", tags={"x": "y"})
    m.gauge("b", 1.0)
    m.histogram("c", 2.0)
    with m.timed("d"):
        time.sleep(0)


def test_prometheus_metrics_uses_given_registry():
    prom = pytest.importorskip("prometheus_client")
    from objcreate.services.metrics.prometheus_metrics import PrometheusMetrics

    registry = prom.CollectorRegistry()
    m = PrometheusMetrics(CreatorConfig(overrides={"OBJCREATE_PROMETHEUS_PORT": "0"}), registry)
    m.counter("object_creator.table_builds")
    m.counter("object_creator.resolution_failures", tags={"reason": "AmbiguousMatchError"})
    m.gauge("object_creator.cached_types", 3)
    m.histogram("object_creator.table_build_seconds", 0.5)

    assert registry.get_sample_value("object_creator_table_builds_total") == 1
    assert registry.get_sample_value(
        "object_creator_resolution_failures_total", {"reason": "AmbiguousMatchError"}
    ) == 1
    assert registry.get_sample_value("object_creator_cached_types") == 3
    assert registry.get_sample_value("object_creator_table_build_seconds_count") == 1
