"""Unit tests for store metrics."""

from __future__ import annotations

import pytest

from variable_store.domain.services import SortedVariableStore
from variable_store.domain.value_objects import RamValue
from variable_store.infrastructure.metrics import MetricsRegistry


def sample(metrics: MetricsRegistry, name: str, **labels: str) -> float | None:
    return metrics.registry.get_sample_value(name, labels or None)


@pytest.mark.unit
class TestStoreMetrics:
    """Tests for metrics recorded by the store."""

    def test_initial_occupancy(self, metrics_registry: MetricsRegistry) -> None:
        SortedVariableStore(metrics=metrics_registry)

        assert sample(metrics_registry, "variable_store_size") == 0
        assert sample(metrics_registry, "variable_store_capacity") == 4

    def test_reads_and_writes(self, metrics_registry: MetricsRegistry) -> None:
        store = SortedVariableStore(metrics=metrics_registry)
        store.write_by_name(RamValue.of_int(1), "x")
        store.read_by_name("x")
        store.read_by_name("missing")
        store.read_by_address(0)
        store.write_by_address(RamValue.of_int(2), 99)

        assert sample(metrics_registry, "variable_store_writes_total", by="name", result="ok") == 1
        assert (
            sample(metrics_registry, "variable_store_writes_total", by="address", result="rejected")
            == 1
        )
        assert sample(metrics_registry, "variable_store_reads_total", by="name", result="hit") == 1
        assert sample(metrics_registry, "variable_store_reads_total", by="name", result="miss") == 1
        assert (
            sample(metrics_registry, "variable_store_reads_total", by="address", result="hit") == 1
        )
        assert sample(metrics_registry, "variable_store_size") == 1

    def test_growth(self, metrics_registry: MetricsRegistry) -> None:
        store = SortedVariableStore(metrics=metrics_registry)
        for name in ["a", "b", "c", "d", "e"]:
            store.write_by_name(RamValue.of_int(0), name)

        assert sample(metrics_registry, "variable_store_growths_total") == 1
        assert sample(metrics_registry, "variable_store_capacity") == 8
        assert sample(metrics_registry, "variable_store_size") == 5
