"""Prometheus metrics for the variable store."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all variable store metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Read metrics
        self.reads_total = Counter(
            "variable_store_reads_total",
            "Total number of cell reads",
            ["by", "result"],  # by: name, address; result: hit, miss
            registry=self._registry,
        )

        # Write metrics
        self.writes_total = Counter(
            "variable_store_writes_total",
            "Total number of cell writes",
            ["by", "result"],  # by: name, address; result: ok, rejected
            registry=self._registry,
        )

        # Capacity metrics
        self.growths_total = Counter(
            "variable_store_growths_total",
            "Total number of capacity growths",
            registry=self._registry,
        )

        self.size = Gauge(
            "variable_store_size",
            "Number of variables currently stored",
            registry=self._registry,
        )

        self.capacity = Gauge(
            "variable_store_capacity",
            "Number of cells currently allocated",
            registry=self._registry,
        )

        self.info = Info(
            "variable_store",
            "Variable store information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying collector registry."""
        return self._registry

    def record_read(self, by: str, hit: bool) -> None:
        """Count a read by name or by address."""
        self.reads_total.labels(by=by, result="hit" if hit else "miss").inc()

    def record_write(self, by: str, accepted: bool) -> None:
        """Count a write by name or by address."""
        self.writes_total.labels(by=by, result="ok" if accepted else "rejected").inc()

    def record_growth(self, capacity: int) -> None:
        """Count a capacity growth and publish the new capacity."""
        self.growths_total.inc()
        self.capacity.set(capacity)

    def update_occupancy(self, size: int, capacity: int) -> None:
        """Publish the current size and capacity."""
        self.size.set(size)
        self.capacity.set(capacity)


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(
    port: int | None = None, registry: CollectorRegistry | None = None
) -> MetricsRegistry:
    """
    Set up the metrics registry, optionally serving it over HTTP.

    Args:
        port: Port for the metrics HTTP server (no server when None)
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from variable_store import __version__
    _metrics.info.info({
        "version": __version__,
    })

    if port is not None:
        start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
