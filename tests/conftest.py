"""Pytest configuration and fixtures for variable_store tests."""

from __future__ import annotations

from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from variable_store.domain.services import SortedVariableStore
from variable_store.infrastructure.config import Config, ObservabilityConfig, StoreConfig
from variable_store.infrastructure.logging import setup_logging
from variable_store.infrastructure.metrics import MetricsRegistry


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Keep debug log lines out of captured stdout."""
    setup_logging(level="WARNING", log_format="console")


@pytest.fixture
def store() -> Generator[SortedVariableStore, None, None]:
    """Provide a fresh store, destroyed after the test."""
    s = SortedVariableStore()
    yield s
    if not s.destroyed:
        s.destroy()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration with the default sizing policy."""
    return Config(
        store=StoreConfig(initial_capacity=4, growth_factor=2),
        observability=ObservabilityConfig(log_level="WARNING", metrics_enabled=False),
    )


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
