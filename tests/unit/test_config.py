"""Unit tests for configuration module."""

from __future__ import annotations

import pytest

from variable_store.infrastructure.config import (
    Config,
    ObservabilityConfig,
    StoreConfig,
    get_config,
)


@pytest.mark.unit
class TestConfig:
    """Tests for Config class."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = Config()

        assert config.store.initial_capacity == 4
        assert config.store.growth_factor == 2
        assert config.observability.log_format == "json"
        assert config.observability.metrics_enabled is False

    def test_custom_store_config(self) -> None:
        store = StoreConfig(initial_capacity=16, growth_factor=4)

        assert store.initial_capacity == 16
        assert store.growth_factor == 4

    def test_invalid_initial_capacity(self) -> None:
        with pytest.raises(ValueError):
            StoreConfig(initial_capacity=0)

    def test_invalid_growth_factor(self) -> None:
        with pytest.raises(ValueError):
            StoreConfig(growth_factor=1)

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError):
            ObservabilityConfig(log_level="TRACE")  # type: ignore

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VARIABLE_STORE_STORE__INITIAL_CAPACITY", "32")
        monkeypatch.setenv("VARIABLE_STORE_OBSERVABILITY__LOG_FORMAT", "console")

        config = Config()

        assert config.store.initial_capacity == 32
        assert config.observability.log_format == "console"


@pytest.mark.unit
class TestConfigSingleton:
    """Tests for get_config singleton."""

    def test_get_config_returns_same_instance(self) -> None:
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2
