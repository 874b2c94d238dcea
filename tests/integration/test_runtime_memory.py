"""Integration tests for the runtime memory facade."""

from __future__ import annotations

import io
from typing import Generator

import pytest

from variable_store.application import RuntimeMemory
from variable_store.domain.value_objects import RamValue, ValueType
from variable_store.infrastructure.config import Config, ObservabilityConfig, StoreConfig
from variable_store.infrastructure.metrics import MetricsRegistry
from variable_store.ports.inbound import (
    InvalidAddressError,
    NameNotDefinedError,
    StoreDestroyedError,
)


@pytest.fixture
def memory(test_config: Config) -> Generator[RuntimeMemory, None, None]:
    m = RuntimeMemory(config=test_config)
    yield m
    m.close()


@pytest.mark.integration
class TestRuntimeMemory:
    """End-to-end assignment and lookup through the facade."""

    def test_program_run(self, memory: RuntimeMemory) -> None:
        """Simulate the variable traffic of a short program."""
        memory.assign("x", 123)
        memory.assign("y", 2.5)
        memory.assign("name", "apple")
        memory.assign("flag", True)
        memory.assign("nothing", None)
        memory.assign("x", memory.lookup("x").payload + 1)

        assert memory.lookup("x") == RamValue.of_int(124)
        assert memory.lookup("y").value_type == ValueType.REAL
        assert memory.lookup("flag").as_bool() is True
        assert memory.lookup("nothing").is_none()
        assert memory.store.size == 5
        assert memory.store.capacity == 8
        assert list(memory.snapshot()) == ["flag", "name", "nothing", "x", "y"]

    def test_assign_returns_address(self, memory: RuntimeMemory) -> None:
        assert memory.assign("b", 1) == 0
        assert memory.assign("a", 2) == 1
        assert memory.assign("b", 3) == 0
        assert memory.address_of("a") == 1

    def test_undefined_name(self, memory: RuntimeMemory) -> None:
        with pytest.raises(NameNotDefinedError) as exc_info:
            memory.lookup("ghost")

        assert exc_info.value.name == "ghost"
        assert str(exc_info.value) == "name 'ghost' is not defined"
        assert isinstance(exc_info.value, KeyError)

        with pytest.raises(NameNotDefinedError):
            memory.address_of("ghost")

    def test_lookup_address(self, memory: RuntimeMemory) -> None:
        memory.assign("a", "text")
        assert memory.lookup_address(0) == RamValue.of_str("text")

        with pytest.raises(InvalidAddressError) as exc_info:
            memory.lookup_address(1)
        assert isinstance(exc_info.value, IndexError)
        assert exc_info.value.limit == 1

    def test_store_at(self, memory: RuntimeMemory) -> None:
        memory.assign("a", 1)
        memory.store_at(0, "replaced")
        assert memory.lookup("a") == RamValue.of_str("replaced")

        with pytest.raises(InvalidAddressError):
            memory.store_at(4, 0)

    def test_snapshot_values_are_copies(self, memory: RuntimeMemory) -> None:
        memory.assign("s", "apple")
        snapshot = memory.snapshot()
        snapshot["s"].payload = "banana"

        assert memory.lookup("s") == RamValue.of_str("apple")

    def test_is_defined(self, memory: RuntimeMemory) -> None:
        assert memory.is_defined("x") is False
        memory.assign("x", 0)
        assert memory.is_defined("x") is True

    def test_dumps(self, memory: RuntimeMemory) -> None:
        memory.assign("z", 1)
        memory.assign("a", "s")

        out = io.StringIO()
        memory.dump(out)
        memory.dump_map(out)

        text = out.getvalue()
        assert " a: str, 's'\n z: int, 1\n" in text
        assert "**MEMORY MAP PRINT**\n a: 1\n z: 0\n" in text

    def test_close(self, test_config: Config) -> None:
        with RuntimeMemory(config=test_config) as memory:
            memory.assign("x", 1)

        assert memory.is_closed is True
        memory.close()
        with pytest.raises(StoreDestroyedError):
            memory.lookup("x")

    def test_sizing_from_config(self) -> None:
        config = Config(store=StoreConfig(initial_capacity=2, growth_factor=4))
        with RuntimeMemory(config=config) as memory:
            for name in "abc":
                memory.assign(name, 0)
            assert memory.store.capacity == 8

    def test_metrics_enabled(self, metrics_registry: MetricsRegistry) -> None:
        config = Config(observability=ObservabilityConfig(metrics_enabled=True))
        with RuntimeMemory(config=config, metrics=metrics_registry) as memory:
            memory.assign("x", 1)
            memory.lookup("x")

        assert metrics_registry.registry.get_sample_value(
            "variable_store_reads_total", {"by": "name", "result": "hit"}
        ) == 1
