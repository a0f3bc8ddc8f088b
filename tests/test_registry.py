from __future__ import annotations

import itertools
import logging

import pytest

from circuit_load.engine import evaluate
from circuit_load.errors import IdentifierExhaustedError, InvalidInputError, NotFoundError
from circuit_load.registry import CircuitRegistry


class SequenceIds:
    def __init__(self, *ids: str) -> None:
        self._ids = itertools.chain(ids, (f"gen-{n}" for n in itertools.count(1)))

    def __call__(self) -> str:
        return next(self._ids)


def test_create_circuit_appends_with_empty_devices() -> None:
    registry = CircuitRegistry()

    first = registry.create_circuit("Kitchen", 120, 20)
    second = registry.create_circuit("Dryer", "240", "30")

    assert registry.circuits == (first, second)
    assert first.devices == []
    assert second.voltage == 240.0
    assert first.id != second.id
    assert first.id in registry


@pytest.mark.parametrize(
    ("name", "voltage", "breaker_rating"),
    [("", 120, 20), ("Kitchen", 0, 20), ("Kitchen", 120, 0), ("Kitchen", "abc", 20), ("Kitchen", 120, -5)],
)
def test_create_circuit_rejects_invalid_input(name: str, voltage: object, breaker_rating: object) -> None:
    registry = CircuitRegistry()

    with pytest.raises(InvalidInputError):
        registry.create_circuit(name, voltage, breaker_rating)

    assert len(registry) == 0


def test_ids_are_regenerated_on_collision() -> None:
    registry = CircuitRegistry(id_factory=SequenceIds("a", "a", "b"))

    first = registry.create_circuit("One", 120, 15)
    second = registry.create_circuit("Two", 120, 15)

    assert (first.id, second.id) == ("a", "b")


def test_remove_circuit_and_not_found() -> None:
    registry = CircuitRegistry()
    circuit = registry.create_circuit("Kitchen", 120, 20)

    assert registry.remove_circuit(circuit.id) is circuit
    assert len(registry) == 0

    with pytest.raises(NotFoundError):
        registry.remove_circuit(circuit.id)


def test_add_device_preserves_order() -> None:
    registry = CircuitRegistry()
    circuit = registry.create_circuit("Kitchen", 120, 20)

    microwave = registry.add_device(circuit.id, "Microwave", 1200)
    coffee = registry.add_device(circuit.id, "Coffee Maker", "900")

    assert registry.get_circuit(circuit.id).devices == [microwave, coffee]
    assert coffee.watts == 900.0


def test_add_device_rejects_invalid_watts_without_mutation() -> None:
    registry = CircuitRegistry()
    circuit = registry.create_circuit("Kitchen", 120, 20)

    with pytest.raises(InvalidInputError):
        registry.add_device(circuit.id, "Heater", 0)
    with pytest.raises(InvalidInputError):
        registry.add_device(circuit.id, "Heater", -100)
    with pytest.raises(InvalidInputError):
        registry.add_device(circuit.id, "", 100)

    assert circuit.devices == []


def test_add_device_to_unknown_circuit() -> None:
    with pytest.raises(NotFoundError) as excinfo:
        CircuitRegistry().add_device("missing", "Heater", 1500)

    assert excinfo.value.kind == "circuit"


def test_remove_device_by_id_regardless_of_position() -> None:
    registry = CircuitRegistry()
    circuit = registry.create_circuit("Kitchen", 120, 20)
    devices = [registry.add_device(circuit.id, name, 500) for name in ("A", "B", "C")]

    removed = registry.remove_device(circuit.id, devices[1].id)

    assert removed is devices[1]
    assert [d.name for d in circuit.devices] == ["A", "C"]
    with pytest.raises(NotFoundError):
        registry.remove_device(circuit.id, devices[1].id)


def test_scenario_add_then_remove_all_devices_returns_to_safe() -> None:
    registry = CircuitRegistry()
    circuit = registry.create_circuit("Kitchen", 120, 20)
    ids = [registry.add_device(circuit.id, n, w).id for n, w in (("Microwave", 1200), ("Coffee Maker", 900))]
    assert evaluate(circuit).is_near_limit

    ids.append(registry.add_device(circuit.id, "Toaster", 500).id)
    assert evaluate(circuit).is_overloaded

    for device_id in ids:
        registry.remove_device(circuit.id, device_id)

    report = evaluate(circuit)
    assert report.total_watts == 0
    assert report.is_safe


def test_nonstandard_rating_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    registry = CircuitRegistry()

    with caplog.at_level(logging.INFO, logger="circuit_load.registry"):
        registry.create_circuit("Shop", 208, 20)

    messages = [record.getMessage() for record in caplog.records]
    assert "circuit_nonstandard_rating" in messages
    assert "circuit_created" in messages


def test_id_factory_that_never_yields_a_fresh_id_gives_up() -> None:
    registry = CircuitRegistry(id_factory=lambda: "same")
    registry.create_circuit("One", 120, 15)

    with pytest.raises(IdentifierExhaustedError):
        registry.create_circuit("Two", 120, 15)

    assert len(registry) == 1
