"""In-memory circuit collection and its create/remove operations."""

from __future__ import annotations

import logging
from typing import Callable, Iterator
from uuid import uuid4

from circuit_load.errors import IdentifierExhaustedError, NotFoundError
from circuit_load.models import Circuit, Device


MAX_ID_ATTEMPTS = 100


def _new_id() -> str:
    return uuid4().hex


class CircuitRegistry:
    """Ordered collection of circuits owning their devices.

    Each mutation builds and validates the new entity before the collection is
    touched, so a failed call leaves the registry exactly as it was.
    """

    def __init__(
        self,
        *,
        id_factory: Callable[[], str] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._id_factory = id_factory or _new_id
        self._logger = logger or logging.getLogger("circuit_load.registry")
        self._circuits: list[Circuit] = []

    def __len__(self) -> int:
        return len(self._circuits)

    def __iter__(self) -> Iterator[Circuit]:
        return iter(tuple(self._circuits))

    def __contains__(self, circuit_id: object) -> bool:
        return any(circuit.id == circuit_id for circuit in self._circuits)

    @property
    def circuits(self) -> tuple[Circuit, ...]:
        return tuple(self._circuits)

    def get_circuit(self, circuit_id: str) -> Circuit:
        """Return the circuit with ``circuit_id``."""
        return self._circuits[self.index_of(circuit_id)]

    def index_of(self, circuit_id: str) -> int:
        for index, circuit in enumerate(self._circuits):
            if circuit.id == circuit_id:
                return index
        raise NotFoundError("circuit", circuit_id)

    def create_circuit(self, name: str, voltage: float, breaker_rating: float) -> Circuit:
        """Validate and append a circuit with no devices; selection is left to the caller."""
        circuit = Circuit(
            id=self._unique_id({c.id for c in self._circuits}),
            name=name,
            voltage=voltage,
            breaker_rating=breaker_rating,
        )
        self._circuits.append(circuit)
        if not circuit.is_standard_rating:
            self._logger.warning(
                "circuit_nonstandard_rating",
                extra={
                    "circuit_id": circuit.id,
                    "voltage": circuit.voltage,
                    "breaker_rating": circuit.breaker_rating,
                },
            )
        self._logger.info(
            "circuit_created",
            extra={"circuit_id": circuit.id, "circuit_name": circuit.name, "circuit_count": len(self._circuits)},
        )
        return circuit

    def remove_circuit(self, circuit_id: str) -> Circuit:
        """Remove and return the circuit with ``circuit_id``, along with its devices."""
        circuit = self._circuits.pop(self.index_of(circuit_id))
        self._logger.info(
            "circuit_removed",
            extra={"circuit_id": circuit_id, "circuit_count": len(self._circuits)},
        )
        return circuit

    def add_device(self, circuit_id: str, name: str, watts: float) -> Device:
        """Validate and append a device to the end of the circuit's device list."""
        circuit = self.get_circuit(circuit_id)
        device = Device(
            id=self._unique_id({d.id for d in circuit.devices}),
            name=name,
            watts=watts,
        )
        circuit.devices.append(device)
        self._logger.info(
            "device_added",
            extra={"circuit_id": circuit_id, "device_id": device.id, "watts": device.watts},
        )
        return device

    def remove_device(self, circuit_id: str, device_id: str) -> Device:
        """Remove and return a device by id, wherever it sits in the list."""
        circuit = self.get_circuit(circuit_id)
        for index, device in enumerate(circuit.devices):
            if device.id == device_id:
                del circuit.devices[index]
                self._logger.info(
                    "device_removed",
                    extra={"circuit_id": circuit_id, "device_id": device_id},
                )
                return device
        raise NotFoundError("device", device_id)

    def _unique_id(self, taken: set[str]) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in taken:
                return candidate
        raise IdentifierExhaustedError(f"No unused id after {MAX_ID_ATTEMPTS} attempts")
