"""Presentation-side panel state: the circuit collection plus the selected circuit."""

from __future__ import annotations

import logging

from circuit_load.config import settings
from circuit_load.engine import LoadReport, evaluate
from circuit_load.errors import NotFoundError
from circuit_load.models import Circuit, Device
from circuit_load.registry import CircuitRegistry

DEMO_CIRCUIT_NAME = "Kitchen Circuit"
DEMO_DEVICES: tuple[tuple[str, float], ...] = (("Microwave", 1200), ("Coffee Maker", 900))


class PanelSession:
    """Tracks which circuit is selected and keeps the index valid across removals."""

    def __init__(
        self,
        *,
        registry: CircuitRegistry | None = None,
        default_voltage: float | None = None,
        default_breaker_rating: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._registry = registry or CircuitRegistry()
        self._default_voltage = default_voltage if default_voltage is not None else settings.default_voltage
        self._default_breaker_rating = (
            default_breaker_rating if default_breaker_rating is not None else settings.default_breaker_rating
        )
        self._logger = logger or logging.getLogger("circuit_load.session")
        self._selected_index: int | None = 0 if len(self._registry) else None

    @classmethod
    def with_demo_circuit(cls, **kwargs) -> PanelSession:
        session = cls(**kwargs)
        circuit = session.add_circuit(DEMO_CIRCUIT_NAME, voltage=120, breaker_rating=20)
        for name, watts in DEMO_DEVICES:
            session.registry.add_device(circuit.id, name, watts)
        return session

    @property
    def registry(self) -> CircuitRegistry:
        return self._registry

    @property
    def selected_index(self) -> int | None:
        return self._clamp_selection()

    @property
    def selected_circuit(self) -> Circuit | None:
        index = self._clamp_selection()
        if index is None:
            return None
        return self._registry.circuits[index]

    def select(self, index: int) -> Circuit:
        if not 0 <= index < len(self._registry):
            raise NotFoundError("circuit index", index)
        self._selected_index = index
        return self._registry.circuits[index]

    def add_circuit(
        self,
        name: str,
        *,
        voltage: float | None = None,
        breaker_rating: float | None = None,
    ) -> Circuit:
        circuit = self._registry.create_circuit(
            name,
            self._default_voltage if voltage is None else voltage,
            self._default_breaker_rating if breaker_rating is None else breaker_rating,
        )
        self._clamp_selection()
        return circuit

    def remove_circuit(self, circuit_id: str) -> Circuit:
        self._clamp_selection()
        removed_index = self._registry.index_of(circuit_id)
        circuit = self._registry.remove_circuit(circuit_id)
        self._selected_index = self._reselect(removed_index)
        self._logger.debug(
            "selection_rederived",
            extra={"removed_index": removed_index, "selected_index": self._selected_index},
        )
        return circuit

    def add_device(self, name: str, watts: float) -> Device:
        return self._registry.add_device(self._require_selected().id, name, watts)

    def remove_device(self, device_id: str) -> Device:
        return self._registry.remove_device(self._require_selected().id, device_id)

    def report(self) -> LoadReport | None:
        circuit = self.selected_circuit
        return evaluate(circuit) if circuit is not None else None

    def _require_selected(self) -> Circuit:
        circuit = self.selected_circuit
        if circuit is None:
            raise NotFoundError("circuit", "<no selection>")
        return circuit

    def _reselect(self, removed_index: int) -> int | None:
        count = len(self._registry)
        if count == 0 or self._selected_index is None:
            return None
        if removed_index < self._selected_index:
            return self._selected_index - 1
        return min(self._selected_index, count - 1)

    def _clamp_selection(self) -> int | None:
        # The registry is shared, so circuits may be removed without going through this session.
        count = len(self._registry)
        if count == 0:
            self._selected_index = None
        elif self._selected_index is None:
            self._selected_index = 0
        elif self._selected_index >= count:
            self._selected_index = count - 1
        return self._selected_index
