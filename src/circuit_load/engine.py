"""Load evaluation for a single circuit.

Every function here is a pure function of the circuit passed in. The
aggregate classification uses summed watts rather than summed per-device
percentages so rounding never drifts between the two views.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

from circuit_load.models import Circuit

CONTINUOUS_LOAD_FACTOR = 0.8


class LoadStatus(str, Enum):
    """Safety state of a circuit under the 80% continuous-load rule."""

    SAFE = "safe"
    NEAR_LIMIT = "near_limit"
    OVERLOADED = "overloaded"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS: dict[LoadStatus, str] = {
    LoadStatus.SAFE: "Safe Load",
    LoadStatus.NEAR_LIMIT: "Near Limit",
    LoadStatus.OVERLOADED: "OVERLOADED!",
}


@dataclass(slots=True, frozen=True)
class LoadReport:
    """Derived load metrics for a circuit at one point in time."""

    total_watts: float
    total_amps: float
    max_amps: float
    safe_max_amps: float
    usage_percent: float
    available_amps: float
    available_watts: float
    voltage: float
    status: LoadStatus

    @property
    def is_overloaded(self) -> bool:
        return self.status is LoadStatus.OVERLOADED

    @property
    def is_near_limit(self) -> bool:
        return self.status is LoadStatus.NEAR_LIMIT

    @property
    def is_safe(self) -> bool:
        return self.status is LoadStatus.SAFE

    @property
    def max_capacity_watts(self) -> float:
        return self.voltage * self.max_amps

    @property
    def safe_max_watts(self) -> float:
        return self.safe_max_amps * self.voltage

    @property
    def bar_percent(self) -> float:
        """Usage clamped to 100 for progress bars."""
        return min(self.usage_percent, 100)

    def as_dict(self) -> dict:
        payload = asdict(self)
        payload["status"] = self.status.value
        payload.update(
            is_overloaded=self.is_overloaded,
            is_near_limit=self.is_near_limit,
            is_safe=self.is_safe,
            max_capacity_watts=self.max_capacity_watts,
            safe_max_watts=self.safe_max_watts,
        )
        return payload


@dataclass(slots=True, frozen=True)
class DeviceLoad:
    """Informational per-device share of a circuit's breaker rating."""

    device_id: str
    name: str
    watts: float
    amps: float
    percent_of_max: float


def classify(total_amps: float, max_amps: float) -> LoadStatus:
    """Apply the strict-comparison rule: equal to the safe limit is safe, equal to the breaker is near limit."""
    if total_amps > max_amps:
        return LoadStatus.OVERLOADED
    if total_amps > max_amps * CONTINUOUS_LOAD_FACTOR:
        return LoadStatus.NEAR_LIMIT
    return LoadStatus.SAFE


def evaluate(circuit: Circuit) -> LoadReport:
    total_watts = sum(device.watts for device in circuit.devices)
    total_amps = total_watts / circuit.voltage
    max_amps = circuit.breaker_rating
    safe_max_amps = max_amps * CONTINUOUS_LOAD_FACTOR
    usage_percent = (total_amps / max_amps) * 100
    available_amps = max_amps - total_amps
    available_watts = available_amps * circuit.voltage

    return LoadReport(
        total_watts=total_watts,
        total_amps=total_amps,
        max_amps=max_amps,
        safe_max_amps=safe_max_amps,
        usage_percent=usage_percent,
        available_amps=available_amps,
        available_watts=available_watts,
        voltage=circuit.voltage,
        status=classify(total_amps, max_amps),
    )


def device_loads(circuit: Circuit) -> list[DeviceLoad]:
    loads: list[DeviceLoad] = []
    for device in circuit.devices:
        amps = device.watts / circuit.voltage
        loads.append(
            DeviceLoad(
                device_id=device.id,
                name=device.name,
                watts=device.watts,
                amps=amps,
                percent_of_max=(amps / circuit.breaker_rating) * 100,
            )
        )
    return loads
