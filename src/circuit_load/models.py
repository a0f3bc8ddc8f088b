"""Circuit and device entities with their field invariants."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from circuit_load.errors import InvalidInputError

STANDARD_VOLTAGES: tuple[float, ...] = (120, 240)
STANDARD_BREAKER_RATINGS: tuple[float, ...] = (15, 20, 30, 40, 50)


def require_name(value: object, field_name: str = "name") -> str:
    """Return ``value`` stripped, or raise if it is not a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(field_name, "must be a non-empty string")
    return value.strip()


def require_positive(value: object, field_name: str) -> float:
    """Coerce ``value`` to a finite float greater than zero.

    Form input arrives as text, so numeric strings are accepted alongside
    ints and floats. Booleans are rejected even though they are ints.
    """
    if value is None or isinstance(value, bool):
        raise InvalidInputError(field_name, "must be a number")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidInputError(field_name, f"must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInputError(field_name, "must be finite")
    if number <= 0:
        raise InvalidInputError(field_name, "must be greater than zero")
    return number


@dataclass(slots=True, frozen=True)
class Device:
    """An electrical load drawing a fixed wattage."""

    id: str
    name: str
    watts: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_name(self.name))
        object.__setattr__(self, "watts", require_positive(self.watts, "watts"))


@dataclass(slots=True)
class Circuit:
    """A branch circuit with a supply voltage, a breaker rating and its devices."""

    id: str
    name: str
    voltage: float
    breaker_rating: float
    devices: list[Device] = field(default_factory=list)

    def __setattr__(self, attr: str, value: object) -> None:
        if attr == "name":
            value = require_name(value)
        elif attr in ("voltage", "breaker_rating"):
            value = require_positive(value, attr)
        object.__setattr__(self, attr, value)

    def __post_init__(self) -> None:
        self.devices = list(self.devices)
        seen: set[str] = set()
        for device in self.devices:
            if device.id in seen:
                raise InvalidInputError("devices", f"duplicate device id {device.id!r}")
            seen.add(device.id)

    @property
    def is_standard_rating(self) -> bool:
        return self.voltage in STANDARD_VOLTAGES and self.breaker_rating in STANDARD_BREAKER_RATINGS

    def find_device(self, device_id: str) -> Device | None:
        for device in self.devices:
            if device.id == device_id:
                return device
        return None
