"""Circuit load model and NEC 80% rule evaluation."""

from .engine import CONTINUOUS_LOAD_FACTOR, DeviceLoad, LoadReport, LoadStatus, classify, device_loads, evaluate
from .errors import CircuitLoadError, IdentifierExhaustedError, InvalidInputError, NotFoundError
from .models import STANDARD_BREAKER_RATINGS, STANDARD_VOLTAGES, Circuit, Device
from .registry import CircuitRegistry
from .session import PanelSession

__all__ = [
    "CONTINUOUS_LOAD_FACTOR",
    "Circuit",
    "CircuitLoadError",
    "CircuitRegistry",
    "Device",
    "IdentifierExhaustedError",
    "DeviceLoad",
    "InvalidInputError",
    "LoadReport",
    "LoadStatus",
    "NotFoundError",
    "PanelSession",
    "STANDARD_BREAKER_RATINGS",
    "STANDARD_VOLTAGES",
    "classify",
    "device_loads",
    "evaluate",
]
