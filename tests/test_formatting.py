from __future__ import annotations

from circuit_load.engine import evaluate
from circuit_load.formatting import format_report, format_watts
from circuit_load.models import Circuit, Device


def test_format_watts_limits_decimals() -> None:
    assert format_watts(0.1 + 0.2) == "0.3W"
    assert format_watts(1234.5678) == "1,234.568W"
    assert format_watts(1200) == "1,200W"
    assert format_watts(0) == "0W"
    assert format_watts(-0.0001) == "0W"


def test_format_report_for_overloaded_circuit() -> None:
    circuit = Circuit(
        id="c1",
        name="Kitchen",
        voltage=120,
        breaker_rating=20,
        devices=[Device(id="d1", name="Heater", watts=2600)],
    )

    rendered = format_report(evaluate(circuit))

    assert rendered["status"] == "OVERLOADED!"
    assert rendered["max_capacity"] == "2,400W"
    assert rendered["safe_capacity"] == "1,920W"
    assert rendered["total_load"] == "2,600W"
    assert rendered["remaining"] == "-200W or -1.67A"
