"""Display formatting for load reports. The core always returns full precision."""

from __future__ import annotations

from circuit_load.engine import DeviceLoad, LoadReport


def _number(value: float) -> str:
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_watts(value: float) -> str:
    return f"{_number(value)}W"


def format_report(report: LoadReport) -> dict[str, str]:
    return {
        "status": report.status.label,
        "voltage": f"{_number(report.voltage)}V",
        "breaker_rating": f"{_number(report.max_amps)}A",
        "max_capacity": format_watts(report.max_capacity_watts),
        "safe_capacity": format_watts(report.safe_max_watts),
        "current_draw": f"{report.total_amps:.2f}A / {_number(report.max_amps)}A",
        "total_load": format_watts(report.total_watts),
        "usage": f"{report.usage_percent:.1f}%",
        "remaining": f"{report.available_watts:.0f}W or {report.available_amps:.2f}A",
    }


def format_device_line(load: DeviceLoad) -> str:
    return f"{load.name}: {format_watts(load.watts)} • {load.amps:.2f}A • {load.percent_of_max:.1f}%"
