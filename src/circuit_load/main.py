"""CLI entrypoint for circuit-load."""

from __future__ import annotations

import logging

import typer
from rich import print

from circuit_load.config import settings
from circuit_load.console import PanelConsole
from circuit_load.engine import device_loads, evaluate
from circuit_load.errors import CircuitLoadError
from circuit_load.formatting import format_device_line, format_report
from circuit_load.models import Circuit
from circuit_load.registry import CircuitRegistry
from circuit_load.session import PanelSession

app = typer.Typer(help="Circuit load calculator (NEC 80% continuous-load rule)")

EXIT_INVALID_INPUT = 1
EXIT_OVERLOADED = 2


@app.callback()
def _configure(log_level: str = typer.Option(None, help="Override CIRCUIT_LOAD_LOG_LEVEL")) -> None:
    level = (log_level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")
    logging.basicConfig(level=level)


def _parse_device(entry: str) -> tuple[str, str]:
    name, sep, watts = entry.rpartition("=")
    if not sep:
        raise typer.BadParameter(f"Expected NAME=WATTS, got {entry!r}", param_hint="--device")
    return name, watts


def _render(circuit: Circuit) -> dict:
    return {
        "circuit": circuit.name,
        "report": format_report(evaluate(circuit)),
        "devices": [format_device_line(load) for load in device_loads(circuit)],
    }


def _session() -> PanelSession:
    if settings.seed_demo_circuit:
        return PanelSession.with_demo_circuit()
    return PanelSession()


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "default_voltage": settings.default_voltage,
            "default_breaker_rating": settings.default_breaker_rating,
            "seed_demo_circuit": settings.seed_demo_circuit,
        }
    )


@app.command("evaluate")
def evaluate_circuit(
    name: str = typer.Option("Circuit", help="Circuit name"),
    voltage: float = typer.Option(None, help="Supply voltage (defaults to CIRCUIT_LOAD_DEFAULT_VOLTAGE)"),
    breaker_rating: float = typer.Option(None, help="Breaker rating in amps"),
    device: list[str] = typer.Option(None, help="Device as NAME=WATTS; repeat for more devices"),
    fail_on_overload: bool = typer.Option(False, help="Exit with code 2 when the circuit is overloaded"),
    raw: bool = typer.Option(False, help="Print full-precision values instead of display formatting"),
) -> None:
    """Evaluate a one-off circuit built from the command line."""
    registry = CircuitRegistry()
    try:
        circuit = registry.create_circuit(
            name,
            settings.default_voltage if voltage is None else voltage,
            settings.default_breaker_rating if breaker_rating is None else breaker_rating,
        )
        for entry in device or []:
            registry.add_device(circuit.id, *_parse_device(entry))
    except CircuitLoadError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=EXIT_INVALID_INPUT)

    report = evaluate(circuit)
    print(report.as_dict() if raw else _render(circuit))
    if fail_on_overload and report.is_overloaded:
        raise typer.Exit(code=EXIT_OVERLOADED)


@app.command()
def demo() -> None:
    """Show the sample kitchen circuit."""
    session = PanelSession.with_demo_circuit()
    print(_render(session.selected_circuit))


@app.command()
def interactive() -> None:
    """Run an interactive panel for adding circuits and devices."""
    console = PanelConsole(_session())
    print({"panel": "started", "hint": "Type 'help' for commands, 'quit' to exit."})
    while not console.finished:
        try:
            line = input("panel> ")
        except EOFError:
            break
        reply = console.handle(line)
        if reply:
            typer.echo(reply)


if __name__ == "__main__":
    app()
