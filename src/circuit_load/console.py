"""Line-command parsing and dispatch for the interactive panel."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from enum import Enum

from circuit_load.engine import device_loads, evaluate
from circuit_load.errors import CircuitLoadError
from circuit_load.formatting import format_device_line, format_report
from circuit_load.session import PanelSession


class PanelCommandType(str, Enum):
    LIST_CIRCUITS = "circuits"
    ADD_CIRCUIT = "add-circuit"
    REMOVE_CIRCUIT = "remove-circuit"
    SELECT = "select"
    ADD_DEVICE = "add-device"
    REMOVE_DEVICE = "remove-device"
    SHOW = "show"
    HELP = "help"
    QUIT = "quit"
    UNKNOWN = "unknown"


_ALIASES: dict[str, PanelCommandType] = {
    "ls": PanelCommandType.LIST_CIRCUITS,
    "exit": PanelCommandType.QUIT,
    "q": PanelCommandType.QUIT,
    "?": PanelCommandType.HELP,
}

_ARITY: dict[PanelCommandType, tuple[int, int]] = {
    PanelCommandType.ADD_CIRCUIT: (1, 3),
    PanelCommandType.REMOVE_CIRCUIT: (1, 1),
    PanelCommandType.SELECT: (1, 1),
    PanelCommandType.ADD_DEVICE: (2, 2),
    PanelCommandType.REMOVE_DEVICE: (1, 1),
}

HELP_TEXT = "\n".join(
    (
        "circuits                         list circuits",
        "add-circuit NAME [VOLTS] [AMPS]  create a circuit",
        "remove-circuit ID                remove a circuit",
        "select N                         select circuit number N",
        "add-device NAME WATTS            add a device to the selected circuit",
        "remove-device ID                 remove a device from the selected circuit",
        "show                             show the selected circuit's load",
        "quit                             leave the panel",
    )
)


@dataclass(slots=True)
class PanelCommand:
    type: PanelCommandType
    args: list[str] = field(default_factory=list)
    error: str | None = None


class PanelCommandParser:
    def parse(self, line: str) -> PanelCommand:
        try:
            tokens = shlex.split(line)
        except ValueError as exc:
            return PanelCommand(type=PanelCommandType.UNKNOWN, error=str(exc))
        if not tokens:
            return PanelCommand(type=PanelCommandType.UNKNOWN)

        head, args = tokens[0].lower(), tokens[1:]
        try:
            command_type = PanelCommandType(head)
        except ValueError:
            command_type = _ALIASES.get(head, PanelCommandType.UNKNOWN)
        if command_type is PanelCommandType.UNKNOWN:
            return PanelCommand(type=command_type, args=tokens, error=f"Unknown command: {tokens[0]}")

        low, high = _ARITY.get(command_type, (0, 0))
        if not low <= len(args) <= high:
            return PanelCommand(type=command_type, args=args, error=f"Wrong number of arguments for {command_type.value}")
        return PanelCommand(type=command_type, args=args)


class PanelConsole:
    """Routes parsed commands to a panel session and renders plain-text replies."""

    def __init__(self, session: PanelSession, parser: PanelCommandParser | None = None) -> None:
        self._session = session
        self._parser = parser or PanelCommandParser()
        self.finished = False

    @property
    def session(self) -> PanelSession:
        return self._session

    def handle(self, line: str) -> str:
        command = self._parser.parse(line)
        if command.error:
            return f"{command.error}. Type 'help' for commands."
        if command.type is PanelCommandType.UNKNOWN:
            return ""
        try:
            return self._dispatch(command)
        except CircuitLoadError as exc:
            return f"Error: {exc}"

    def _dispatch(self, command: PanelCommand) -> str:
        session = self._session
        args = command.args

        if command.type is PanelCommandType.HELP:
            return HELP_TEXT
        if command.type is PanelCommandType.QUIT:
            self.finished = True
            return "Bye."
        if command.type is PanelCommandType.LIST_CIRCUITS:
            return self._list_circuits()
        if command.type is PanelCommandType.SHOW:
            return self._show()
        if command.type is PanelCommandType.ADD_CIRCUIT:
            circuit = session.add_circuit(
                args[0],
                voltage=args[1] if len(args) > 1 else None,
                breaker_rating=args[2] if len(args) > 2 else None,
            )
            return f"Added circuit {circuit.name} ({circuit.id})"
        if command.type is PanelCommandType.REMOVE_CIRCUIT:
            circuit = session.remove_circuit(args[0])
            return f"Removed circuit {circuit.name}"
        if command.type is PanelCommandType.SELECT:
            try:
                number = int(args[0])
            except ValueError:
                return f"Not a circuit number: {args[0]}"
            circuit = session.select(number - 1)
            return f"Selected {circuit.name}"
        if command.type is PanelCommandType.ADD_DEVICE:
            device = session.add_device(args[0], args[1])
            return f"Added {device.name} ({device.id})"
        if command.type is PanelCommandType.REMOVE_DEVICE:
            device = session.remove_device(args[0])
            return f"Removed {device.name}"
        return ""

    def _list_circuits(self) -> str:
        circuits = self._session.registry.circuits
        if not circuits:
            return "No circuits yet. Use add-circuit to create one."
        lines = []
        for number, circuit in enumerate(circuits, start=1):
            marker = "*" if number - 1 == self._session.selected_index else " "
            status = evaluate(circuit).status.label
            lines.append(f"{marker} {number}. {circuit.name} [{circuit.id}] {status}")
        return "\n".join(lines)

    def _show(self) -> str:
        circuit = self._session.selected_circuit
        if circuit is None:
            return "No circuit selected."
        rendered = format_report(evaluate(circuit))
        lines = [circuit.name, *(f"  {key}: {value}" for key, value in rendered.items())]
        loads = device_loads(circuit)
        if not loads:
            lines.append("  No devices added yet.")
        for load in loads:
            lines.append(f"  - [{load.device_id}] {format_device_line(load)}")
        return "\n".join(lines)
