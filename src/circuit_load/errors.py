"""Error taxonomy raised by the circuit load model."""

from __future__ import annotations


class CircuitLoadError(Exception):
    """Base class for every error raised by the load model."""


class InvalidInputError(CircuitLoadError, ValueError):
    """Raised when a circuit or device field is empty, non-numeric or not strictly positive."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class NotFoundError(CircuitLoadError, LookupError):
    """Raised when a referenced circuit or device no longer exists."""

    def __init__(self, kind: str, identifier: object) -> None:
        super().__init__(f"Unknown {kind}: {identifier}")
        self.kind = kind
        self.identifier = identifier


class IdentifierExhaustedError(CircuitLoadError, RuntimeError):
    """Raised when the id factory keeps returning identifiers that are already taken."""
