"""Diagnostic codes and data structures.

Defines diagnostic kinds, source positions and ranges, and the diagnostic
record published for each problem found in a module reference.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

from importcheck.constants import DIAGNOSTIC_SOURCE
from importcheck.enums import Severity

from .errors import UnknownDiagnosticKindError

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "Position",
    "Range",
]


class DiagnosticKind(Enum):
    """Closed set of problems reported for module references.

    The integer value is the stable code published with each diagnostic.
    The same member keys the fix table in ``diagnostics.fixes``; the two
    concerns share the enumeration, never a bare number.

    Codes:
        1001: Specifier is neither relative nor an http(s) URL
        1002: Specifier has no extension, or one outside the allow-set
        1003: Remote specifier uses plain http
        1004: Relative module does not exist on disk
        1005: Remote module is not present in the module cache
    """

    INVALID_SPECIFIER_FORM = 1001
    MISSING_EXTENSION = 1002
    INSECURE_PROTOCOL_PREFERRED = 1003
    LOCAL_MODULE_NOT_FOUND = 1004
    REMOTE_MODULE_NOT_FOUND = 1005

    @property
    def severity(self) -> Severity:
        """Severity fixed for this kind."""
        if self is DiagnosticKind.INSECURE_PROTOCOL_PREFERRED:
            return Severity.WARNING
        return Severity.ERROR

    @classmethod
    def coerce(cls, value: object) -> "DiagnosticKind":
        """Return the member for ``value`` or fail.

        Accepts a member or its integer code.

        Raises:
            UnknownDiagnosticKindError: If value names no member
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True must not alias code 1
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        msg = f"Unknown diagnostic kind: {value!r}"
        raise UnknownDiagnosticKindError(msg)


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/character position, as used by editors.

    Note:
        Characters are UTF-16 code units, as in the Language Server Protocol.

    Attributes:
        line: Line number (0-indexed)
        character: Column within the line (0-indexed)
    """

    line: int
    character: int

    def __post_init__(self) -> None:
        """Validate Position invariants.

        Raises:
            ValueError: If line or character is negative
        """
        if self.line < 0:
            msg = f"Position.line must be >= 0, got {self.line}"
            raise ValueError(msg)
        if self.character < 0:
            msg = f"Position.character must be >= 0, got {self.character}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open source range between two positions.

    Attributes:
        start: First position covered
        end: Position just past the last covered character
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate Range invariants.

        Raises:
            ValueError: If end precedes start
        """
        if self.end < self.start:
            msg = f"Range.end ({self.end}) must not precede start ({self.start})"
            raise ValueError(msg)

    def contains(self, other: "Range") -> bool:
        """Check whether ``other`` lies entirely within this range."""
        return self.start <= other.start and other.end <= self.end

    def to_lsp(self) -> dict[str, dict[str, int]]:
        """Serialize as an LSP ``Range`` object."""
        return {
            "start": {"line": self.start.line, "character": self.start.character},
            "end": {"line": self.end.line, "character": self.end.character},
        }


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic for one module reference.

    Created fresh per analysis call and never mutated.

    Attributes:
        kind: Problem category; also the key for fix lookup
        message: Human-readable description of the problem
        range: Location of the module specifier text
        severity: Fixed per kind; filled in from ``kind`` when omitted
        source: Producer identifier (default: DIAGNOSTIC_SOURCE)
    """

    kind: DiagnosticKind
    message: str
    range: Range
    severity: Severity | None = None
    source: str = DIAGNOSTIC_SOURCE

    def __post_init__(self) -> None:
        """Validate the kind and derive the severity.

        Raises:
            UnknownDiagnosticKindError: If kind is not a DiagnosticKind
            ValueError: If an explicit severity disagrees with the kind
        """
        kind = DiagnosticKind.coerce(self.kind)
        object.__setattr__(self, "kind", kind)
        if self.severity is None:
            object.__setattr__(self, "severity", kind.severity)
        elif Severity(self.severity) is not kind.severity:
            msg = (
                f"{kind.name} diagnostics are {kind.severity}, "
                f"got severity {self.severity!r}"
            )
            raise ValueError(msg)
        else:
            object.__setattr__(self, "severity", Severity(self.severity))

    @property
    def code(self) -> int:
        """Numeric code published to the editor."""
        return self.kind.value

    def to_lsp(self) -> dict[str, object]:
        """Serialize as an LSP ``Diagnostic`` object."""
        return {
            "range": self.range.to_lsp(),
            "message": self.message,
            "severity": self.kind.severity.lsp_value,
            "code": self.code,
            "source": self.source,
        }

    def __str__(self) -> str:
        """Return human-readable problem description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MISSING_EXTENSION]: Please specify valid extension name of the imported module.
              --> 1:16

        Returns:
            Formatted diagnostic message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
