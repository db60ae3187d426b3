"""Enumerations for importcheck type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Severity(StrEnum):
    """Severity of a diagnostic.

    StrEnum provides automatic string conversion: str(Severity.ERROR) == "error"
    """

    ERROR = "error"
    """The reference will not load as written."""

    WARNING = "warning"
    """The reference loads but violates a recommendation."""

    @property
    def lsp_value(self) -> int:
        """Numeric severity used by the Language Server Protocol (1=Error, 2=Warning)."""
        return 1 if self is Severity.ERROR else 2


class LanguageId(StrEnum):
    """Editor language identifiers accepted for analysis.

    Documents with any other language identifier are skipped.
    """

    TYPESCRIPT = "typescript"
    """Plain TypeScript document (.ts)"""

    TYPESCRIPT_REACT = "typescriptreact"
    """TypeScript with JSX (.tsx)"""


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


__all__ = [
    "LanguageId",
    "OutputFormat",
    "Severity",
]
