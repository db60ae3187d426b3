"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass

from importcheck.enums import OutputFormat, Severity

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Renders Diagnostic objects as human-readable or machine-readable text.
    Positions are printed 1-based, the way terminals and editors show them.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)
        path: Document label printed in locations (optional)

    Example:
        >>> formatter = DiagnosticFormatter(path="main.ts")
        >>> print(formatter.format(diagnostic))
        error[MISSING_EXTENSION]: Please specify valid extension name of the imported module.
          --> main.ts:1:16

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        1:16: MISSING_EXTENSION: Please specify valid extension name of the imported module.
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False
    path: str | None = None

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by newlines
        """
        separator = "\n" if self.output_format is not OutputFormat.RUST else "\n\n"
        return separator.join(self.format(d) for d in diagnostics)

    def _location(self, diagnostic: Diagnostic) -> str:
        start = diagnostic.range.start
        position = f"{start.line + 1}:{start.character + 1}"
        return f"{self.path}:{position}" if self.path else position

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            warning[INSECURE_PROTOCOL_PREFERRED]: For security, we recommend using the HTTPS module.
              --> main.ts:3:20
        """
        severity = str(diagnostic.severity)

        if self.color:
            if diagnostic.severity is Severity.ERROR:
                severity = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity = f"\033[1;33m{severity}\033[0m"  # Bold yellow

        return (
            f"{severity}[{diagnostic.kind.name}]: {diagnostic.message}\n"
            f"  --> {self._location(diagnostic)}"
        )

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            main.ts:1:16: MISSING_EXTENSION: Please specify valid extension ...
        """
        return f"{self._location(diagnostic)}: {diagnostic.kind.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MISSING_EXTENSION", "code_value": 1002, "severity": "error", ...}
        """
        data: dict[str, str | int] = {
            "code": diagnostic.kind.name,
            "code_value": diagnostic.code,
            "message": diagnostic.message,
            "severity": str(diagnostic.severity),
            "source": diagnostic.source,
            "start_line": diagnostic.range.start.line,
            "start_character": diagnostic.range.start.character,
            "end_line": diagnostic.range.end.line,
            "end_character": diagnostic.range.end.character,
        }
        if self.path:
            data["path"] = self.path

        return json.dumps(data, ensure_ascii=False)
