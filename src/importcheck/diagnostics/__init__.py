"""Diagnostic system for module references.

Provides structured diagnostics with closed kinds, ranges, fixed messages,
a fix lookup table, and output formatting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticKind, Position, Range
from .errors import (
    ConfigurationError,
    ImportCheckError,
    ModuleResolutionError,
    SourceParseError,
    UnknownDiagnosticKindError,
)
from .fixes import FIX_TABLE, CodeAction, Command, FixDescriptor, build_code_actions, lookup_fix
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import DiagnosticTemplate

__all__ = [
    "FIX_TABLE",
    "CodeAction",
    "Command",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticFormatter",
    "DiagnosticKind",
    "DiagnosticTemplate",
    "FixDescriptor",
    "ImportCheckError",
    "ModuleResolutionError",
    "OutputFormat",
    "Position",
    "Range",
    "SourceParseError",
    "UnknownDiagnosticKindError",
    "build_code_actions",
    "lookup_fix",
]
