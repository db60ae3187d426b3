"""importcheck exception hierarchy.

Every exception raised deliberately by the engine derives from
ImportCheckError so callers can catch the whole family with one clause.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ConfigurationError",
    "ImportCheckError",
    "ModuleResolutionError",
    "SourceParseError",
    "UnknownDiagnosticKindError",
]


class ImportCheckError(Exception):
    """Base exception for all importcheck errors."""


class SourceParseError(ImportCheckError):
    """The parser could not produce a syntax tree for a document.

    Raised for input the parser cannot tolerate at all (undecodable text,
    input over the size limit). Ordinary syntax errors do not raise: the
    parser recovers and the tree carries ERROR nodes instead.

    The diagnostics service swallows this error and reports nothing for
    the document.

    Attributes:
        uri: Document the failure belongs to (empty if unknown)
    """

    def __init__(self, message: str, *, uri: str = "") -> None:
        """Initialize SourceParseError.

        Args:
            message: Error message
            uri: Document identifier, if known
        """
        super().__init__(message)
        self.uri = uri


class ModuleResolutionError(ImportCheckError):
    """The module-resolution service could not give a definitive answer.

    Distinct from "module not found": a not-found result is a successful
    resolution whose filepath does not exist. This error means the lookup
    itself failed (malformed URL, network failure), so the existence check
    for the reference is skipped rather than reported.

    Attributes:
        specifier: Module specifier that failed to resolve
    """

    def __init__(self, message: str, *, specifier: str = "") -> None:
        """Initialize ModuleResolutionError.

        Args:
            message: Error message
            specifier: The specifier being resolved
        """
        super().__init__(message)
        self.specifier = specifier


class UnknownDiagnosticKindError(ImportCheckError, ValueError):
    """A diagnostic was constructed with a kind outside DiagnosticKind.

    Raised at construction time; unknown kinds are never defaulted.
    """


class ConfigurationError(ImportCheckError, ValueError):
    """Workspace settings could not be interpreted."""
