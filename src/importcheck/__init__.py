"""importcheck - static module-reference analysis for TypeScript documents.

Finds every module specifier a TypeScript/TSX document names (static
imports, import-equals declarations, re-exports and dynamic import()),
checks each one against Deno-style module resolution rules, and reports
ordered diagnostics with suggested fixes.

Public API:
    DiagnosticsService - Document-level analysis and publishing
    analyze - Analyse document text in one call
    extract_references - Module references of a parsed document
    lookup_fix - Suggested fix for a diagnostic kind
    parse_source - Parse TypeScript/TSX text with tree-sitter

Exceptions:
    ImportCheckError - Base exception class
    SourceParseError - Document could not be parsed at all
    ModuleResolutionError - Resolution service gave no definitive answer

Submodules:
    importcheck.analysis - Reference extraction, rules, synthesis
    importcheck.diagnostics - Diagnostic types, templates, fixes, formatting
    importcheck.resolution - Module-resolution protocol and Deno resolver
    importcheck.syntax - Parsing, tree walking, positions
"""

from .analysis import ModuleReference, extract_references, synthesize
from .config import WorkspaceConfig
from .diagnostics import (
    Diagnostic,
    DiagnosticKind,
    ImportCheckError,
    ModuleResolutionError,
    SourceParseError,
    lookup_fix,
)
from .enums import LanguageId, Severity
from .resolution import DenoModuleResolver, ModuleResolver, ResolvedModule
from .service import DiagnosticsService, PublishDiagnostics, TextDocument, base_directory_of
from .syntax import parse_source

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("importcheck")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


async def analyze(
    text: str,
    *,
    uri: str = "file:///untitled.ts",
    language_id: LanguageId = LanguageId.TYPESCRIPT,
    resolver: ModuleResolver | None = None,
) -> tuple[Diagnostic, ...]:
    """Analyse document text without setting up a service.

    Args:
        text: TypeScript or TSX source
        uri: Document identifier; its directory anchors relative specifiers
        language_id: Grammar to parse with
        resolver: Module-resolution service (default: DenoModuleResolver)

    Returns:
        Ordered diagnostics

    Raises:
        SourceParseError: If the text cannot be parsed at all
    """
    tree = parse_source(text, language_id, uri=uri)
    return await synthesize(
        extract_references(tree),
        text,
        base_directory_of(uri),
        resolver or DenoModuleResolver(),
    )


__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticsService",
    "DenoModuleResolver",
    "ImportCheckError",
    "LanguageId",
    "ModuleReference",
    "ModuleResolutionError",
    "ModuleResolver",
    "PublishDiagnostics",
    "ResolvedModule",
    "Severity",
    "SourceParseError",
    "TextDocument",
    "WorkspaceConfig",
    "__version__",
    "analyze",
    "extract_references",
    "lookup_fix",
    "parse_source",
]
