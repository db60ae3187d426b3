"""Suggested fixes for diagnostics.

Maps each DiagnosticKind to at most one fix descriptor and turns fixable
diagnostics into quick-fix code actions. The remediation commands named
here (creating a file, fetching a remote module) are executed by the
editor layer, not by this package.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from importcheck.constants import DIAGNOSTIC_SOURCE

from .codes import Diagnostic, DiagnosticKind, Range

__all__ = [
    "FIX_TABLE",
    "QUICKFIX",
    "CodeAction",
    "Command",
    "FixDescriptor",
    "build_code_actions",
    "lookup_fix",
]

# LSP CodeActionKind for quick fixes
QUICKFIX: str = "quickfix"


@dataclass(frozen=True, slots=True)
class FixDescriptor:
    """Display title and opaque command identifier of a suggested fix.

    Attributes:
        title: Text shown to the user
        action_id: Editor command dispatched when the fix is applied
    """

    title: str
    action_id: str


FIX_TABLE: Mapping[DiagnosticKind, FixDescriptor] = MappingProxyType(
    {
        DiagnosticKind.MISSING_EXTENSION: FixDescriptor(
            title="Add `.ts` extension.",
            action_id="deno._add_missing_extension",
        ),
        DiagnosticKind.INSECURE_PROTOCOL_PREFERRED: FixDescriptor(
            title="Use HTTPS module.",
            action_id="deno._use_https_module",
        ),
        DiagnosticKind.LOCAL_MODULE_NOT_FOUND: FixDescriptor(
            title="Create module.",
            action_id="deno._create_local_module",
        ),
        DiagnosticKind.REMOTE_MODULE_NOT_FOUND: FixDescriptor(
            title="Fetch module.",
            action_id="deno._fetch_remote_module",
        ),
    }
)


def lookup_fix(kind: DiagnosticKind) -> FixDescriptor | None:
    """Return the suggested fix for a diagnostic kind.

    Args:
        kind: Diagnostic kind to look up

    Returns:
        The fix descriptor, or None if the kind has no fix
        (INVALID_SPECIFIER_FORM)
    """
    return FIX_TABLE.get(kind)


@dataclass(frozen=True, slots=True)
class Command:
    """Editor command invocation.

    Attributes:
        title: Command title
        action_id: Command identifier
        uri: Document the command applies to
        range: Specifier text the command rewrites (quotes excluded)
    """

    title: str
    action_id: str
    uri: str
    range: Range

    def to_lsp(self) -> dict[str, object]:
        """Serialize as an LSP ``Command`` object."""
        return {
            "title": self.title,
            "command": self.action_id,
            "arguments": [self.uri, self.range.to_lsp()],
        }


@dataclass(frozen=True, slots=True)
class CodeAction:
    """Quick-fix code action offered for one diagnostic.

    Attributes:
        title: Title shown in the editor's fix menu
        command: Command run when the action is chosen
        kind: LSP CodeActionKind (always "quickfix")
    """

    title: str
    command: Command
    kind: str = QUICKFIX

    def to_lsp(self) -> dict[str, object]:
        """Serialize as an LSP ``CodeAction`` object."""
        return {"title": self.title, "kind": self.kind, "command": self.command.to_lsp()}


def build_code_actions(
    uri: str,
    diagnostics: Iterable[Diagnostic],
    *,
    source: str = DIAGNOSTIC_SOURCE,
) -> list[CodeAction]:
    """Build quick-fix actions for the fixable diagnostics of a document.

    Diagnostics from other producers are ignored, as are kinds without a
    fix. The command range is the diagnostic's range: the literal span
    already narrowed by one character on each side, so the remediation
    command sees the bare specifier.

    Args:
        uri: Document identifier passed to each command
        diagnostics: Diagnostics the editor reports for the request range
        source: Producer whose diagnostics are handled

    Returns:
        Code actions in diagnostic order
    """
    actions: list[CodeAction] = []
    for diagnostic in diagnostics:
        if diagnostic.source != source:
            continue
        fix = lookup_fix(diagnostic.kind)
        if fix is None:
            continue
        actions.append(
            CodeAction(
                title=f"{fix.title} ({source})",
                command=Command(
                    title=fix.title,
                    action_id=fix.action_id,
                    uri=uri,
                    range=diagnostic.range,
                ),
            )
        )
    return actions
