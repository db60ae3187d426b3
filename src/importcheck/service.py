"""Document-level diagnostics service.

Ties the pipeline together for an editor integration:

    document -> language/config gate -> parse -> extract -> synthesize -> publish

The protocol layer (transport, message framing) stays outside. It feeds
documents in through ``open_document``/``diagnose``, receives results
through the ``publish`` callable, and asks ``code_actions`` for fixes.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from importcheck.analysis import extract_references, synthesize
from importcheck.config import ConfigProvider, StaticConfigProvider
from importcheck.constants import DIAGNOSTIC_SOURCE
from importcheck.diagnostics import (
    CodeAction,
    Diagnostic,
    SourceParseError,
    build_code_actions,
)
from importcheck.enums import LanguageId
from importcheck.resolution import DenoModuleResolver, ModuleResolver
from importcheck.syntax import parse_source

__all__ = [
    "DiagnosticsService",
    "PublishDiagnostics",
    "TextDocument",
    "base_directory_of",
]

logger = logging.getLogger(__name__)

_SUPPORTED_LANGUAGES = frozenset(LanguageId)


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Snapshot of an editor document.

    Attributes:
        uri: Document identifier (usually a file:// URI)
        language_id: Editor language identifier
        version: Revision number, increasing with every edit
        text: Full document text
    """

    uri: str
    language_id: str
    version: int
    text: str


@dataclass(frozen=True, slots=True)
class PublishDiagnostics:
    """Diagnostics for one revision of one document.

    Attributes:
        uri: Document identifier
        version: Revision the diagnostics were computed for
        diagnostics: Ordered diagnostics (empty clears earlier results)
    """

    uri: str
    version: int
    diagnostics: tuple[Diagnostic, ...]

    def to_lsp(self) -> dict[str, object]:
        """Serialize as LSP ``PublishDiagnosticsParams``."""
        return {
            "uri": self.uri,
            "version": self.version,
            "diagnostics": [d.to_lsp() for d in self.diagnostics],
        }


type Publisher = Callable[[PublishDiagnostics], Awaitable[None]]


def base_directory_of(uri: str) -> str:
    """Return the directory of the document a URI names.

    Example:
        >>> base_directory_of("file:///home/me/app/main.ts")
        '/home/me/app'
    """
    return os.path.dirname(unquote(urlsplit(uri).path))


class DiagnosticsService:
    """Runs import analysis for editor documents and publishes the results.

    Each analysis is independent: nothing is cached between calls, so the
    same document and resolution state always give the same diagnostics.

    Example:
        >>> async def publish(params):
        ...     print(params.to_lsp())
        >>> service = DiagnosticsService(publish)
        >>> service.open_document(TextDocument(uri, "typescript", 1, text))
        >>> await service.diagnose(service.get_document(uri))
    """

    def __init__(
        self,
        publish: Publisher,
        *,
        config_provider: ConfigProvider | None = None,
        resolver: ModuleResolver | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            publish: Receives each completed diagnostics result
            config_provider: Per-document settings (default: always enabled)
            resolver: Module-resolution service (default: DenoModuleResolver)
        """
        self._publish = publish
        self._config_provider = config_provider or StaticConfigProvider()
        self._resolver = resolver or DenoModuleResolver()
        self._documents: dict[str, TextDocument] = {}

    # ------------------------------------------------------------------
    # Document store
    # ------------------------------------------------------------------

    def open_document(self, document: TextDocument) -> None:
        """Track a document (or a newer revision of it)."""
        self._documents[document.uri] = document

    def close_document(self, uri: str) -> None:
        """Stop tracking a document. Unknown URIs are ignored."""
        self._documents.pop(uri, None)

    def get_document(self, uri: str) -> TextDocument | None:
        """Return the tracked revision of a document, if any."""
        return self._documents.get(uri)

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    async def generate(self, document: TextDocument) -> tuple[Diagnostic, ...]:
        """Compute diagnostics for a document.

        Returns an empty result, without raising, for documents that are
        not TypeScript/TSX, documents with analysis disabled, and documents
        the parser cannot accept.

        Args:
            document: Document snapshot to analyse

        Returns:
            Ordered diagnostics
        """
        if document.language_id not in _SUPPORTED_LANGUAGES:
            logger.debug("Skipping %s: language %r", document.uri, document.language_id)
            return ()

        config = await self._config_provider.get_workspace_config(document.uri)
        if not config.enable:
            logger.debug("Skipping %s: analysis disabled", document.uri)
            return ()

        try:
            tree = parse_source(
                document.text, LanguageId(document.language_id), uri=document.uri
            )
        except SourceParseError as e:
            logger.debug("Skipping %s: %s", document.uri, e)
            return ()

        references = extract_references(tree)
        return await synthesize(
            references,
            document.text,
            base_directory_of(document.uri),
            self._resolver,
        )

    async def diagnose(self, document: TextDocument, *, timeout: float | None = None) -> None:
        """Analyse a document and publish the result.

        Nothing is published when the analysis times out, or when a newer
        revision of the document was opened while it ran.

        Args:
            document: Document snapshot to analyse
            timeout: Seconds to allow for the whole analysis (None = no limit)
        """
        try:
            async with asyncio.timeout(timeout):
                diagnostics = await self.generate(document)
        except TimeoutError:
            logger.warning(
                "Analysis of %s (version %d) timed out after %ss",
                document.uri,
                document.version,
                timeout,
            )
            return

        current = self._documents.get(document.uri)
        if current is not None and current.version > document.version:
            logger.debug(
                "Dropping stale diagnostics for %s (version %d < %d)",
                document.uri,
                document.version,
                current.version,
            )
            return

        await self._publish(
            PublishDiagnostics(
                uri=document.uri,
                version=document.version,
                diagnostics=diagnostics,
            )
        )

    async def handle_update_request(self, uri: str, *, timeout: float | None = None) -> None:
        """Re-analyse a tracked document on request and publish the result.

        Args:
            uri: Document identifier sent by the editor
            timeout: Seconds to allow for the analysis (None = no limit)
        """
        document = self._documents.get(uri)
        if document is None:
            logger.debug("Update requested for untracked document %s", uri)
            return
        await self.diagnose(document, timeout=timeout)

    # ------------------------------------------------------------------
    # Fixes
    # ------------------------------------------------------------------

    def code_actions(self, uri: str, diagnostics: Iterable[Diagnostic]) -> list[CodeAction]:
        """Suggest quick fixes for this service's diagnostics.

        Args:
            uri: Document the diagnostics belong to
            diagnostics: Diagnostics in the editor's request context

        Returns:
            One action per fixable diagnostic from this producer
        """
        return build_code_actions(uri, diagnostics, source=DIAGNOSTIC_SOURCE)
