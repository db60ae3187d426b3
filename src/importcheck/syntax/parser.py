"""TypeScript parsing via tree-sitter.

Wraps the tree-sitter TypeScript/TSX grammars and pairs the resulting
syntax tree with the document text, so that later stages can translate
tree-sitter's byte offsets into character offsets.

The parser recovers from syntax errors on its own: malformed documents
produce a tree with ERROR nodes rather than an exception. Only input the
parser cannot accept at all raises SourceParseError.

Python 3.13+.
"""

import logging
from dataclasses import dataclass, field
from functools import cache

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from importcheck.constants import MAX_SOURCE_SIZE
from importcheck.diagnostics.errors import SourceParseError
from importcheck.enums import LanguageId

__all__ = ["SourceTree", "get_language", "parse_source"]

logger = logging.getLogger(__name__)


@cache
def get_language(language_id: LanguageId) -> Language:
    """Return the tree-sitter grammar for a language identifier.

    Grammars are loaded once per process; parsed trees are never cached.
    """
    if language_id is LanguageId.TYPESCRIPT_REACT:
        return Language(tree_sitter_typescript.language_tsx())
    return Language(tree_sitter_typescript.language_typescript())


@dataclass(frozen=True, slots=True)
class SourceTree:
    """A parsed document: tree-sitter tree plus the text it was parsed from.

    Attributes:
        text: Document text
        tree: Syntax tree returned by tree-sitter (never mutated here)
        source_bytes: UTF-8 encoding of ``text`` that the tree was parsed from
        uri: Document identifier, for logging
    """

    text: str
    tree: Tree
    source_bytes: bytes
    uri: str = ""
    _is_ascii: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Remember whether byte and character offsets coincide."""
        object.__setattr__(self, "_is_ascii", self.text.isascii())

    @property
    def root_node(self) -> Node:
        """Root node of the syntax tree."""
        return self.tree.root_node

    @property
    def has_error(self) -> bool:
        """True if the parser had to recover from syntax errors."""
        return self.tree.root_node.has_error

    def char_offset(self, byte_offset: int) -> int:
        """Convert a UTF-8 byte offset from the tree into a character offset.

        Args:
            byte_offset: Offset reported by a tree-sitter node

        Returns:
            Offset into ``text``
        """
        if self._is_ascii:
            return byte_offset
        prefix = self.source_bytes[:byte_offset]
        return len(prefix.decode("utf-8", errors="replace"))

    def node_text(self, node: Node) -> str:
        """Return the source text covered by a node."""
        return self.source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def parse_source(
    text: str,
    language_id: LanguageId = LanguageId.TYPESCRIPT,
    *,
    uri: str = "",
) -> SourceTree:
    """Parse document text into a SourceTree.

    Args:
        text: Document text
        language_id: Selects the TypeScript or TSX grammar
        uri: Document identifier, carried for logging

    Returns:
        SourceTree for the document (possibly containing ERROR nodes)

    Raises:
        SourceParseError: If the text cannot be encoded, exceeds
            MAX_SOURCE_SIZE, or the parser rejects it outright
    """
    try:
        source_bytes = text.encode("utf-8")
    except UnicodeEncodeError as e:
        msg = f"Document is not valid Unicode text: {e}"
        raise SourceParseError(msg, uri=uri) from e

    if len(source_bytes) > MAX_SOURCE_SIZE:
        msg = f"Document size {len(source_bytes)} exceeds limit of {MAX_SOURCE_SIZE} bytes"
        raise SourceParseError(msg, uri=uri)

    parser = Parser(get_language(language_id))
    try:
        tree = parser.parse(source_bytes)
    except ValueError as e:
        msg = f"Parser rejected document: {e}"
        raise SourceParseError(msg, uri=uri) from e

    if tree is None:
        msg = "Parser produced no syntax tree"
        raise SourceParseError(msg, uri=uri)

    if tree.root_node.has_error:
        logger.debug("Parsed %s with recovered syntax errors", uri or "<document>")

    return SourceTree(text=text, tree=tree, source_bytes=source_bytes, uri=uri)
