"""Module reference extraction.

Walks a parsed TypeScript tree once and collects every string literal
that names a module. Recognized forms:

    import("./mod.ts")                 dynamic import
    import fs = require("./fs.ts")     import-equals declaration (optionally exported)
    import x from "./mod.ts"           import declaration (any clause, or none)
    export * from "./mod.ts"           re-export declaration

``require("...")`` calls, template strings, ``export default "..."`` and
every other construct are ignored. Extraction is a pure function of the tree.

Python 3.13+.
"""

import logging
import re
from dataclasses import dataclass

from tree_sitter import Node

from importcheck.syntax.parser import SourceTree
from importcheck.syntax.visitor import TreeVisitor, iter_preorder

__all__ = ["ModuleReference", "ReferenceExtractor", "extract_references", "unescape_string"]

logger = logging.getLogger(__name__)

# Node types that may appear between call arguments without being one
_TRIVIA_TYPES = frozenset({"comment"})


@dataclass(frozen=True, slots=True)
class ModuleReference:
    """A module specifier literal and where it sits in the document.

    All offsets are character offsets into the document text. The span
    covers the literal's source text, escapes included; ``text`` is the
    decoded string value.

    Attributes:
        text: Specifier value without quotes (e.g. ``./mod.ts``)
        start_offset: First character of the specifier source text
        end_offset: Just past the last character of the specifier source text
        literal_start: Opening quote of the literal
        literal_end: Just past the closing quote of the literal
    """

    text: str
    start_offset: int
    end_offset: int
    literal_start: int
    literal_end: int

    def __post_init__(self) -> None:
        """Validate ModuleReference invariants.

        Raises:
            ValueError: If the text span is inverted or leaves the literal
        """
        if self.end_offset < self.start_offset:
            msg = (
                f"ModuleReference.end_offset ({self.end_offset}) must be >= "
                f"start_offset ({self.start_offset})"
            )
            raise ValueError(msg)
        if self.start_offset < self.literal_start or self.end_offset > self.literal_end:
            msg = (
                f"Specifier span [{self.start_offset}, {self.end_offset}) lies outside "
                f"literal [{self.literal_start}, {self.literal_end})"
            )
            raise ValueError(msg)


# Single-character escapes of JavaScript string literals
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}

_ESCAPE_PATTERN = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)


def _decode_escape(match: re.Match[str]) -> str:
    body = match.group(1)
    if body[0] in "ux" and len(body) > 1:
        digits = body[2:-1] if body.startswith("u{") else body[1:]
        code_point = int(digits, 16)
        return chr(code_point) if code_point <= 0x10FFFF else match.group(0)
    # Line continuation
    if body in ("\r\n", "\n", "\r", "\u2028", "\u2029"):
        return ""
    return _SIMPLE_ESCAPES.get(body, body)


def unescape_string(raw: str) -> str:
    """Decode the escape sequences of a string literal's contents.

    Handles ``\\n``-style escapes, ``\\xHH``, ``\\uHHHH``, ``\\u{H...}`` and
    line continuations. Malformed escapes keep the escaped character.

    Example:
        >>> unescape_string(r"./\\u0061.ts")
        './a.ts'
    """
    if "\\" not in raw:
        return raw
    decoded = _ESCAPE_PATTERN.sub(_decode_escape, raw)
    # Join surrogate pairs written as two \uHHHH escapes
    return decoded.encode("utf-16-le", "surrogatepass").decode("utf-16-le", errors="replace")


def _leading_padding(raw_length: int, text: str) -> int:
    """Characters before the opening quote within a literal's raw span.

    The raw span starts where the preceding token ends, so it carries any
    whitespace or comments in front of the literal. Whatever is not the
    text itself or its two quotes is padding.
    """
    return abs(raw_length - (len(text) + 2))


class ReferenceExtractor(TreeVisitor):
    """Visitor collecting ModuleReference values in pre-order.

    Example:
        >>> extractor = ReferenceExtractor(source_tree)
        >>> extractor.walk(source_tree.root_node)
        >>> [ref.text for ref in extractor.references]
        ['./a.ts', 'https://deno.land/std/path/mod.ts']
    """

    def __init__(self, source: SourceTree) -> None:
        """Initialize extractor state.

        Args:
            source: Parsed document the walked nodes belong to
        """
        super().__init__()
        self._source = source
        self.references: list[ModuleReference] = []

    # import("./mod.ts")
    def visit_call_expression(self, node: Node) -> None:
        function = node.child_by_field_name("function")
        if function is None or function.type != "import":
            return
        self._add_first_argument(node)

    # import x from "./mod.ts"
    # import "./mod.ts"
    # import fs = require("./fs.ts")
    def visit_import_statement(self, node: Node) -> None:
        for child in node.named_children:
            if child.type == "import_require_clause":
                self._add_source(child)
                return
        self._add_source(node)

    # export { a } from "./mod.ts"
    # export * from "./mod.ts"
    # export import fs = require("./fs.ts")
    def visit_export_statement(self, node: Node) -> None:
        if _is_exported_import_equals(node):
            self._add_import_equals(node)
            return
        self._add_source(node)

    def _add_import_equals(self, node: Node) -> None:
        for child in iter_preorder(node):
            if child.type == "import_require_clause":
                self._add_source(child)
                return
            if child.type == "call_expression":
                function = child.child_by_field_name("function")
                if function is not None and self._source.node_text(function) == "require":
                    self._add_first_argument(child)
                    return

    def _add_first_argument(self, call: Node) -> None:
        arguments = call.child_by_field_name("arguments")
        if arguments is None:
            return
        args = [c for c in arguments.named_children if c.type not in _TRIVIA_TYPES]
        # import() with no argument names nothing
        if args and args[0].type == "string":
            self._add(args[0])

    def _add_source(self, node: Node) -> None:
        # `export default "x"` and `export = "x"` carry a string but no source
        source = node.child_by_field_name("source")
        if source is not None and source.type == "string":
            self._add(source)

    def _add(self, literal: Node) -> None:
        source = self._source
        children = literal.children
        if not children:
            return

        # Content runs from after the opening quote to the closing quote,
        # which parser recovery may have left missing (zero width).
        content_start_byte = children[0].end_byte
        content_end_byte = children[-1].start_byte if len(children) > 1 else literal.end_byte
        raw_text = source.source_bytes[content_start_byte:content_end_byte].decode(
            "utf-8", errors="replace"
        )

        literal_start = source.char_offset(literal.start_byte)
        literal_end = source.char_offset(literal.end_byte)
        previous = literal.prev_sibling
        raw_start = source.char_offset(previous.end_byte) if previous is not None else literal_start
        # Measured as though the closing quote were present
        raw_length = source.char_offset(content_end_byte) + 1 - raw_start

        start_offset = raw_start + _leading_padding(raw_length, raw_text) + 1
        end_offset = start_offset + len(raw_text)
        self.references.append(
            ModuleReference(
                text=unescape_string(raw_text),
                start_offset=start_offset,
                end_offset=end_offset,
                literal_start=literal_start,
                literal_end=max(literal_end, end_offset),
            )
        )


def _is_exported_import_equals(node: Node) -> bool:
    """True for ``export import x = require(...)``.

    A nested import_statement is left to visit_import_statement.
    """
    children = node.children
    if len(children) < 2:
        return False
    second = children[1]
    if second.type == "import":
        return True
    return (
        second.type != "import_statement"
        and second.child_count > 0
        and second.children[0].type == "import"
    )


def extract_references(source: SourceTree) -> tuple[ModuleReference, ...]:
    """Extract all module references from a parsed document.

    Args:
        source: Parsed document

    Returns:
        References in tree pre-order (document order)
    """
    extractor = ReferenceExtractor(source)
    extractor.walk(source.root_node)
    logger.debug(
        "Extracted %d module reference(s) from %s",
        len(extractor.references),
        source.uri or "<document>",
    )
    return tuple(extractor.references)
