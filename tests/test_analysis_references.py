"""Tests for analysis.references: module reference extraction from TypeScript."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from importcheck.analysis.references import ModuleReference, extract_references, unescape_string
from importcheck.enums import LanguageId
from importcheck.syntax import parse_source
from tests.strategies import (
    IGNORED_FORMS,
    RECOGNIZED_FORMS,
    ignored_statements,
    recognized_statements,
    specifiers,
)


def _texts(source: str, language_id: LanguageId = LanguageId.TYPESCRIPT) -> list[str]:
    return [ref.text for ref in extract_references(parse_source(source, language_id))]


# ============================================================================
# RECOGNIZED FORMS
# ============================================================================


class TestRecognizedForms:
    """Each of the four reference syntaxes is found."""

    @pytest.mark.parametrize("form", sorted(RECOGNIZED_FORMS))
    def test_form_is_extracted(self, form: str) -> None:
        """Every recognized form yields exactly its specifier."""
        source = RECOGNIZED_FORMS[form].format(spec="./mod.ts")
        assert _texts(source) == ["./mod.ts"]

    def test_single_quotes(self) -> None:
        """Single-quoted literals are string literals too."""
        assert _texts("import x from './a.ts';") == ["./a.ts"]

    def test_export_without_source_is_ignored(self) -> None:
        """Local exports name no module."""
        assert _texts("const a = 1;\nexport { a };\nexport default a;") == []

    @pytest.mark.parametrize(
        "source",
        [
            'export default "hello";',
            'export = "./lib.ts";',
            'export default "./lib.ts";\nexport = "./other.ts";',
        ],
    )
    def test_exported_string_value_is_ignored(self, source: str) -> None:
        """A string exported as a value is not a module specifier."""
        assert _texts(source) == []

    def test_exported_import_equals(self) -> None:
        """export import x = require(...) names a module like its unexported form."""
        assert _texts('export import q = require("./q.ts");') == ["./q.ts"]

    def test_exported_import_equals_among_type_forms(self) -> None:
        """Exported import-equals keeps its place between type-only forms."""
        source = (
            'import type { T } from "./t";\n'
            'export import q = require("./q.ts");\n'
            'export type { U } from "./u";'
        )
        assert _texts(source) == ["./t", "./q.ts", "./u"]

    def test_dynamic_import_without_argument_is_skipped(self) -> None:
        """import() with no argument has no literal."""
        assert _texts("const m = import();") == []

    def test_dynamic_import_with_expression_is_skipped(self) -> None:
        """Only a string literal first argument counts."""
        assert _texts("const p = './a.ts';\nconst m = import(p);") == []

    def test_dynamic_import_uses_first_argument(self) -> None:
        """Import attributes after the specifier are not references."""
        assert _texts('const m = import("./a.json", { with: { type: "json" } });') == [
            "./a.json"
        ]

    def test_dynamic_import_comment_before_argument(self) -> None:
        """Comments between the parenthesis and the literal are skipped."""
        assert _texts('const m = import(/* lazy */ "./a.ts");') == ["./a.ts"]

    def test_empty_specifier_is_kept(self) -> None:
        """An empty literal is still a literal."""
        refs = extract_references(parse_source('import "";'))
        assert [r.text for r in refs] == [""]
        assert refs[0].start_offset == refs[0].end_offset

    def test_tsx_document(self) -> None:
        """The TSX grammar recognizes the same forms alongside JSX."""
        source = (
            'import React from "https://esm.sh/react.js";\n'
            'export const App = () => <div>{"./not-a-module"}</div>;\n'
        )
        assert _texts(source, LanguageId.TYPESCRIPT_REACT) == ["https://esm.sh/react.js"]


# ============================================================================
# IGNORED FORMS
# ============================================================================


class TestIgnoredForms:
    """Constructs that mention specifiers but are not references."""

    @pytest.mark.parametrize("form", sorted(IGNORED_FORMS))
    def test_form_is_ignored(self, form: str) -> None:
        """require(), plain strings, template literals and methods are ignored."""
        source = IGNORED_FORMS[form].format(spec="http://example.com/mod.ts")
        assert _texts(source) == []

    def test_empty_document(self) -> None:
        """A document without code has no references."""
        assert _texts("") == []
        assert _texts("// only a comment\n") == []


# ============================================================================
# ORDER AND NESTING
# ============================================================================


class TestOrderAndNesting:
    """References at any depth, in document order."""

    def test_document_order(self) -> None:
        """Mixed forms come back in source order."""
        source = (
            'import a from "./a.ts";\n'
            'export * from "./b.ts";\n'
            "async function load() {\n"
            "  if (cond) {\n"
            '    for (const x of xs) { await import("./c.ts"); }\n'
            "  }\n"
            "}\n"
            'import d = require("./d.ts");\n'
        )
        assert _texts(source) == ["./a.ts", "./b.ts", "./c.ts", "./d.ts"]

    def test_deeply_nested_dynamic_import(self) -> None:
        """Deep nesting does not exhaust the recursion limit."""
        depth = 1200
        source = "(" * depth + 'import("./deep.ts")' + ")" * depth + ";"
        assert _texts(source) == ["./deep.ts"]

    def test_malformed_document(self) -> None:
        """Extraction works on trees with recovered syntax errors."""
        source = 'import a from "./a.ts";\nconst x = ;\nimport b from "./b.ts";\n'
        tree = parse_source(source)
        assert tree.has_error
        assert _texts(source) == ["./a.ts", "./b.ts"]

    @given(st.lists(specifiers(), min_size=1, max_size=6), st.data())
    def test_order_property(self, specs: list[str], data: st.DataObject) -> None:
        """PROPERTY: One reference per recognized statement, in order."""
        lines = [data.draw(recognized_statements(spec)) for spec in specs]
        assert _texts("\n".join(lines)) == specs

    @given(specifiers(), st.data())
    def test_ignored_property(self, spec: str, data: st.DataObject) -> None:
        """PROPERTY: Ignored forms never produce references."""
        assert _texts(data.draw(ignored_statements(spec))) == []


# ============================================================================
# INTENSIVE PROPERTIES (run with -m fuzz)
# ============================================================================


@pytest.mark.fuzz
class TestExtractionFuzz:
    """Long mixed documents; excluded from normal runs."""

    @given(st.lists(specifiers(), min_size=1, max_size=40), st.data())
    @settings(max_examples=2000)
    def test_order_in_long_documents(self, specs: list[str], data: st.DataObject) -> None:
        """PROPERTY: Order holds for long documents interleaved with ignored forms."""
        lines: list[str] = []
        for spec in specs:
            if data.draw(st.booleans()):
                lines.append(data.draw(ignored_statements(spec)))
            lines.append(data.draw(recognized_statements(spec)))
        assert _texts("\n".join(lines)) == specs

    @given(st.lists(specifiers(), min_size=1, max_size=40), st.data())
    @settings(max_examples=2000)
    def test_offsets_in_long_documents(self, specs: list[str], data: st.DataObject) -> None:
        """PROPERTY: Spans slice back to their text behind arbitrary padding."""
        padding = st.sampled_from(["", " ", "\n\n", "/* é */ ", "// ✓\n"])
        source = "".join(
            data.draw(padding) + data.draw(recognized_statements(spec)) + "\n" for spec in specs
        )
        refs = extract_references(parse_source(source))
        assert [ref.text for ref in refs] == specs
        for ref in refs:
            assert source[ref.start_offset : ref.end_offset] == ref.text


# ============================================================================
# OFFSETS
# ============================================================================


class TestOffsets:
    """Offsets point at the specifier text, quotes excluded."""

    def test_offsets_exclude_quotes(self) -> None:
        """start/end bracket the plain text; literal bounds include quotes."""
        source = 'import x from "./a";'
        (ref,) = extract_references(parse_source(source))
        assert ref == ModuleReference(
            text="./a", start_offset=15, end_offset=18, literal_start=14, literal_end=19
        )
        assert source[ref.start_offset : ref.end_offset] == "./a"

    def test_extra_whitespace_before_literal(self) -> None:
        """Whitespace between the keyword and the literal is not part of the text."""
        source = 'import x from      "./a.ts";'
        (ref,) = extract_references(parse_source(source))
        assert source[ref.start_offset : ref.end_offset] == "./a.ts"

    def test_newline_before_literal(self) -> None:
        """Literals on their own line are located correctly."""
        source = 'export {\n  a,\n} from\n  "./a.ts";'
        (ref,) = extract_references(parse_source(source))
        assert source[ref.start_offset : ref.end_offset] == "./a.ts"

    def test_non_ascii_text_before_literal(self) -> None:
        """Offsets are characters, not UTF-8 bytes."""
        source = '// héllo wörld ✓\nimport "./a.ts";'
        (ref,) = extract_references(parse_source(source))
        assert source[ref.start_offset : ref.end_offset] == "./a.ts"

    def test_non_ascii_specifier(self) -> None:
        """Specifier text itself may contain non-ASCII characters."""
        source = 'import "./ünïcode.ts";'
        (ref,) = extract_references(parse_source(source))
        assert ref.text == "./ünïcode.ts"
        assert source[ref.start_offset : ref.end_offset] == ref.text

    @given(st.lists(specifiers(), min_size=1, max_size=4), st.data())
    def test_offsets_property(self, specs: list[str], data: st.DataObject) -> None:
        """PROPERTY: Every reference's span slices back to its text."""
        source = "\n".join(data.draw(recognized_statements(spec)) for spec in specs)
        for ref in extract_references(parse_source(source)):
            assert source[ref.start_offset : ref.end_offset] == ref.text
            assert source[ref.literal_start] == '"'
            assert ref.literal_start < ref.start_offset <= ref.end_offset < ref.literal_end


# ============================================================================
# ESCAPE SEQUENCES
# ============================================================================


class TestEscapeSequences:
    """Specifier text is the literal's decoded value; spans cover its source."""

    def test_unicode_escape_is_decoded(self) -> None:
        """\\u0061 is the letter a."""
        source = 'import a from "./\\u0061.ts";'
        (ref,) = extract_references(parse_source(source))
        assert ref.text == "./a.ts"
        assert source[ref.start_offset : ref.end_offset] == "./\\u0061.ts"
        assert ref.literal_end == ref.end_offset + 1

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("./a.ts", "./a.ts"),
            ("./\\x61.ts", "./a.ts"),
            ("./\\u{61}.ts", "./a.ts"),
            ("./\\u{1F600}.ts", "./\U0001f600.ts"),
            ("./\\ud83d\\ude00.ts", "./\U0001f600.ts"),
            ("./a\\\nb.ts", "./ab.ts"),
            ("./a\\\r\nb.ts", "./ab.ts"),
            ("./\\'q\\'.ts", "./'q'.ts"),
            ('./\\"q\\".ts', './"q".ts'),
            ("./a\\\\b.ts", "./a\\b.ts"),
            ("./\\n\\t", "./\n\t"),
            ("./\\q.ts", "./q.ts"),
            ("./\\u{110000}", "./\\u{110000}"),
        ],
    )
    def test_unescape_string(self, raw: str, expected: str) -> None:
        """JavaScript escape forms decode to their characters."""
        assert unescape_string(raw) == expected

    def test_escaped_specifier_in_dynamic_import(self) -> None:
        """Dynamic imports decode their argument the same way."""
        assert _texts('const m = import("./\\x62.ts");') == ["./b.ts"]

    def test_offsets_after_escaped_specifier(self) -> None:
        """A following reference is located correctly after an escaped one."""
        source = 'import "./\\u0061.ts";\nimport "./b.ts";'
        first, second = extract_references(parse_source(source))
        assert first.text == "./a.ts"
        assert source[second.start_offset : second.end_offset] == "./b.ts"


class TestModuleReferenceInvariants:
    """ModuleReference validation."""

    def test_inverted_span_rejected(self) -> None:
        """end_offset before start_offset is invalid."""
        with pytest.raises(ValueError, match="end_offset"):
            ModuleReference(text="x", start_offset=5, end_offset=4, literal_start=0, literal_end=9)

    def test_span_outside_literal_rejected(self) -> None:
        """The text span must sit inside the literal."""
        with pytest.raises(ValueError, match="outside"):
            ModuleReference(text="x", start_offset=1, end_offset=2, literal_start=3, literal_end=9)
