"""Import Linter Example - Checking TypeScript Module References.

This example runs importcheck over TypeScript sources and prints the
diagnostics the way a command-line linter would:

- Bare package names that Deno cannot load
- Missing or unsupported file extensions
- Plain-http remote modules
- Relative modules that do not exist on disk

It also shows the quick fixes an editor would offer for each problem.

Usage:
    python examples/lint_imports.py                 # built-in samples
    python examples/lint_imports.py src/main.ts ... # lint real files

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import sys
import tempfile
from pathlib import Path

from importcheck import DiagnosticsService, PublishDiagnostics, TextDocument
from importcheck.diagnostics import DiagnosticFormatter, OutputFormat
from importcheck.enums import LanguageId


async def lint_file(path: Path, output_format: OutputFormat = OutputFormat.RUST) -> int:
    """Lint one file and print its diagnostics.

    Returns:
        Number of diagnostics reported
    """
    results: list[PublishDiagnostics] = []

    async def publish(params: PublishDiagnostics) -> None:
        results.append(params)

    service = DiagnosticsService(publish)
    language_id = LanguageId.TYPESCRIPT_REACT if path.suffix == ".tsx" else LanguageId.TYPESCRIPT
    document = TextDocument(
        uri=path.resolve().as_uri(),
        language_id=language_id,
        version=1,
        text=path.read_text(encoding="utf-8"),
    )
    service.open_document(document)
    await service.diagnose(document)

    diagnostics = results[0].diagnostics if results else ()
    formatter = DiagnosticFormatter(output_format=output_format, path=str(path))
    if not diagnostics:
        print(f"[OK] {path}: no issues found")
        return 0

    print(formatter.format_all(diagnostics))
    for action in service.code_actions(document.uri, diagnostics):
        print(f"  fix: {action.title} -> {action.command.action_id}")
    return len(diagnostics)


SAMPLE_SOURCE = """\
import { serve } from "https://deno.land/std/http/server.ts";
import { join } from "http://deno.land/std/path/mod.ts";
import lodash from "lodash";
import { helper } from "./helper";
import { config } from "./config.ts";

export * from "./exports.ts";

const lazy = await import("./lazy.tsx");
"""


def run_samples() -> None:
    """Lint a small throwaway project."""
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "config.ts").write_text("export const config = {};\n", encoding="utf-8")
        (root / "exports.ts").write_text("export const a = 1;\n", encoding="utf-8")
        main = root / "main.ts"
        main.write_text(SAMPLE_SOURCE, encoding="utf-8")

        print("=" * 60)
        print("Example 1: Rust-style output")
        print("=" * 60)
        asyncio.run(lint_file(main))

        print("\n" + "=" * 60)
        print("Example 2: Single-line output")
        print("=" * 60)
        asyncio.run(lint_file(main, OutputFormat.SIMPLE))

        print("\n" + "=" * 60)
        print("Example 3: JSON output")
        print("=" * 60)
        asyncio.run(lint_file(main, OutputFormat.JSON))


if __name__ == "__main__":
    if len(sys.argv) > 1:
        total = sum(asyncio.run(lint_file(Path(arg))) for arg in sys.argv[1:])
        sys.exit(1 if total else 0)

    run_samples()
    print("\n" + "=" * 60)
    print("[SUCCESS] Import linter examples complete!")
    print("=" * 60)
