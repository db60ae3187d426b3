"""Shared constants for importcheck.

This module provides centralized configuration constants used across
the syntax, analysis and service layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Producer identity: the ``source`` stamped on every diagnostic
- Specifier policy: regexes and the extension allow-set
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Producer identity
    "DIAGNOSTIC_SOURCE",
    # Specifier policy
    "VALID_EXTENSIONS",
    "RELATIVE_SPECIFIER_PATTERN",
    "REMOTE_SPECIFIER_PATTERN",
    "SECURE_SPECIFIER_PATTERN",
    "EXTENSION_PATTERN",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Deno cache layout
    "DENO_DIR_ENV",
    "DEFAULT_DENO_DIR",
]

# ============================================================================
# PRODUCER IDENTITY
# ============================================================================

# Identifier stamped into Diagnostic.source. Code actions are only offered for
# diagnostics carrying this source.
DIAGNOSTIC_SOURCE: str = "deno"

# ============================================================================
# SPECIFIER POLICY
# ============================================================================

# Extensions a module specifier may end with. Anything else (including no
# extension at all) is reported as MISSING_EXTENSION.
VALID_EXTENSIONS: frozenset[str] = frozenset(
    {".ts", ".tsx", ".js", ".jsx", ".json", ".wasm"}
)

# "./x", "../x", ".x" - anything starting with a dot followed by at least one char
RELATIVE_SPECIFIER_PATTERN: re.Pattern[str] = re.compile(r"^\..+")

# http:// or https:// URLs
REMOTE_SPECIFIER_PATTERN: re.Pattern[str] = re.compile(r"^https?://")

SECURE_SPECIFIER_PATTERN: re.Pattern[str] = re.compile(r"^https://")

# Trailing extension, e.g. ".ts" in "./mod.ts"
EXTENSION_PATTERN: re.Pattern[str] = re.compile(r"\.[a-zA-Z0-9]+$")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum document size in bytes (10 MB) accepted by the parser.
# Prevents unbounded memory allocation from pathological documents.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DENO CACHE LAYOUT
# ============================================================================

DENO_DIR_ENV: str = "DENO_DIR"

# Relative to the user's home directory
DEFAULT_DENO_DIR: str = ".cache/deno"
