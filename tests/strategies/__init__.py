"""Hypothesis strategies for importcheck property-based testing.

Usage:
    from tests.strategies import specifiers, relative_specifiers
    from tests.strategies.specifiers import RECOGNIZED_FORMS

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - extensions, specifiers, recognized_statements, ignored_statements
"""

from .specifiers import (
    IGNORED_FORMS,
    INVALID_EXTENSIONS,
    RECOGNIZED_FORMS,
    bare_specifiers,
    extensions,
    ignored_statements,
    invalid_extensions,
    module_paths,
    recognized_statements,
    relative_specifiers,
    remote_specifiers,
    specifiers,
    valid_extensions,
)

__all__ = [
    "IGNORED_FORMS",
    "INVALID_EXTENSIONS",
    "RECOGNIZED_FORMS",
    "bare_specifiers",
    "extensions",
    "ignored_statements",
    "invalid_extensions",
    "module_paths",
    "recognized_statements",
    "relative_specifiers",
    "remote_specifiers",
    "specifiers",
    "valid_extensions",
]
