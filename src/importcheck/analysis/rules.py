"""Specifier classification rules.

Pure predicates over a module specifier string. None of them can fail
and none depend on anything but the specifier.

Python 3.13+. Zero external dependencies.
"""

from importcheck.constants import (
    EXTENSION_PATTERN,
    RELATIVE_SPECIFIER_PATTERN,
    REMOTE_SPECIFIER_PATTERN,
    SECURE_SPECIFIER_PATTERN,
    VALID_EXTENSIONS,
)

__all__ = [
    "extension_of",
    "has_valid_extension",
    "is_insecure_remote",
    "is_relative",
    "is_remote",
    "is_supported_form",
]


def is_relative(specifier: str) -> bool:
    """True for specifiers starting with a dot and something after it."""
    return RELATIVE_SPECIFIER_PATTERN.match(specifier) is not None


def is_remote(specifier: str) -> bool:
    """True for http:// and https:// specifiers."""
    return REMOTE_SPECIFIER_PATTERN.match(specifier) is not None


def is_supported_form(specifier: str) -> bool:
    """True if the specifier is relative or remote.

    Bare names (``"lodash"``), absolute paths and other schemes are not.
    """
    return is_relative(specifier) or is_remote(specifier)


def extension_of(specifier: str) -> str | None:
    """Return the trailing extension including its dot, or None.

    Example:
        >>> extension_of("./mod.ts")
        '.ts'
        >>> extension_of("./mod") is None
        True
    """
    match = EXTENSION_PATTERN.search(specifier)
    return match.group(0) if match else None


def has_valid_extension(specifier: str) -> bool:
    """True if the trailing extension is in VALID_EXTENSIONS.

    The comparison is case-sensitive: ``./mod.TS`` does not qualify.
    """
    return extension_of(specifier) in VALID_EXTENSIONS


def is_insecure_remote(specifier: str) -> bool:
    """True for remote specifiers that do not use https://."""
    return is_remote(specifier) and SECURE_SPECIFIER_PATTERN.match(specifier) is None
