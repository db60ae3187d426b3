"""Import analysis: reference extraction, classification and synthesis.

Python 3.13+.
"""

from .references import ModuleReference, ReferenceExtractor, extract_references, unescape_string
from .rules import (
    extension_of,
    has_valid_extension,
    is_insecure_remote,
    is_relative,
    is_remote,
    is_supported_form,
)
from .synthesizer import check_reference, check_specifier, synthesize

__all__ = [
    "ModuleReference",
    "ReferenceExtractor",
    "check_reference",
    "check_specifier",
    "extension_of",
    "extract_references",
    "has_valid_extension",
    "is_insecure_remote",
    "is_relative",
    "is_remote",
    "is_supported_form",
    "synthesize",
    "unescape_string",
]
