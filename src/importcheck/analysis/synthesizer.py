"""Diagnostic synthesis for module references.

Applies the specifier policy to each extracted reference and builds the
ordered diagnostic sequence for a document.

Per reference, four independent checks run in a fixed order, and every
applicable one reports:

1. Specifier form: relative or http(s) URL       -> INVALID_SPECIFIER_FORM
2. Extension: one of VALID_EXTENSIONS            -> MISSING_EXTENSION
3. Protocol: remote specifiers should use https  -> INSECURE_PROTOCOL_PREFERRED
4. Existence: resolved file must exist           -> LOCAL/REMOTE_MODULE_NOT_FOUND

Only the existence check performs I/O; its blocking stat runs in a worker
thread. References are evaluated concurrently; results are reassembled in
reference order.

Python 3.13+.
"""

import asyncio
import logging
from collections.abc import Sequence

from importcheck.diagnostics import Diagnostic, DiagnosticTemplate, ModuleResolutionError
from importcheck.diagnostics.codes import Range
from importcheck.resolution.resolver import ModuleResolver
from importcheck.syntax.position import LineOffsetCache

from .references import ModuleReference
from .rules import has_valid_extension, is_insecure_remote, is_supported_form

__all__ = ["check_reference", "check_specifier", "synthesize"]

logger = logging.getLogger(__name__)


def check_specifier(specifier: str, range_: Range) -> list[Diagnostic]:
    """Run the pure (non-I/O) checks for one specifier.

    Args:
        specifier: Module specifier text
        range_: Range attached to every diagnostic produced

    Returns:
        Diagnostics in check order
    """
    diagnostics: list[Diagnostic] = []

    if not is_supported_form(specifier):
        diagnostics.append(DiagnosticTemplate.invalid_specifier_form(range_))

    if not has_valid_extension(specifier):
        diagnostics.append(DiagnosticTemplate.missing_extension(range_))

    if is_insecure_remote(specifier):
        diagnostics.append(DiagnosticTemplate.insecure_protocol(range_))

    return diagnostics


async def check_reference(
    reference: ModuleReference,
    range_: Range,
    base_directory: str,
    resolver: ModuleResolver,
) -> list[Diagnostic]:
    """Run every check for one reference.

    Makes exactly one resolver call. A resolution failure suppresses only
    the existence diagnostic; the pure checks still report.

    Args:
        reference: Reference to check
        range_: Editor range of the reference's specifier text
        base_directory: Directory of the importing document
        resolver: Module-resolution service

    Returns:
        Diagnostics for this reference, in check order
    """
    diagnostics = check_specifier(reference.text, range_)

    try:
        module = await resolver.resolve(base_directory, reference.text)
        # exists() stats the filesystem; keep it off the event loop
        found = await asyncio.to_thread(resolver.exists, module.filepath)
    except (ModuleResolutionError, OSError) as e:
        logger.warning("Skipping existence check for '%s': %s", reference.text, e)
        return diagnostics

    if not found:
        diagnostics.append(
            DiagnosticTemplate.module_not_found(
                range_, module.raw_specifier, remote=module.is_remote
            )
        )

    return diagnostics


async def synthesize(
    references: Sequence[ModuleReference],
    text: str,
    base_directory: str,
    resolver: ModuleResolver,
) -> tuple[Diagnostic, ...]:
    """Produce the ordered diagnostics for a document's references.

    Args:
        references: References in document order
        text: Document text the reference offsets point into
        base_directory: Directory of the importing document
        resolver: Module-resolution service

    Returns:
        Diagnostics grouped by reference, in reference order

    Thread Safety:
        No state is shared between references or between calls.
    """
    if not references:
        return ()

    lines = LineOffsetCache(text)
    per_reference = await asyncio.gather(
        *(
            check_reference(
                reference,
                lines.range(reference.start_offset, reference.end_offset),
                base_directory,
                resolver,
            )
            for reference in references
        )
    )

    diagnostics = tuple(d for group in per_reference for d in group)
    logger.debug(
        "Synthesized %d diagnostic(s) for %d reference(s)",
        len(diagnostics),
        len(references),
    )
    return diagnostics
