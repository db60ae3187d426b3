"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticKind, Range

__all__ = ["DiagnosticTemplate"]


class DiagnosticTemplate:
    """Centralized diagnostic templates.

    All diagnostics are created here so that each kind always carries the
    same message and severity, whatever check produced it.
    """

    @staticmethod
    def invalid_specifier_form(range_: Range) -> Diagnostic:
        """Specifier is a bare name (``"lodash"``) rather than a path or URL.

        Args:
            range_: Location of the specifier text

        Returns:
            Diagnostic for INVALID_SPECIFIER_FORM
        """
        return Diagnostic(
            kind=DiagnosticKind.INVALID_SPECIFIER_FORM,
            message="Deno only supports importing `relative/HTTP` module.",
            range=range_,
        )

    @staticmethod
    def missing_extension(range_: Range) -> Diagnostic:
        """Specifier lacks a loadable file extension.

        Args:
            range_: Location of the specifier text

        Returns:
            Diagnostic for MISSING_EXTENSION
        """
        return Diagnostic(
            kind=DiagnosticKind.MISSING_EXTENSION,
            message="Please specify valid extension name of the imported module.",
            range=range_,
        )

    @staticmethod
    def insecure_protocol(range_: Range) -> Diagnostic:
        """Remote specifier uses http instead of https.

        Args:
            range_: Location of the specifier text

        Returns:
            Diagnostic for INSECURE_PROTOCOL_PREFERRED
        """
        return Diagnostic(
            kind=DiagnosticKind.INSECURE_PROTOCOL_PREFERRED,
            message="For security, we recommend using the HTTPS module.",
            range=range_,
        )

    @staticmethod
    def module_not_found(range_: Range, raw_specifier: str, *, remote: bool) -> Diagnostic:
        """Resolved module does not exist.

        Args:
            range_: Location of the specifier text
            raw_specifier: Specifier as reported by the resolver
            remote: Whether the resolver flagged the module as remote

        Returns:
            Diagnostic for REMOTE_MODULE_NOT_FOUND or LOCAL_MODULE_NOT_FOUND
        """
        kind = (
            DiagnosticKind.REMOTE_MODULE_NOT_FOUND
            if remote
            else DiagnosticKind.LOCAL_MODULE_NOT_FOUND
        )
        return Diagnostic(
            kind=kind,
            message=f"Cannot find module `{raw_specifier}`.",
            range=range_,
        )
