"""
Conversion Exception Classes

Typed exception hierarchy used across the WorkloadEndpoint upgrade step.
"""

from typing import Any


class ConversionError(Exception):
    """Base exception for all conversion errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class MalformedIdentifierError(ConversionError):
    """
    Raised when a workload id or resource name cannot be decoded.

    The stored record itself is malformed, so retrying is pointless; the
    caller decides whether to skip the record or stop. ``str()`` returns the
    bare message so that it can be matched verbatim.
    """

    def __init__(self, message: str, identifier: str) -> None:
        super().__init__(message, "MALFORMED_IDENTIFIER", {"identifier": identifier})
        self.identifier = identifier

    def __str__(self) -> str:
        return self.args[0]

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for triaging the record."""
        return (
            f"Recreate the workload behind '{self.identifier}' through the "
            "orchestrator integration, or skip this record"
        )


class DocumentLoadError(ConversionError):
    """Raised by the I/O layer when a document cannot be read or parsed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        context = {}
        if source:
            context["source"] = source
        super().__init__(message, "DOCUMENT_LOAD_ERROR", context)


class UnsupportedDocumentError(DocumentLoadError):
    """Raised when a document is not a WorkloadEndpoint this tool converts."""


class ValidationError(ConversionError):
    """Raised when command line input validation fails."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        actual_value: Any = None,
    ) -> None:
        context = {}
        if field_name:
            context["field_name"] = field_name
        if actual_value is not None:
            context["actual_value"] = str(actual_value)
        super().__init__(message, "VALIDATION_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the validation error."""
        if "field_name" in self.context:
            return f"Check the value given for '{self.context['field_name']}'"
        return "Check the command line arguments"
