"""
Error taxonomy for the intake pipeline.

Expected absence of data never raises out of the pipeline. These exceptions
are raised by low-level helpers and caught at the component boundary, where
they become issue codes on the record (or the ERROR status). Only programming
errors (illegal status transitions, malformed catalog or config files)
propagate to the caller.
"""

# Issue codes recorded on ExtractedFields / ReceiptRecord
ISSUE_MISSING_MERCHANT = "missing_field:merchant"
ISSUE_MISSING_TOTAL = "missing_field:total"
ISSUE_AMBIGUOUS_DATE = "ambiguous_field:date"
ISSUE_AMBIGUOUS_TOTAL = "ambiguous_field:total"
ISSUE_CLASSIFICATION_INDETERMINATE = "classification_indeterminate"
ISSUE_INSTRUMENT_PREFIX = "instrument:"


class IntakeError(Exception):
    """Base class for all intake pipeline errors."""

    pass


class ExtractionFailure(IntakeError):
    """No usable text at all. Maps to ERROR status; retry needs new OCR input."""

    pass


class AmbiguousField(IntakeError):
    """A field matched syntactically but failed semantic validation."""

    def __init__(self, field: str, raw: str, reason: str = ""):
        self.field = field
        self.raw = raw
        self.reason = reason
        message = f"{field} value {raw!r} is not valid"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    @property
    def issue_code(self) -> str:
        return f"ambiguous_field:{self.field}"


class ClassificationIndeterminate(IntakeError):
    """No category scored above zero; resolved to the "other" sentinel."""

    pass


class InvalidTransitionError(IntakeError):
    """Raised when a receipt status transition is not allowed."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"Cannot transition receipt from {source} to {target}")


class CatalogError(IntakeError):
    """Raised when a keyword catalog definition is malformed."""

    pass


class ConfigValidationError(IntakeError):
    """Raised when configuration validation fails."""

    pass
