"""Formlets exception hierarchy.

Validation failures are never raised: ``extract`` returns them as
``Err`` values. Exceptions are reserved for programmer errors and for
callers that opt in to unwrapping a result.
"""


class FormletError(Exception):
    """Base for all formlets-specific errors."""


class ConfigurationError(FormletError):
    """Raised when a formlet is constructed with invalid arguments.

    Typically surfaces at form-definition time, before any request.
    """


class ExtractionError(FormletError):
    """Raised when an invalid result is unwrapped.

    Attributes:
        errors: The accumulated field errors, in left-to-right order.
    """

    def __init__(self, errors: tuple[str, ...]) -> None:
        self.errors = errors
        super().__init__("; ".join(e for e in errors if e) or "form extraction failed")
