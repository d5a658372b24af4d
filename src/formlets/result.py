"""Extraction results — a success value or an ordered list of errors.

Failures are plain values so they can be accumulated across fields
instead of short-circuiting on the first one::

    result = form.extract(params)
    if not result:
        return render_form(errors=result.errors)
    person = result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from formlets.errors import ExtractionError


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful extraction. Always truthy."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def errors(self) -> tuple[str, ...]:
        return ()

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: Any) -> T:
        return self.value

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    """A failed extraction carrying one or more error messages.

    ``errors`` is never empty: an empty list means "no error", which is
    expressed by ``Ok`` instead. Falsy, so you can write ``if not result:``.
    """

    errors: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.errors, (str, bytes)):
            msg = "Err expects a sequence of messages, not a single string; use failure()"
            raise TypeError(msg)
        errors = tuple(self.errors)
        if not errors:
            msg = "Err requires at least one error message"
            raise ValueError(msg)
        object.__setattr__(self, "errors", errors)

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise ``ExtractionError`` with the accumulated errors."""
        raise ExtractionError(self.errors)

    def value_or[D](self, default: D) -> D:
        return default

    def __add__(self, other: Err) -> Err:
        """Concatenate error lists, keeping left-to-right order."""
        return Err(self.errors + other.errors)

    def __bool__(self) -> bool:
        return False


type Result[T] = Ok[T] | Err


def failure(*messages: str) -> Err:
    """Build an ``Err`` from one or more messages.

    An empty message is allowed; it still counts as an error.
    """
    return Err(messages)
