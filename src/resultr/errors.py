"""Exception hierarchy for resultr.

Errors carried by ``Err`` are never wrapped. The classes here are the only
ones the library creates itself.
"""

from __future__ import annotations


class ResultrError(Exception):
    """Base exception for all errors raised by resultr."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class UnwrapError(ResultrError):
    """An accessor was called on the wrong variant of a Result.

    Raised by ``Ok.unwrap_err()``. ``Err.unwrap()`` does not use this class:
    it re-raises the carried error itself.
    """


class NonExceptionError(ResultrError):
    """Stand-in for a failure payload that was not an ``Exception``.

    Only the text of the original payload survives; ``payload_type`` records
    the name of its type.
    """

    def __init__(
        self, message: str, *, payload_type: str, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.payload_type = payload_type
