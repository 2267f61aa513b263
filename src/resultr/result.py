"""Result type for explicit, exception-free error handling.

A ``Result`` is either ``Ok`` (holding a value) or ``Err`` (holding an
exception). The two variants are separate frozen dataclasses, so a result
that holds both or neither cannot be built.

    result = parse(text)
    if result.is_ok():
        handle(result.unwrap())
    else:
        report(result.unwrap_err())

Both variants also support structural pattern matching:

    match result:
        case Ok(value):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

import abc
import dataclasses
from typing import Never

from resultr._dev_flags import dev_validate_enabled
from resultr.errors import UnwrapError


class Result[V, E: Exception](abc.ABC):
    """Either a success value or a failure error, never both.

    Not instantiable itself; build results with ``Ok`` and ``Err``.
    """

    __slots__ = ()

    @abc.abstractmethod
    def is_ok(self) -> bool:
        """Return True if this result holds a value."""

    def is_err(self) -> bool:
        """Return True if this result holds an error."""
        return not self.is_ok()

    @abc.abstractmethod
    def unwrap(self) -> V:
        """Return the value, or raise the carried error on ``Err``.

        Check ``is_ok()`` first; the raised exception is the very object the
        ``Err`` holds, so ``except`` clauses for its own type still match.
        """

    @abc.abstractmethod
    def unwrap_err(self) -> E:
        """Return the error, or raise ``UnwrapError`` on ``Ok``."""


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[V](Result[V, Never]):
    """A successful result."""

    value: V

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> V:
        return self.value

    def unwrap_err(self) -> Never:
        raise UnwrapError(
            "Called unwrap_err on an Ok result",
            hint="Check is_err() before calling unwrap_err()",
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E: Exception](Result[Never, E]):
    """A failed result, containing the error."""

    error: E

    def __post_init__(self) -> None:
        if dev_validate_enabled() and not isinstance(self.error, Exception):
            raise TypeError(
                f"Err expects an Exception instance, got {type(self.error).__name__}"
            )

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Never:
        raise self.error

    def unwrap_err(self) -> E:
        return self.error
