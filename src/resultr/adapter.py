"""Adapters from exception-raising callables to ``Result`` values.

``resultr`` calls the function straight away and looks at what came back:

- a plain value becomes ``Ok(value)``, returned immediately;
- a raised ``Exception`` becomes ``Err(exc)``, returned immediately;
- an awaitable makes ``resultr`` return a coroutine that settles to ``Ok`` or
  ``Err`` once awaited. Awaiting it never raises an ``Exception``.

``resultr_async`` is the explicitly asynchronous entry point. It defers the
call into the coroutine body, so even a synchronous raise is reported as a
deferred ``Err``.

Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and ``asyncio.CancelledError`` propagate unchanged.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, overload

from resultr.errors import NonExceptionError
from resultr.result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

__all__ = ["normalize_error", "resultr", "resultr_async"]

logger = logging.getLogger(__name__)


def normalize_error(payload: object) -> Exception:
    """Return ``payload`` if it is an ``Exception``, else a stand-in error.

    The stand-in is a ``NonExceptionError`` whose message is ``str(payload)``.
    The original object is not kept.
    """
    if isinstance(payload, Exception):
        return payload
    payload_type = type(payload).__qualname__
    logger.debug("Normalizing non-exception failure payload of type %s", payload_type)
    return NonExceptionError(str(payload), payload_type=payload_type)


def _describe(fn: object) -> str:
    # Never repr() the callable: it runs inside the except handlers.
    return getattr(fn, "__qualname__", None) or type(fn).__qualname__


def _capture(fn: object, exc: Exception) -> Err[Exception]:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Captured %s from %s", type(exc).__name__, _describe(fn))
    return Err(normalize_error(exc))


async def _settle[V](fn: object, awaitable: Awaitable[V]) -> Result[V, Exception]:
    try:
        value = await awaitable
    except Exception as exc:
        return _capture(fn, exc)
    return Ok(value)


@overload
def resultr[V](
    fn: Callable[[], Awaitable[V]],
) -> Coroutine[Any, Any, Result[V, Exception]]: ...


@overload
def resultr[V](fn: Callable[[], V]) -> Result[V, Exception]: ...


def resultr(fn: Callable[[], Any]) -> Any:
    """Call ``fn`` and wrap its outcome in a ``Result``.

    Args:
        fn: Zero-argument callable. Close over any arguments it needs.

    Returns:
        ``Ok``/``Err`` for synchronous outcomes, or a coroutine resolving to
        one when ``fn`` returns an awaitable.

    Example:
        result = resultr(lambda: json.loads(text))
        if result.is_ok():
            print(result.unwrap())

        response = await resultr(lambda: client.get(url))
    """
    try:
        outcome = fn()
    except Exception as exc:
        return _capture(fn, exc)

    if inspect.isawaitable(outcome):
        return _settle(fn, outcome)
    return Ok(outcome)


async def resultr_async[V](fn: Callable[[], Awaitable[V]]) -> Result[V, Exception]:
    """Await ``fn()`` and wrap its outcome in a ``Result``.

    Unlike ``resultr``, ``fn`` is only called once the returned coroutine is
    awaited, and a synchronous raise from ``fn`` is reported the same way as
    a rejected awaitable. A non-awaitable return value is wrapped as ``Ok``.
    """
    try:
        outcome = fn()
        value = await outcome if inspect.isawaitable(outcome) else outcome
    except Exception as exc:
        return _capture(fn, exc)
    return Ok(value)
