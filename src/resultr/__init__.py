"""resultr: Result values instead of exceptions.

Public API:
    - Ok / Err: Build success and failure results
    - Result: Common base of Ok and Err
    - resultr(): Wrap a sync or async callable into a Result
    - resultr_async(): Explicitly asynchronous variant of resultr()
    - normalize_error(): Coerce any failure payload into an Exception
"""

from __future__ import annotations

import logging

from resultr.adapter import normalize_error, resultr, resultr_async
from resultr.errors import NonExceptionError, ResultrError, UnwrapError
from resultr.result import Err, Ok, Result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultr")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultr").addHandler(logging.NullHandler())

__all__ = [
    "Err",
    "NonExceptionError",
    "Ok",
    "Result",
    "ResultrError",
    "UnwrapError",
    "normalize_error",
    "resultr",
    "resultr_async",
]
