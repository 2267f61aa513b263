"""Opt-in checks for development and test runs.

Flags are read from the environment on every call, so tests can toggle them
with ``monkeypatch.setenv`` without reloading modules.
"""

from __future__ import annotations

import os

__all__ = ["dev_validate_enabled"]


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Report whether ``Err`` should check that its payload is an Exception.

    An explicit ``override`` decides on its own. Without one, the check is
    on only when ``RESULTR_VALIDATE`` is set to ``"1"``; any other value,
    including ``"true"``, leaves it off.
    """
    if override is not None:
        return bool(override)
    return os.getenv("RESULTR_VALIDATE") == "1"
