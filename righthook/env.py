"""Boolean switches read from the environment."""

from __future__ import annotations

import os

_FALSE_VALUES = frozenset({"0", "false", "no"})


def var_bool(key: str) -> bool | None:
    """Read ``key`` as a boolean, or return None when it is unset.

    Any value other than ``0``, ``false`` or ``no`` (case-insensitive) is true.
    """
    value = os.environ.get(key)
    if value is None:
        return None
    return value.lower() not in _FALSE_VALUES


def is_verbose() -> bool:
    """Whether verbose output was requested via RIGHTHOOK_VERBOSE or RIGHTHOOK_DEBUG."""
    for key in ("RIGHTHOOK_VERBOSE", "RIGHTHOOK_DEBUG"):
        value = var_bool(key)
        if value is not None:
            return value
    return False


def is_trace() -> bool:
    """Whether trace output was requested via RIGHTHOOK_TRACE."""
    return bool(var_bool("RIGHTHOOK_TRACE"))