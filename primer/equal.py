"""Deep equality of arbitrary values, safe for cyclic structures."""

from __future__ import annotations

import dataclasses
import types
from typing import Any

_SCALARS = (bool, int, float, complex, str, bytes)
_ROUTINES = (types.FunctionType, types.BuiltinFunctionType, types.MethodType)


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if type(x) is not type(y):
        return False
    if x is None or isinstance(x, _SCALARS):
        return x == y
    if isinstance(x, _ROUTINES):
        return x == y
    if x is y:
        return True  # identical references

    # Cycle check: a pair already under comparison is assumed equal.
    key = (id(x), id(y))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        if len(x) != len(y):
            return False
        for k, value in x.items():
            if k not in y or not _equal(value, y[k], seen):
                return False
        return True
    if isinstance(x, (set, frozenset)):
        return x == y
    if dataclasses.is_dataclass(x) and not isinstance(x, type):
        return all(
            _equal(getattr(x, f.name), getattr(y, f.name), seen)
            for f in dataclasses.fields(x)
        )
    if hasattr(x, "__dict__") and not isinstance(x, type):
        return _equal(vars(x), vars(y), seen)
    return x == y


def equal(x: Any, y: Any) -> bool:
    """Report whether ``x`` and ``y`` are deeply equal.

    Values of different types are never equal. Dict keys and set members are
    compared with ``==``, not deeply. Functions are equal only to themselves.
    """
    return _equal(x, y, set())