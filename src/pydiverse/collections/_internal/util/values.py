# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Number
from typing import Any, Final


class _NoCheck:
    """
    Marker for an optional comparison argument that was not supplied.

    Distinct from `None`, which is a legitimate value to compare against.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_CHECK"

    def __reduce__(self):
        return "NO_CHECK"


NO_CHECK: Final = _NoCheck()


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return math.isnan(value.real) or math.isnan(value.imag)
    if isinstance(value, Decimal):
        # covers signaling NaN, which raises on `==`
        return value.is_nan()
    return False


def same_value(a: Any, b: Any) -> bool:
    """
    Same-value equality: identical objects, or equal primitive values.

    Strings, bytes, booleans and numbers are compared by value, everything else
    by identity. Numbers compare across numeric types (``1`` and ``1.0`` are the
    same value) but never match a ``bool``. NaN is the same value as NaN.

    >>> same_value("a", "".join(["a"]))
    True
    >>> same_value([1], [1])
    False
    >>> same_value(float("nan"), float("nan"))
    True
    """
    if a is b:
        return True

    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if isinstance(a, Number) and isinstance(b, Number):
        if _is_nan(a) or _is_nan(b):
            return _is_nan(a) and _is_nan(b)
        return a == b

    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, bytes) and isinstance(b, bytes):
        return a == b

    return False
