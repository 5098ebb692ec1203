from __future__ import annotations

import pickle
from decimal import Decimal

import pytest

from pydiverse.collections import NO_CHECK, same_value


class Point:
    def __init__(self, x):
        self.x = x

    def __eq__(self, other):
        return isinstance(other, Point) and self.x == other.x

    __hash__ = object.__hash__


class TestSameValue:
    @pytest.mark.parametrize(
        "a, b",
        [
            (1, 1),
            (10**20, int("1" + "0" * 20)),
            (1, 1.0),
            (0.0, -0.0),
            (float("nan"), float("nan")),
            (Decimal("NaN"), Decimal("NaN")),
            (Decimal("sNaN"), Decimal("NaN")),
            (Decimal("1.0"), 1),
            ("abc", "".join(["a", "b", "c"])),
            (b"ab", bytes([97, 98])),
            (True, True),
            (None, None),
        ],
    )
    def test_same(self, a, b):
        assert same_value(a, b)
        assert same_value(b, a)

    @pytest.mark.parametrize(
        "a, b",
        [
            (1, 2),
            (1, True),
            (0, False),
            (1, "1"),
            ("a", b"a"),
            (None, 0),
            (float("nan"), 1.0),
            ([1], [1]),
            (tuple([1]), tuple([1])),
            (Decimal("NaN"), 1),
            (Decimal("sNaN"), 1),
            (Decimal("sNaN"), "sNaN"),
            (Point(1), Point(1)),
        ],
    )
    def test_different(self, a, b):
        assert not same_value(a, b)
        assert not same_value(b, a)

    def test_identical_objects(self):
        p = Point(1)
        assert same_value(p, p)


class TestNoCheck:
    def test_is_not_none(self):
        assert NO_CHECK is not None
        assert not same_value(NO_CHECK, None)

    def test_repr(self):
        assert repr(NO_CHECK) == "NO_CHECK"

    def test_pickle_keeps_identity(self):
        assert pickle.loads(pickle.dumps(NO_CHECK)) is NO_CHECK
