# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic

from pydiverse.collections._internal.errors import (
    check_arg_type,
    check_callable,
    check_not_absent,
)
from pydiverse.collections._internal.util.structlog import get_logger
from pydiverse.collections._internal.util.values import NO_CHECK, same_value
from pydiverse.collections._typing import (
    CombineFn,
    K,
    MappingFn,
    MergeFn,
    PresentFn,
    RemappingFn,
    V,
    W,
)

logger = get_logger(__name__)
_stdlib_logger = logging.getLogger(__name__)


class CollectionMap(dict, Generic[K, V]):
    """
    A dictionary with compute-style update operations.

    A ``CollectionMap`` is constructed, iterated and indexed exactly like a
    ``dict``. On top of that it offers operations that read an entry, transform it
    with a function and write the result back in a single call.

    All of these operations share one convention: ``None`` means *no entry*. If a
    function passed to one of them returns ``None``, the entry is removed (or never
    inserted). Consequently ``None`` cannot be stored through these operations.
    A ``None`` stored directly with ``m[key] = None`` is treated as a missing entry
    by :meth:`compute` and :meth:`merge`, while the operations that check
    ``key in m`` (:meth:`compute_if_absent`, :meth:`compute_if_present`,
    :meth:`compute_if`, :meth:`replace`, :meth:`set_if_absent`) see it as present.

    Examples
    --------
    >>> m = CollectionMap({"key-2": 1})
    >>> for key in ["key-1", "key-2"]:
    ...     _ = m.compute(key, lambda _key, value: 0 if value is None else value + 1)
    >>> m
    CollectionMap({'key-2': 2, 'key-1': 0})
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict.__repr__(self)})"

    def __copy__(self):
        return self.__class__(self)

    def copy(self) -> CollectionMap[K, V]:
        return self.__copy__()

    @property
    def empty(self) -> bool:
        """Whether the mapping has no entries."""
        return len(self) == 0

    def _store(self, key: K, value: V | None) -> V | None:
        if value is None:
            self.pop(key, None)
        else:
            self[key] = value
        return value

    def get(self, key: K, default: Any = None) -> Any:
        """
        Return the value for `key` if the key has an entry, else `default`.

        A stored ``None`` is returned as ``None``, not replaced by `default`.
        """
        if key in self:
            return self[key]
        return default

    def compute(self, key: K, fn: RemappingFn[K, V]) -> V | None:
        """
        Compute a new value for `key` from its current one.

        :param key:
            Key of the entry.

        :param fn:
            Called with the key and the current value, or ``None`` if there is
            none. The returned value is stored; returning ``None`` removes the
            entry.

        :returns:
            The value now stored for `key`, or ``None`` if there is none.

        Examples
        --------
        >>> m = CollectionMap({"a": 1})
        >>> m.compute("a", lambda _key, value: value + 1)
        2
        >>> m.compute("a", lambda _key, value: None)
        >>> "a" in m
        False
        """
        check_callable("CollectionMap.compute", "fn", fn)
        return self._store(key, fn(key, self.get(key)))

    def compute_if_absent(self, key: K, fn: MappingFn[K, V]) -> V | None:
        """
        Compute a value for `key` only if it has no entry.

        If the key has an entry, `fn` is not called and the current value is
        returned. Otherwise `fn` is called with the key; a returned ``None`` is not
        stored.

        Examples
        --------
        >>> m = CollectionMap({"key-2": 2})
        >>> m.compute_if_absent("key-1", lambda key: int(key[-1]))
        1
        >>> m.compute_if_absent("key-2", lambda key: 100)
        2
        """
        check_callable("CollectionMap.compute_if_absent", "fn", fn)
        if key in self:
            return self[key]
        value = fn(key)
        if value is not None:
            self[key] = value
        return value

    def compute_if_present(self, key: K, fn: PresentFn[K, V]) -> V | None:
        """
        Compute a new value for `key` only if it has an entry.

        Returns ``None`` without calling `fn` if the key has no entry. Otherwise
        `fn` is called with the key and the current value and its result is stored,
        or the entry is removed if the result is ``None``.
        """
        check_callable("CollectionMap.compute_if_present", "fn", fn)
        if key not in self:
            return None
        return self._store(key, fn(key, self[key]))

    def compute_if(
        self,
        key: K,
        *,
        present: RemappingFn[K, V],
        absent: MappingFn[K, V],
    ) -> V | None:
        """
        Compute a new value for `key` with a different function depending on
        whether it has an entry.

        Unlike :meth:`compute`, an entry holding ``None`` counts as present here,
        so `present` is called for it (with ``None`` as the value).

        :param present:
            Called with the key and current value if the key has an entry.

        :param absent:
            Called with the key if the key has no entry.

        :returns:
            The value now stored for `key`, or ``None`` if the result removed the
            entry.

        Examples
        --------
        >>> m = CollectionMap({"a": None})
        >>> m.compute_if(
        ...     "a",
        ...     present=lambda _key, value: 10 if value is None else value + 1,
        ...     absent=lambda _key: 99,
        ... )
        10
        """
        check_callable("CollectionMap.compute_if", "present", present)
        check_callable("CollectionMap.compute_if", "absent", absent)
        if key in self:
            value = present(key, self.get(key))
        else:
            value = absent(key)
        return self._store(key, value)

    def merge(self, key: K, default: V, fn: MergeFn[V]) -> V | None:
        """
        Store `default` for a missing key, or combine it with the current value.

        If `key` has no entry (or its entry holds ``None``), `default` is stored
        and returned without calling `fn`. Otherwise ``fn(current, default)`` is
        stored, or the entry is removed if it returns ``None``.

        :raises AbsentValueError:
            If `default` is ``None``.

        Examples
        --------
        >>> counts = CollectionMap()
        >>> for word in ["a", "b", "a"]:
        ...     _ = counts.merge(word, 1, lambda old, new: old + new)
        >>> counts
        CollectionMap({'a': 2, 'b': 1})
        """
        check_not_absent("CollectionMap.merge", "default", default)
        check_callable("CollectionMap.merge", "fn", fn)
        current = self.get(key)
        if current is None:
            self[key] = default
            return default
        return self._store(key, fn(current, default))

    def has_value(self, value: Any) -> bool:
        """
        Whether any entry holds `value`.

        Values are compared with same-value equality: strings, bytes, booleans and
        numbers by value, all other objects by identity. This scans every entry.
        """
        return any(same_value(v, value) for v in self.values())

    def delete(self, key: K, expected: Any = NO_CHECK) -> bool:
        """
        Remove the entry for `key`.

        :param expected:
            If given, the entry is only removed if it currently holds this value
            (compared with same-value equality). ``None`` is a valid expectation
            and matches an entry holding ``None``.

        :returns:
            Whether an entry was removed.
        """
        if key not in self:
            return False
        if expected is not NO_CHECK and not same_value(self[key], expected):
            return False
        del self[key]
        return True

    def replace(self, key: K, value: V, expected: Any = NO_CHECK) -> V | None:
        """
        Replace the value of an existing entry.

        The entry is only replaced if `key` has an entry and, if `expected` is
        given, the entry currently holds `expected` (compared with same-value
        equality).

        :returns:
            `value` if the entry was replaced, otherwise the current value (or
            ``None`` if the key has no entry).
        """
        if key not in self:
            return None
        if expected is not NO_CHECK and not same_value(self[key], expected):
            return self[key]
        self[key] = value
        return value

    def replace_all(self, fn: RemappingFn[K, V]) -> None:
        """
        Replace every value with ``fn(key, value)``.

        Entries for which `fn` returns ``None`` are removed. Entries are visited in
        insertion order as of the start of the call.
        """
        check_callable("CollectionMap.replace_all", "fn", fn)
        entries = list(self.items())
        for key, value in entries:
            self._store(key, fn(key, value))
        if _stdlib_logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "replaced all entries", visited=len(entries), remaining=len(self)
            )

    def set_all(
        self, other: Mapping[K, W], fn: CombineFn[V, W]
    ) -> CollectionMap[K, V]:
        """
        Combine this mapping with `other` into a new mapping.

        For every key of either mapping, ``fn(own_value, other_value)`` is stored in
        the result, where a side without an entry for the key contributes ``None``.
        Keys for which `fn` returns ``None`` are left out. Neither input is
        modified.

        Examples
        --------
        >>> a = CollectionMap({"Key": 10})
        >>> a.set_all(
        ...     {"Key": 1, "Key-1": 5},
        ...     lambda v1, v2: v1 + v2 if v1 and v2 else (v2 if v1 is None else v1),
        ... )
        CollectionMap({'Key': 11, 'Key-1': 5})
        """
        check_arg_type(Mapping, "CollectionMap.set_all", "other", other)
        check_callable("CollectionMap.set_all", "fn", fn)
        result = self.__class__()
        for key in (*self.keys(), *(k for k in other.keys() if k not in self)):
            value = fn(self.get(key), other.get(key))
            if value is not None:
                result[key] = value
        if _stdlib_logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "combined mappings",
                left=len(self),
                right=len(other),
                result=len(result),
            )
        return result

    def set_if_absent(self, key: K, value: V) -> V:
        """
        Store `value` if `key` has no entry and return the value now held for it.
        """
        if key not in self:
            self[key] = value
            return value
        return self[key]
