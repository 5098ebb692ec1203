# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from pydiverse.collections._internal.errors import check_arg_type
from pydiverse.collections._internal.util.structlog import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger(__name__)
_stdlib_logger = logging.getLogger(__name__)


class CollectionSet(set, Generic[T]):
    """
    A set whose combining operations return a ``CollectionSet``.

    Examples
    --------
    >>> s = CollectionSet(["key-2"])
    >>> sorted(s.union({"key"}))
    ['key', 'key-2']
    """

    def __copy__(self):
        return self.__class__(self)

    def copy(self) -> CollectionSet[T]:
        return self.__copy__()

    @property
    def empty(self) -> bool:
        """Whether the set has no elements."""
        return len(self) == 0

    def union(self, *others: Iterable[U]) -> CollectionSet[T | U]:
        """
        Return a new set with the elements of this set and all `others`.

        Duplicates are removed by set membership. Neither this set nor any of the
        `others` is modified.
        """
        result = self.__class__(self)
        for other in others:
            check_arg_type(Iterable, "CollectionSet.union", "other", other)
            result.update(other)
        if _stdlib_logger.isEnabledFor(logging.DEBUG):
            logger.debug("united sets", sets=len(others) + 1, result=len(result))
        return result
