from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
W = TypeVar("W")

# A returned `None` removes the entry (or keeps it from being inserted).
RemappingFn = Callable[[K, V | None], V | None]
MappingFn = Callable[[K], V | None]
PresentFn = Callable[[K, V], V | None]
MergeFn = Callable[[V, V], V | None]
CombineFn = Callable[[V | None, W | None], V | None]
