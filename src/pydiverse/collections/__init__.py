# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from ._internal.map import CollectionMap
from ._internal.set import CollectionSet
from ._internal.util.structlog import setup_logging
from ._internal.util.values import NO_CHECK, same_value
from .errors import *
from .errors import __all__ as __errors
from .version import __version__

__all__ = [
    "__version__",
    "CollectionMap",
    "CollectionSet",
    "NO_CHECK",
    "same_value",
    "setup_logging",
] + __errors
