# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "pydiverse-collections"

try:
    __version__ = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    # Source checkout without an installed distribution
    __version__ = "0.0.0+dev"
