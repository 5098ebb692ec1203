# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import typing
from typing import Any


class AbsentValueError(ValueError):
    """
    Raised when `None` is passed where a value that can be stored is required.
    `None` is reserved to signal that a key has no entry.
    """


# Our error message format: The first line is in lowercase letters, without a dot at
# the end. More detail is given in the following lines in normal english sentences.
# To give advice to to the user, we write `hint: ...`.


def check_arg_type(
    expected_type: type,
    fn: str,
    param_name: str,
    arg: Any,
):
    if not isinstance(arg, expected_type):
        type_args = typing.get_args(expected_type)
        expected_type_str = (
            expected_type.__name__
            if not type_args
            else " | ".join(t.__name__ for t in type_args)
        )
        raise TypeError(
            f"argument for parameter `{param_name}` of `{fn}` must have type "
            f"`{expected_type_str}`, found `{type(arg).__name__}` instead"
        )


def check_callable(fn: str, param_name: str, arg: Any):
    if not callable(arg):
        raise TypeError(
            f"argument for parameter `{param_name}` of `{fn}` must be callable, "
            f"found `{type(arg).__name__}` instead"
        )


def check_not_absent(fn: str, param_name: str, arg: Any):
    if arg is None:
        raise AbsentValueError(
            f"argument for parameter `{param_name}` of `{fn}` must not be `None`\n"
            "`None` marks a key without an entry and cannot be stored through "
            f"`{fn}`.\n"
            "hint: assign the entry directly with `mapping[key] = None` if you really "
            "need to store `None`."
        )
