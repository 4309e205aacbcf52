# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Recover a parameter name from a lambda that reads it.

Spelling the parameter name twice (once as a string, once as the variable)
lets the two drift apart during refactors. ``argument(lambda: timeout)``
reads the name straight from the lambda's bytecode instead::

    validate_argument(*argument(lambda: timeout), lambda t: t > 0)
"""

from __future__ import annotations

import dis
import types
from typing import Any, Callable, Optional, Tuple, TypeVar

from ..exceptions import ConfigurationError

T = TypeVar("T")

_NAME_LOADS = frozenset(
    {
        "LOAD_DEREF",
        "LOAD_GLOBAL",
        "LOAD_NAME",
        "LOAD_FAST",
        "LOAD_FAST_CHECK",
        "LOAD_FAST_BORROW",
        "LOAD_CLASSDEREF",
        "LOAD_FROM_DICT_OR_DEREF",
    }
)

# Interpreter bookkeeping that carries no information about the expression.
_IGNORED = frozenset({"RESUME", "COPY_FREE_VARS", "MAKE_CELL", "NOP", "CACHE", "EXTENDED_ARG"})


def argument_name(thunk: Callable[[], Any]) -> str:
    """Return the name read by *thunk*.

    Accepted shapes are ``lambda: name`` (a local, closure or global
    variable) and ``lambda: obj.attribute``, for which the attribute name is
    returned.

    :raises ConfigurationError: if *thunk* is not a zero-argument Python
                                function of one of those shapes.
    """

    if not isinstance(thunk, types.FunctionType):
        raise ConfigurationError(f"Expected a lambda reading one argument, got {thunk!r}")

    code = thunk.__code__
    if code.co_argcount or code.co_posonlyargcount or code.co_kwonlyargcount:
        raise ConfigurationError(f"{code.co_name} must not take parameters to name an argument")

    ops = [ins for ins in dis.get_instructions(code) if ins.opname not in _IGNORED]
    shape = [ins.opname for ins in ops]

    if len(ops) == 2 and shape[0] in _NAME_LOADS and shape[1] == "RETURN_VALUE":
        return ops[0].argval
    if len(ops) == 3 and shape[0] in _NAME_LOADS and shape[1] == "LOAD_ATTR" and shape[2] == "RETURN_VALUE":
        return ops[1].argval

    raise ConfigurationError(
        f"Cannot determine an argument name from {code.co_name} "
        f"defined at {code.co_filename}:{code.co_firstlineno}; "
        "use `lambda: name` or `lambda: obj.attribute`"
    )


def argument(thunk: Optional[Callable[[], T]]) -> Tuple[Optional[str], Optional[T]]:
    """Return ``(argument_name(thunk), thunk())`` for unpacking into a validator.

    ``argument(None)`` returns ``(None, None)``, which every validator treats
    as "no argument supplied" and skips.
    """

    if thunk is None:
        return None, None
    return argument_name(thunk), thunk()


__all__ = [
    "argument",
    "argument_name",
]
