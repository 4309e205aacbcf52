# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Argument validators that raise errors naming the offending parameter.

Every validator takes the parameter *name* alongside its *value* so the raised
error reports the caller's own parameter name::

    def connect(host, timeout=None):
        validate_argument_not_null_or_whitespace("host", host)
        validate_argument("timeout", timeout, lambda t: t is None or t > 0,
                          "timeout must be positive")

Passing ``name=None`` means "nothing to validate" and the call returns
without evaluating anything, whatever *value* holds. The same applies to a
``None`` predicate in :func:`validate_argument`. This lets validation be
attached optionally at a call site.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Type, TypeVar

from ..exceptions import ArgumentInvalidError, ArgumentMissingError, ConfigurationError
from ..telemetry.metrics import record_validation_failure, record_validation_skipped

T = TypeVar("T")


def _check(
    validator: str,
    name: Optional[str],
    value: Any,
    predicate: Optional[Callable[[Any], bool]],
    message: Optional[str],
    error_type: Type[ArgumentInvalidError],
) -> None:
    if name is None:
        record_validation_skipped(validator, "no_target")
        return
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"{validator} requires a non-empty argument name, got {name!r}")
    if predicate is None:
        record_validation_skipped(validator, "no_predicate")
        return
    if not callable(predicate):
        raise ConfigurationError(f"{validator} predicate for '{name}' is not callable: {predicate!r}")

    # Exceptions raised by the predicate propagate to the caller untouched.
    if predicate(value):
        return

    record_validation_failure(validator, error_type.kind)
    raise error_type(name, message)


def validate_argument(
    name: Optional[str],
    value: T,
    predicate: Optional[Callable[[T], bool]],
    message: Optional[str] = None,
) -> None:
    """Validate *value* with *predicate*, raising if the predicate returns false.

    :param name: The parameter name reported on failure. ``None`` skips validation.
    :param value: The current value of the parameter.
    :param predicate: A function returning true when *value* is acceptable.
                      ``None`` skips validation.
    :param message: Optional text included in the error. Empty or
                    whitespace-only text is ignored.
    :raises ArgumentInvalidError: if ``predicate(value)`` is false.
    :raises ConfigurationError: if *name* is empty or *predicate* is not callable.
    """

    _check("validate_argument", name, value, predicate, message, ArgumentInvalidError)


def validate_argument_not_null(name: Optional[str], value: Any, message: Optional[str] = None) -> None:
    """Raise :class:`ArgumentMissingError` if *value* is ``None``.

    ``ArgumentMissingError`` subclasses ``ArgumentInvalidError``, so callers
    that only care about "bad argument" can catch the latter.
    """

    _check("validate_argument_not_null", name, value, _is_not_none, message, ArgumentMissingError)


def validate_argument_not_null_or_empty(name: Optional[str], value: Optional[str], message: Optional[str] = None) -> None:
    """Raise :class:`ArgumentInvalidError` if the text *value* is ``None`` or ``""``."""

    _check("validate_argument_not_null_or_empty", name, value, _is_not_empty, message, ArgumentInvalidError)


def validate_argument_not_null_or_whitespace(
    name: Optional[str], value: Optional[str], message: Optional[str] = None
) -> None:
    """Raise :class:`ArgumentInvalidError` if the text *value* is ``None``, empty or only whitespace."""

    _check(
        "validate_argument_not_null_or_whitespace",
        name,
        value,
        _has_non_whitespace,
        message,
        ArgumentInvalidError,
    )


def _is_not_none(value: Any) -> bool:
    return value is not None


def _is_not_empty(value: Optional[str]) -> bool:
    return value is not None and len(value) > 0


def _has_non_whitespace(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


__all__ = [
    "validate_argument",
    "validate_argument_not_null",
    "validate_argument_not_null_or_empty",
    "validate_argument_not_null_or_whitespace",
]
