# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exceptions raised by the OmniOpen foundation helpers."""

from __future__ import annotations

from typing import Optional


class OmniOpenError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: Optional[str] = None):
        self.message = message
        super().__init__(message)


class ConfigurationError(OmniOpenError):
    """Raised when a helper is called in a way it cannot honour (library misuse)."""


def normalize_message(message: Optional[str]) -> Optional[str]:
    """Return *message* unchanged, or ``None`` if it is empty or only whitespace."""

    if message is None or not message.strip():
        return None
    return message


class ArgumentInvalidError(OmniOpenError, ValueError):
    """An argument was supplied but failed its validation rule.

    :param parameter_name: Name of the offending parameter at the call site.
    :param message: Optional custom failure text. Empty or whitespace-only
                    text is treated as no message at all.
    """

    kind = "invalid"
    default_description = "Value does not satisfy the validation rule."

    def __init__(self, parameter_name: str, message: Optional[str] = None):
        self.parameter_name = parameter_name
        super().__init__(normalize_message(message))

    def __str__(self) -> str:
        description = self.message if self.message is not None else self.default_description
        return f"{description}\nParameter name: {self.parameter_name}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(parameter_name={self.parameter_name!r}, message={self.message!r})"


class ArgumentMissingError(ArgumentInvalidError):
    """An argument was ``None`` where a value is required."""

    kind = "missing"
    default_description = "Value cannot be None."


__all__ = [
    "OmniOpenError",
    "ConfigurationError",
    "ArgumentInvalidError",
    "ArgumentMissingError",
    "normalize_message",
]
