# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OmniOpen foundation - boilerplate helpers for argument validation."""

from .exceptions import (
    ArgumentInvalidError,
    ArgumentMissingError,
    ConfigurationError,
    OmniOpenError,
)
from .validation import (
    argument,
    argument_name,
    validate_argument,
    validate_argument_not_null,
    validate_argument_not_null_or_empty,
    validate_argument_not_null_or_whitespace,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentInvalidError",
    "ArgumentMissingError",
    "ConfigurationError",
    "OmniOpenError",
    "argument",
    "argument_name",
    "validate_argument",
    "validate_argument_not_null",
    "validate_argument_not_null_or_empty",
    "validate_argument_not_null_or_whitespace",
]
