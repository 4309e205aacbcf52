"""Validation package - argument checks that raise named errors.

Each validator checks exactly one value and raises immediately on failure.
Nothing is collected, logged at error level, or transformed here.
"""

from .arguments import (
    validate_argument,
    validate_argument_not_null,
    validate_argument_not_null_or_empty,
    validate_argument_not_null_or_whitespace,
)
from .naming import argument, argument_name

__all__ = [
    "argument",
    "argument_name",
    "validate_argument",
    "validate_argument_not_null",
    "validate_argument_not_null_or_empty",
    "validate_argument_not_null_or_whitespace",
]
