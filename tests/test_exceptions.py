# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for the error types raised by argument validation."""
from __future__ import annotations

import pytest

from omniopen.exceptions import (
    ArgumentInvalidError,
    ArgumentMissingError,
    ConfigurationError,
    OmniOpenError,
    normalize_message,
)


@pytest.mark.parametrize("message", [None, "", " ", "\t\n  "])
def test_blank_messages_normalize_to_none(message):
    assert normalize_message(message) is None


@pytest.mark.parametrize("message", ["OmniOpen", " padded ", "\nleading newline kept"])
def test_real_messages_are_kept_verbatim(message):
    assert normalize_message(message) == message


def test_invalid_error_renders_message_then_parameter_name():
    error = ArgumentInvalidError("port", "port must be below 65536")

    assert str(error) == "port must be below 65536\nParameter name: port"
    assert error.parameter_name == "port"
    assert error.message == "port must be below 65536"


def test_invalid_error_without_message_uses_default_description():
    error = ArgumentInvalidError("port", "   ")

    assert error.message is None
    assert str(error) == "Value does not satisfy the validation rule.\nParameter name: port"


def test_missing_error_without_message_uses_default_description():
    error = ArgumentMissingError("host")

    assert str(error) == "Value cannot be None.\nParameter name: host"
    assert error.kind == "missing"


def test_error_hierarchy():
    assert issubclass(ArgumentMissingError, ArgumentInvalidError)
    assert issubclass(ArgumentInvalidError, OmniOpenError)
    assert issubclass(ArgumentInvalidError, ValueError)
    assert issubclass(ConfigurationError, OmniOpenError)
    assert not issubclass(ConfigurationError, ArgumentInvalidError)


def test_repr_names_the_fields():
    error = ArgumentMissingError("host", "OmniOpen")

    assert repr(error) == "ArgumentMissingError(parameter_name='host', message='OmniOpen')"
