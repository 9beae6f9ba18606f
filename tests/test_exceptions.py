"""Tests for is_railway.exceptions."""

import pytest

from is_railway.exceptions import InvalidArgumentError, IsRailwayError


def test_hierarchy():
    assert issubclass(InvalidArgumentError, IsRailwayError)


def test_invalid_argument_is_value_error():
    """Callers that only know about ValueError still catch it."""
    with pytest.raises(ValueError, match="required"):
        raise InvalidArgumentError("Connection string is required")


def test_catch_base():
    try:
        raise InvalidArgumentError("bad input")
    except IsRailwayError as e:
        assert "bad input" in str(e)
