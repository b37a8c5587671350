"""Tests for core exceptions module."""

from strillone.core.exceptions import (
    BodyReadError,
    DestinationError,
    EnvelopeParseError,
    RelayError,
    StrilloneException,
)


def test_base_exception() -> None:
    """Test base StrilloneException."""
    exc = StrilloneException("Test error", details={"key": "value"})

    assert str(exc) == "Test error"
    assert exc.message == "Test error"
    assert exc.details == {"key": "value"}


def test_base_exception_no_details() -> None:
    """Test base exception without details."""
    exc = StrilloneException("Test error")

    assert exc.details == {}


def test_exception_hierarchy() -> None:
    """Test every error derives from the base exception."""
    for exc_class in (BodyReadError, EnvelopeParseError, RelayError):
        assert isinstance(exc_class("boom"), StrilloneException)


def test_destination_error_is_relay_error() -> None:
    """Test malformed routing is reported as a relay failure."""
    assert isinstance(DestinationError("bad route"), RelayError)
