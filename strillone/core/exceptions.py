"""Custom exceptions for the relay."""


class StrilloneException(Exception):
    """Base exception for all relay errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize exception with message and optional details.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class BodyReadError(StrilloneException):
    """Reading the inbound request body failed."""

    pass


class EnvelopeParseError(StrilloneException):
    """Webhook payload is malformed or not a recognizable event."""

    pass


class RelayError(StrilloneException):
    """Outbound delivery of an event failed."""

    pass


class DestinationError(RelayError):
    """Routing parameters do not describe a destination."""

    pass
