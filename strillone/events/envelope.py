"""Pydantic models for the DNSimple webhook envelope."""

import json
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from strillone.core.exceptions import EnvelopeParseError


class Account(BaseModel):
    """Account the event belongs to."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Optional[int] = None
    display: Optional[str] = None
    identifier: Optional[str] = None


class Actor(BaseModel):
    """User or system that triggered the event."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Optional[str] = None
    entity: Optional[str] = None
    pretty: Optional[str] = None


class Event(BaseModel):
    """Parsed webhook notification."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    request_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("request_identifier", "request_id"),
    )
    name: str = Field(min_length=1)
    api_version: Optional[str] = None
    data: dict[str, Any] = Field(default_factory=dict)
    account: Optional[Account] = None
    actor: Optional[Actor] = None

    def resource(self, key: str) -> dict[str, Any]:
        """Return a nested object of the event data, or an empty dict."""
        value = self.data.get(key)
        return value if isinstance(value, dict) else {}


def parse_event(raw: bytes) -> Event:
    """Parse a raw webhook body into an Event.

    Args:
        raw: Request body as received

    Returns:
        Parsed event

    Raises:
        EnvelopeParseError: If the body is not a valid event envelope
    """
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as e:
        raise EnvelopeParseError(f"invalid JSON payload: {e}") from e

    if not isinstance(payload, dict):
        raise EnvelopeParseError(
            "event payload must be a JSON object",
            details={"type": type(payload).__name__},
        )

    try:
        return Event.model_validate(payload)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise EnvelopeParseError(
            f"invalid event payload: {', '.join(fields)}",
            details={"errors": fields},
        ) from e
