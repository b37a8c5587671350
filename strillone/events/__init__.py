"""DNSimple webhook events."""

from strillone.events.envelope import Account, Actor, Event, parse_event
from strillone.events.formatter import format_message

__all__ = ["Account", "Actor", "Event", "format_message", "parse_event"]
