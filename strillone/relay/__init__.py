"""Outbound delivery of events."""

from strillone.relay.base import Destination, Notifier
from strillone.relay.dispatcher import RelayDispatcher
from strillone.relay.slack import SlackNotifier

__all__ = ["Destination", "Notifier", "RelayDispatcher", "SlackNotifier"]
