"""Webhook relay forwarding DNSimple events to Slack."""

__version__ = "0.1.0"
