"""Tests for event message formatting."""

from strillone.events.envelope import parse_event
from strillone.events.formatter import format_message, slack_link


def test_format_domain_renew(renew_body: bytes) -> None:
    """Test a known domain event gets a linked description."""
    text = format_message(parse_event(renew_body))

    assert text == (
        "[Example Inc] john@example.com renewed the domain "
        "<https://dnsimple.com/a/1010/domains/example.com|example.com>"
    )


def test_format_custom_base_url(renew_body: bytes) -> None:
    """Test links use the configured DNSimple site."""
    text = format_message(parse_event(renew_body), base_url="https://sandbox.dnsimple.com/")

    assert "<https://sandbox.dnsimple.com/a/1010/domains/example.com|example.com>" in text


def test_format_unknown_event() -> None:
    """Test unknown events fall back to the event name."""
    event = parse_event(b'{"request_id": "abc123", "name": "mystery.happened"}')

    assert format_message(event) == "[unknown account] Someone performed mystery.happened"


def test_format_known_event_without_data() -> None:
    """Test a known event missing its resource falls back to the event name."""
    event = parse_event(b'{"request_id": "abc123", "name": "domain.renew"}')

    assert format_message(event).endswith("performed domain.renew")


def test_format_delegation_change() -> None:
    """Test name servers are listed for delegation changes."""
    event = parse_event(
        b'{"request_id": "r1", "name": "domain.delegation_change",'
        b' "data": {"domain": {"name": "example.com"}, "name_servers": ["ns1.dnsimple.com", "ns2.dnsimple.com"]},'
        b' "account": {"identifier": "example"}, "actor": {"entity": "dnsimple"}}'
    )

    text = format_message(event)

    assert text.startswith("[example] dnsimple changed the delegation for the domain")
    assert text.endswith("to ns1.dnsimple.com, ns2.dnsimple.com")


def test_format_zone_record() -> None:
    """Test record events describe type and name."""
    event = parse_event(
        b'{"request_id": "r2", "name": "zone_record.create",'
        b' "data": {"zone_record": {"id": 5, "zone_id": "example.com", "name": "www", "type": "A"}},'
        b' "account": {"id": 7, "display": "Ex"}, "actor": {"pretty": "ops"}}'
    )

    assert format_message(event) == (
        "[Ex] ops created the record "
        "<https://dnsimple.com/a/7/domains/example.com/records/5|A www.example.com>"
    )


def test_slack_link() -> None:
    """Test Slack link markup."""
    assert slack_link("https://x.test", "x") == "<https://x.test|x>"
