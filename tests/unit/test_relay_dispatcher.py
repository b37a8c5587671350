"""Tests for the relay dispatcher."""

import pytest

from strillone.core.exceptions import DestinationError, RelayError
from strillone.events.envelope import parse_event
from strillone.relay.base import Destination
from strillone.relay.dispatcher import RelayDispatcher

EVENT = parse_event(b'{"request_id": "abc123", "name": "domain.renew"}')


def test_destination_credential() -> None:
    """Test segments are joined with slashes."""
    destination = Destination.from_segments(("T1", "T2", "T3"))

    assert destination.credential == "T1/T2/T3"


def test_destination_keeps_empty_segments() -> None:
    """Test segment contents are not validated."""
    assert Destination.from_segments(("", "B", "")).credential == "/B/"


@pytest.mark.parametrize("segments", [(), ("a",), ("a", "b"), ("a", "b", "c", "d")])
def test_destination_requires_three_segments(segments: tuple) -> None:
    """Test routing must have exactly three segments."""
    with pytest.raises(DestinationError):
        Destination.from_segments(segments)


@pytest.mark.asyncio
async def test_relay_passes_credential(notifier) -> None:
    """Test dispatcher delegates to the notifier with the joined credential."""
    dispatcher = RelayDispatcher(notifier)

    text = await dispatcher.relay(("T1", "T2", "T3"), EVENT)

    assert text == "posted domain.renew"
    assert notifier.calls == [("T1/T2/T3", "abc123")]


@pytest.mark.asyncio
async def test_relay_propagates_failure(notifier) -> None:
    """Test notifier failures propagate untouched and are not retried."""
    error = RelayError("slack down")
    notifier.fail_with = error
    dispatcher = RelayDispatcher(notifier)

    with pytest.raises(RelayError) as exc_info:
        await dispatcher.relay(("T1", "T2", "T3"), EVENT)

    assert exc_info.value is error
    assert len(notifier.calls) == 1
