"""Maps routing parameters to a destination and hands the event to a notifier."""

from typing import Sequence

from strillone.core.logging import get_logger
from strillone.events.envelope import Event
from strillone.relay.base import Destination, Notifier

logger = get_logger(__name__)


class RelayDispatcher:
    """Relays one event to the destination named by the routing segments.

    Delivery is attempted exactly once; retrying is up to the webhook sender.
    """

    def __init__(self, notifier: Notifier) -> None:
        """Initialize dispatcher.

        Args:
            notifier: Delivery backend
        """
        self.notifier = notifier

    async def relay(self, segments: Sequence[str], event: Event) -> str:
        """Relay an event.

        Args:
            segments: Routing parameters from the request path
            event: Event to deliver

        Returns:
            Text returned by the notifier

        Raises:
            DestinationError: If the segments do not form a destination
            RelayError: If the notifier failed
        """
        destination = Destination.from_segments(segments)
        logger.debug("relaying_event", request_id=event.request_id, event_name=event.name)
        return await self.notifier.post_event(destination.credential, event)
