"""Destination value type and the notifier interface."""

from dataclasses import dataclass
from typing import Protocol, Sequence

from strillone.core.exceptions import DestinationError
from strillone.events.envelope import Event


@dataclass(frozen=True)
class Destination:
    """Delivery target composed from the three routing path segments.

    Segment contents are passed through as-is; rejecting a malformed
    credential is left to the notifier's remote end.
    """

    alpha: str
    beta: str
    gamma: str

    @classmethod
    def from_segments(cls, segments: Sequence[str]) -> "Destination":
        """Build a destination from routing parameters.

        Raises:
            DestinationError: If there are not exactly three segments
        """
        if len(segments) != 3:
            raise DestinationError(
                f"expected 3 routing segments, got {len(segments)}",
                details={"segments": len(segments)},
            )
        return cls(*(str(segment) for segment in segments))

    @property
    def credential(self) -> str:
        return f"{self.alpha}/{self.beta}/{self.gamma}"


class Notifier(Protocol):
    """Formats an event and delivers it to a destination."""

    async def post_event(self, credential: str, event: Event) -> str:
        """Deliver the event.

        Returns:
            Text describing what was delivered

        Raises:
            RelayError: If delivery failed
        """
        ...

    async def close(self) -> None:
        ...
