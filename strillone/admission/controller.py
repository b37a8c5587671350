"""Admission of inbound events: parse, deduplicate, relay, remember."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from strillone.core.exceptions import EnvelopeParseError, RelayError
from strillone.core.logging import get_logger
from strillone.dedup.cache import DedupCache
from strillone.events.envelope import Event, parse_event
from strillone.relay.dispatcher import RelayDispatcher

logger = get_logger(__name__)

PROCESSING_STATUS_HEADER = "X-Processing-Status"
SKIPPED_ALREADY_PROCESSED = "skipped;already-processed"


class RelayOutcome(str, Enum):
    """What happened to an inbound event."""

    FORWARDED = "forwarded"
    SKIPPED_DUPLICATE = "skipped-duplicate"
    PARSE_ERROR = "parse-error"
    RELAY_ERROR = "relay-error"


@dataclass(frozen=True)
class AdmissionResult:
    """Outcome of admitting one request."""

    outcome: RelayOutcome
    text: str = ""
    error: Optional[Exception] = None
    request_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (RelayOutcome.FORWARDED, RelayOutcome.SKIPPED_DUPLICATE)


class _KeyLocks:
    """Reference-counted asyncio locks, one per key, discarded when idle."""

    def __init__(self) -> None:
        self._locks: dict[str, tuple[asyncio.Lock, int]] = {}

    def acquire_ref(self, key: str) -> asyncio.Lock:
        lock, refs = self._locks.get(key, (None, 0))
        if lock is None:
            lock = asyncio.Lock()
        self._locks[key] = (lock, refs + 1)
        return lock

    def release_ref(self, key: str) -> None:
        lock, refs = self._locks[key]
        if refs <= 1:
            del self._locks[key]
        else:
            self._locks[key] = (lock, refs - 1)

    def __len__(self) -> int:
        return len(self._locks)


class AdmissionController:
    """Relays each event at most once per dedup window.

    A request id is remembered only after a successful relay, so parse
    failures and relay failures stay retryable. Concurrent deliveries of the
    same request id are serialized; whoever runs second sees the cache entry
    left by a successful first attempt and is reported as a duplicate.
    """

    def __init__(
        self,
        cache: DedupCache,
        dispatcher: RelayDispatcher,
        parser: Callable[[bytes], Event] = parse_event,
    ) -> None:
        """Initialize controller.

        Args:
            cache: Store of already relayed request ids
            dispatcher: Relay used for new events
            parser: Turns a raw body into an Event
        """
        self.cache = cache
        self.dispatcher = dispatcher
        self.parser = parser
        self._in_flight = _KeyLocks()

    async def admit(self, body: bytes, segments: Sequence[str]) -> AdmissionResult:
        """Process one inbound webhook body.

        Args:
            body: Raw request body
            segments: Routing parameters from the request path

        Returns:
            The outcome, with the relay text on success or the error on failure
        """
        try:
            event = self.parser(body)
        except EnvelopeParseError as e:
            logger.warning("event_parse_failed", error=e.message)
            return AdmissionResult(RelayOutcome.PARSE_ERROR, error=e)

        request_id = event.request_id
        if self.cache.get(request_id):
            return self._duplicate(event)

        lock = self._in_flight.acquire_ref(request_id)
        try:
            async with lock:
                # A concurrent delivery may have relayed while we waited.
                if self.cache.get(request_id):
                    return self._duplicate(event)

                try:
                    text = await self.dispatcher.relay(segments, event)
                except RelayError as e:
                    logger.error(
                        "event_relay_failed",
                        request_id=request_id,
                        event_name=event.name,
                        error=e.message,
                    )
                    return AdmissionResult(RelayOutcome.RELAY_ERROR, error=e, request_id=request_id)

                self.cache.set(request_id)
        finally:
            self._in_flight.release_ref(request_id)

        logger.info("event_forwarded", request_id=request_id, event_name=event.name)
        return AdmissionResult(RelayOutcome.FORWARDED, text=text, request_id=request_id)

    def _duplicate(self, event: Event) -> AdmissionResult:
        logger.info("event_skipped_already_processed", request_id=event.request_id, event_name=event.name)
        return AdmissionResult(RelayOutcome.SKIPPED_DUPLICATE, request_id=event.request_id)
