"""Shared fixtures."""

import asyncio
from typing import Optional

import pytest

from strillone.core.config import Settings
from strillone.core.exceptions import RelayError
from strillone.events.envelope import Event


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class FakeNotifier:
    """Notifier recording deliveries instead of sending them."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.fail_with: Optional[RelayError] = None
        self.delay: float = 0.0
        self.closed = False

    async def post_event(self, credential: str, event: Event) -> str:
        self.calls.append((credential, event.request_id))
        error = self.fail_with
        if self.delay:
            await asyncio.sleep(self.delay)
        if error is not None:
            raise error
        return f"posted {event.name}"

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock."""
    return FakeClock()


@pytest.fixture
def notifier() -> FakeNotifier:
    """Recording notifier."""
    return FakeNotifier()


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment."""
    return Settings(_env_file=None)  # type: ignore


@pytest.fixture
def renew_body() -> bytes:
    """A domain.renew webhook body."""
    return (
        b'{"name": "domain.renew", "api_version": "v2", "request_identifier": "abc123",'
        b' "data": {"domain": {"id": 1, "name": "example.com"}},'
        b' "account": {"id": 1010, "display": "Example Inc", "identifier": "example"},'
        b' "actor": {"id": "1", "entity": "user", "pretty": "john@example.com"}}'
    )
