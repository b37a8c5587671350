"""Slack incoming-webhook notifier."""

from typing import Any, Optional

import httpx

from strillone import __version__
from strillone.core.config import get_settings
from strillone.core.exceptions import RelayError
from strillone.core.logging import get_logger
from strillone.events.envelope import Event
from strillone.events.formatter import format_message

settings = get_settings()
logger = get_logger(__name__)


class SlackNotifier:
    """Posts formatted events to Slack incoming webhooks.

    The credential is the ``T.../B.../xxxx`` token part of the webhook URL.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        timeout: Optional[float] = None,
        links_base_url: Optional[str] = None,
    ) -> None:
        """Initialize Slack notifier.

        Args:
            base_url: Incoming webhooks base URL (default from settings)
            username: Name the message is posted as (default from settings)
            timeout: Request timeout in seconds (default from settings)
            links_base_url: DNSimple site used in message links (default from settings)
        """
        self.base_url = (base_url or settings.slack_webhook_url).rstrip("/")
        self.username = username or settings.slack_username
        self.timeout = timeout or settings.relay_timeout
        self.links_base_url = links_base_url or settings.dnsimple_url

        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "SlackNotifier":
        """Enter async context manager."""
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_client(self) -> None:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={
                    "Content-Type": "application/json",
                    "User-Agent": f"{settings.app_name}/{__version__}",
                },
            )

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def webhook_url(self, credential: str) -> str:
        return f"{self.base_url}/{credential}"

    async def post_event(self, credential: str, event: Event) -> str:
        """Format the event and post it to the Slack webhook.

        Args:
            credential: Slack webhook token
            event: Event to announce

        Returns:
            The posted message text

        Raises:
            RelayError: If Slack could not be reached or rejected the message
        """
        await self._ensure_client()
        assert self._client is not None

        text = format_message(event, base_url=self.links_base_url)
        payload = {"text": text, "username": self.username}

        try:
            response = await self._client.post(self.webhook_url(credential), json=payload)
        except httpx.TimeoutException as e:
            logger.warning("slack_timeout", request_id=event.request_id, error=str(e))
            raise RelayError(f"slack request timed out: {e}") from e
        except httpx.RequestError as e:
            logger.warning("slack_request_error", request_id=event.request_id, error=str(e))
            raise RelayError(f"slack request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                "slack_rejected_message",
                request_id=event.request_id,
                status=response.status_code,
                body=response.text[:500],
            )
            raise RelayError(
                f"slack responded {response.status_code}: {response.text[:500]}",
                details={"status": response.status_code},
            )

        logger.info("slack_message_posted", request_id=event.request_id, event_name=event.name)
        return text
