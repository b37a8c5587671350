"""FastAPI application."""

import asyncio
import re
from contextlib import asynccontextmanager, suppress
from typing import AsyncGenerator, Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response

from strillone import __version__
from strillone.admission.controller import AdmissionController
from strillone.api.routes import relay, root
from strillone.core.clock import Clock, MonotonicClock, WallClock
from strillone.core.config import Settings, get_settings
from strillone.core.logging import get_logger, setup_logging
from strillone.dedup.cache import DedupCache
from strillone.relay.base import Notifier
from strillone.relay.dispatcher import RelayDispatcher
from strillone.relay.slack import SlackNotifier

logger = get_logger(__name__)

# Routing segments carry the destination credential; keep them out of logs.
_CREDENTIAL_PATH = re.compile(r"^/(relay|slack)/[^/]+/[^/]+/[^/]+")


def loggable_path(path: str) -> str:
    """Request path with any destination credential masked."""
    return _CREDENTIAL_PATH.sub(r"/\1/***", path)


async def sweep_expired(cache: DedupCache, interval: float) -> None:
    """Periodically reclaim memory held by expired dedup entries."""
    while True:
        await asyncio.sleep(interval)
        cache.purge_expired()


def create_app(
    settings: Optional[Settings] = None,
    notifier: Optional[Notifier] = None,
    clock: Optional[Clock] = None,
    wall_clock: Optional[Clock] = None,
) -> FastAPI:
    """Build the relay application.

    Args:
        settings: Application settings (default from environment)
        notifier: Delivery backend (default Slack)
        clock: Time source for dedup expiry
        wall_clock: Time source for the liveness ping

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    setup_logging(settings)
    notifier = notifier or SlackNotifier(
        base_url=settings.slack_webhook_url,
        username=settings.slack_username,
        timeout=settings.relay_timeout,
        links_base_url=settings.dnsimple_url,
    )
    cache = DedupCache(ttl=settings.dedup_ttl, clock=clock or MonotonicClock())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        """Application lifespan manager."""
        logger.info("application_starting", version=__version__, port=settings.port)
        sweeper = asyncio.create_task(sweep_expired(cache, settings.dedup_sweep_interval))
        yield
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper
        await notifier.close()
        logger.info("application_shutting_down")

    app = FastAPI(
        title=settings.app_name,
        description="Relays DNSimple webhook events to Slack",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.wall_clock = wall_clock or WallClock()
    app.state.cache = cache
    app.state.controller = AdmissionController(cache, RelayDispatcher(notifier))

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        logger.info("http_request", method=request.method, path=loggable_path(request.url.path))
        return await call_next(request)

    app.include_router(root.router)
    app.include_router(relay.router)

    return app


app = create_app()
