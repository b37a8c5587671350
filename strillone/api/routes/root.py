"""Liveness endpoint."""

from fastapi import APIRouter, Depends

from strillone.api.dependencies import get_app_settings, get_wall_clock
from strillone.core.clock import Clock
from strillone.core.config import Settings

router = APIRouter(tags=["health"])


@router.get("/")
async def root(
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_wall_clock),
) -> dict:
    """Uptime message for monitoring."""
    return {"ping": int(clock.now()), "what": settings.app_name}
