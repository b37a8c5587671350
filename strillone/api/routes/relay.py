"""Webhook ingestion endpoint."""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse
from starlette.requests import ClientDisconnect

from strillone.admission.controller import (
    PROCESSING_STATUS_HEADER,
    SKIPPED_ALREADY_PROCESSED,
    AdmissionController,
    RelayOutcome,
)
from strillone.api.dependencies import get_admission_controller
from strillone.core.exceptions import BodyReadError
from strillone.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["relay"])

# Methods other than POST are routed here so they get a bare 405.
_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


async def read_body(request: Request) -> bytes:
    """Read the full request body.

    Raises:
        BodyReadError: If the client went away mid-body
    """
    try:
        return await request.body()
    except ClientDisconnect as e:
        raise BodyReadError("client disconnected while sending the body") from e


@router.api_route("/relay/{alpha}/{beta}/{gamma}", methods=_METHODS)
@router.api_route("/slack/{alpha}/{beta}/{gamma}", methods=_METHODS)
async def relay_event(
    alpha: str,
    beta: str,
    gamma: str,
    request: Request,
    controller: AdmissionController = Depends(get_admission_controller),
) -> Response:
    """Relay a webhook event to the destination named by the path."""
    if request.method != "POST":
        return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

    try:
        body = await read_body(request)
    except BodyReadError as e:
        logger.warning("body_read_failed", error=e.message)
        return PlainTextResponse(f"{e.message}\n", status_code=status.HTTP_400_BAD_REQUEST)

    result = await controller.admit(body, (alpha, beta, gamma))

    if result.outcome is RelayOutcome.PARSE_ERROR:
        return PlainTextResponse(f"{result.error}\n", status_code=status.HTTP_400_BAD_REQUEST)

    if result.outcome is RelayOutcome.SKIPPED_DUPLICATE:
        return Response(
            status_code=status.HTTP_200_OK,
            headers={PROCESSING_STATUS_HEADER: SKIPPED_ALREADY_PROCESSED},
        )

    if result.outcome is RelayOutcome.RELAY_ERROR:
        return PlainTextResponse(
            f"{result.error}\n",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return PlainTextResponse(f"{result.text}\n")
