"""FastAPI dependencies resolving per-application components."""

from fastapi import Request

from strillone.admission.controller import AdmissionController
from strillone.core.clock import Clock
from strillone.core.config import Settings


def get_admission_controller(request: Request) -> AdmissionController:
    """Admission controller owned by the running application."""
    return request.app.state.controller


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_wall_clock(request: Request) -> Clock:
    """Clock used for the liveness timestamp."""
    return request.app.state.wall_clock
