"""Decides whether an inbound event is new work."""

from strillone.admission.controller import AdmissionController, AdmissionResult, RelayOutcome

__all__ = ["AdmissionController", "AdmissionResult", "RelayOutcome"]
