"""Runtime services shared by the editor layers."""

from . import telemetry

__all__ = ["telemetry"]
