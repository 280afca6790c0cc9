"""API module."""

from .app import create_fastapi_app, log_event
from .signature import compute_signature, verify_signature

__all__ = ["create_fastapi_app", "log_event", "compute_signature", "verify_signature"]
