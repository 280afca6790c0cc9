"""FastAPI application for receiving webhooks."""

import os

from fastapi import FastAPI

from ..logging_config import get_logger
from ..models import Event
from .routes import WebhookHandler, create_webhook_router

logger = get_logger(__name__)


async def log_event(event: Event) -> None:
    """Default handler: log the received event."""
    logger.info(
        "Received %s webhook",
        event.type,
        extra={"event_type": str(event.type), "cid": event.cid, "user_id": event.user_id},
    )


def create_fastapi_app(
    handler: WebhookHandler | None = None,
    api_secret: str | None = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Only the API secret is needed to verify webhooks; it defaults to the
    STREAM_SECRET environment variable.
    """
    if api_secret is None:
        api_secret = os.getenv("STREAM_SECRET", "")

    fastapi_app = FastAPI(
        title="Stream Chat Webhooks",
        description="Receives chat webhook events",
        version="0.1.0",
    )
    fastapi_app.include_router(create_webhook_router(handler or log_event, api_secret))
    return fastapi_app
