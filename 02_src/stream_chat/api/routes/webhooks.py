"""Webhook receiver routes."""

from typing import Awaitable, Callable

from fastapi import APIRouter, Header, HTTPException, Request
from pydantic import BaseModel

from ...codec import decode
from ...errors import MalformedDocument
from ...logging_config import get_logger
from ...models import Event
from ..signature import verify_signature

logger = get_logger(__name__)


WebhookHandler = Callable[[Event], Awaitable[None]]


class WebhookAck(BaseModel):
    """Response model for an accepted webhook."""

    type: str
    accepted: bool = True


def create_webhook_router(handler: WebhookHandler, api_secret: str) -> APIRouter:
    """Create webhook router."""
    if not api_secret:
        raise ValueError("an API secret is required to verify webhooks")

    router = APIRouter(tags=["webhooks"])

    @router.post("/webhooks", response_model=WebhookAck)
    async def receive_webhook(
        request: Request,
        x_signature: str | None = Header(None),
    ) -> dict:
        """Verify, decode and hand over one webhook event."""
        body = await request.body()
        if not x_signature or not verify_signature(body, x_signature, api_secret):
            logger.warning("Rejected webhook with invalid signature")
            raise HTTPException(status_code=401, detail="invalid webhook signature")

        try:
            event = decode(Event, body)
        except MalformedDocument as e:
            logger.warning("Rejected malformed webhook: %s", e)
            raise HTTPException(status_code=400, detail=str(e))

        await handler(event)
        return {"type": str(event.type), "accepted": True}

    return router
