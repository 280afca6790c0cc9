"""API routes."""

from .webhooks import WebhookAck, WebhookHandler, create_webhook_router

__all__ = ["WebhookAck", "WebhookHandler", "create_webhook_router"]
