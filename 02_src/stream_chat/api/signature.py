"""Webhook signature verification."""

import hashlib
import hmac


def compute_signature(body: bytes, secret: str) -> str:
    """HMAC-SHA256 hex digest of the raw request body."""
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def verify_signature(body: bytes, signature: str, secret: str) -> bool:
    """Check an X-Signature header against the raw body."""
    expected = compute_signature(body, secret)
    return hmac.compare_digest(expected, signature.strip().lower())
