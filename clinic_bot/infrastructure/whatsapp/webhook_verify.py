from __future__ import annotations

import hmac
import logging


logger = logging.getLogger(__name__)


def verify_hmac_signature(body: bytes, signature_header: str | None, hmac_key: str | None, env: str) -> bool:
    """Check WAHA's X-Webhook-Hmac header (hex HMAC-SHA512 of the raw body)."""
    if not hmac_key:
        return True

    if not signature_header:
        if env.lower() in {"dev", "local"}:
            logger.warning("Missing signature header; accepting in dev mode")
            return True
        return False

    expected = hmac.new(hmac_key.encode("utf-8"), body, "sha512").hexdigest()
    return hmac.compare_digest(expected, signature_header.strip().lower())
