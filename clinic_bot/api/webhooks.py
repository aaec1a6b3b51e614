from __future__ import annotations

import json
import logging

from fastapi import APIRouter, BackgroundTasks, Request, Response
from pydantic import ValidationError

from clinic_bot.application.dto.webhook_event import WahaWebhookEventDTO
from clinic_bot.core.config import settings
from clinic_bot.infrastructure.whatsapp.webhook_verify import verify_hmac_signature
from clinic_bot.wiring.dependencies import get_handle_incoming_message_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/webhooks/whatsapp")
async def whatsapp_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
) -> Response:
    body = await request.body()
    signature = request.headers.get("X-Webhook-Hmac")
    if not verify_hmac_signature(body, signature, settings.WAHA_WEBHOOK_HMAC_KEY, settings.ENV):
        logger.warning("Rejected webhook with bad signature")
        return Response(status_code=403)

    try:
        payload = json.loads(body.decode("utf-8")) if body else {}
        event = WahaWebhookEventDTO.model_validate(payload)
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError):
        logger.exception("Failed to parse webhook body")
        return Response(status_code=400)

    message = event.extract_message()
    if message is None:
        logger.debug("Webhook event ignored", extra={"reason": event.event})
        return Response(status_code=200)

    try:
        use_case = get_handle_incoming_message_use_case()
    except Exception as e:
        logger.exception("Failed to initialize use case", extra={"reason": str(e)})
        return Response(status_code=500)

    logger.info("Webhook received", extra={"message_id": message.id, "chat_id": message.chat_id})
    background_tasks.add_task(use_case.handle, message)
    return Response(status_code=200)
