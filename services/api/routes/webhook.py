import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from services.api.dependencies import get_app_settings
from shared.config import Settings
from shared.enums import WebhookStatus
from shared.errors import SignatureMismatchError
from shared.metrics import WEBHOOKS_RECEIVED_TOTAL
from shared.schemas import WebhookAcceptedResponse, WebhookEnvelope, WebhookRejectedResponse
from shared.webhooks import dispatch_webhook, summarize_webhook, verify_webhook

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/webhook",
    response_model=WebhookAcceptedResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": WebhookRejectedResponse}},
)
async def receive_webhook(
    settings: Annotated[Settings, Depends(get_app_settings)],
    payload: Annotated[Any, Body()] = None,
) -> WebhookAcceptedResponse | JSONResponse:
    try:
        envelope = WebhookEnvelope.model_validate(payload)
    except ValidationError as e:
        WEBHOOKS_RECEIVED_TOTAL.labels(status=WebhookStatus.MALFORMED.value).inc()
        logger.warning(f"Malformed webhook payload: {e.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=WebhookRejectedResponse(error="Invalid webhook payload").model_dump(),
        )

    logger.info(f"Webhook received data: {envelope.data}")

    try:
        data = verify_webhook(envelope, settings.payos_checksum_key)
    except SignatureMismatchError:
        WEBHOOKS_RECEIVED_TOTAL.labels(status=WebhookStatus.REJECTED.value).inc()
        raise

    logger.info(f"Payment status updated: {summarize_webhook(data)}")
    dispatch_webhook(data)

    WEBHOOKS_RECEIVED_TOTAL.labels(status=WebhookStatus.ACCEPTED.value).inc()
    return WebhookAcceptedResponse()
