"""
API routes for receiving WooCommerce order webhooks and reading recent ones.
"""
import json
import logging

import requests
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from webhook_api.core.clock import Clock, get_clock, to_iso
from webhook_api.core.errors import ValidationError
from webhook_api.services.woocommerce.schemas import (
    LatestWebhookResponse,
    NoWebhooksResponse,
    RecentWebhooksResponse,
    SimulationResponse,
    WebhookAccepted,
    WebhookRejected,
)
from webhook_api.services.woocommerce.simulator import build_sample_order, send_sample_webhook
from webhook_api.services.woocommerce.store import RecentWebhookStore, get_store
from webhook_api.services.woocommerce.validator import normalize, validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["WooCommerce Webhook"])


def _reject_constant(name: str):
    # NaN and Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant: {name}")


@router.post(
    "/webhook/woocommerce",
    response_model=WebhookAccepted,
    responses={400: {"model": WebhookRejected}},
)
async def receive_woocommerce_webhook(
    request: Request,
    store: RecentWebhookStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """
    Recebe o pedido do WooCommerce, valida, resume e guarda entre os recentes.
    """
    now = clock()
    logger.info(f"📥 Received webhook: {to_iso(now)}")
    logger.debug(f"Headers: {dict(request.headers)}")

    try:
        payload = json.loads(await request.body(), parse_constant=_reject_constant)
    except ValueError:
        payload = None
    logger.debug(f"Body: {json.dumps(payload, indent=2, default=str)}")

    try:
        validate(payload, legacy_truthy=request.app.state.settings.LEGACY_TRUTHY_VALIDATION)
    except ValidationError as e:
        logger.warning(f"❌ Webhook processing error: {e.message}")
        rejected = WebhookRejected(error=e.message, received_at=to_iso(now))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=rejected.model_dump())

    stored = store.insert(normalize(payload, now), now)

    logger.info("✅ Webhook processed successfully")
    logger.info(f"📋 Order: #{stored.id} – ${stored.total} – {stored.status} – {stored.transaction_id}")

    return WebhookAccepted(order_id=stored.id, processed_at=stored.processed_at)


@router.get("/webhooks/recent", response_model=RecentWebhooksResponse)
async def list_recent_webhooks(store: RecentWebhookStore = Depends(get_store)):
    """Recent webhooks for the frontend, newest first."""
    webhooks = store.list_recent()
    return RecentWebhooksResponse(count=len(webhooks), webhooks=webhooks)


@router.get(
    "/webhooks/latest",
    response_model=LatestWebhookResponse,
    responses={404: {"model": NoWebhooksResponse}},
)
async def get_latest_webhook(store: RecentWebhookStore = Depends(get_store)):
    latest = store.latest()
    if latest is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=NoWebhooksResponse().model_dump(),
        )
    return LatestWebhookResponse(webhook=latest)


@router.post(
    "/test/simulate-webhook",
    response_model=SimulationResponse,
    tags=["Development"],
)
def simulate_webhook(request: Request, clock: Clock = Depends(get_clock)):
    """
    Envia um pedido de exemplo para o próprio endpoint de webhook.

    Runs in the threadpool; the event loop must stay free to serve the
    webhook call it triggers.
    """
    app_settings = request.app.state.settings
    sample_data = build_sample_order(clock())

    try:
        result = send_sample_webhook(
            app_settings.simulator_webhook_url,
            sample_data,
            timeout=app_settings.SIMULATOR_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        logger.error(f"❌ Test webhook failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": str(e)},
        )

    return SimulationResponse(sample_data=sample_data, webhook_response=result)
