import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import HTMLResponse, JSONResponse

from services.api.dependencies import get_payment_gateway
from shared.enums import PaymentRequestStatus
from shared.errors import ConfigurationError, PaymentValidationError, UpstreamError
from shared.metrics import PAYMENT_REQUESTS_TOTAL
from shared.pages import render_cancel_page, render_success_page
from shared.payos import PaymentGateway
from shared.schemas import validate_payment_order

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/create-payment")
async def create_payment(
    gateway: Annotated[PaymentGateway, Depends(get_payment_gateway)],
    payload: Annotated[Any, Body()] = None,
) -> JSONResponse:
    try:
        order = validate_payment_order(payload)
    except PaymentValidationError:
        PAYMENT_REQUESTS_TOTAL.labels(status=PaymentRequestStatus.INVALID.value).inc()
        raise

    logger.info(
        f"Payment request data: amount={order.amount} "
        f"description={order.description!r} orderCode={order.order_code}"
    )

    try:
        result = await gateway.create_payment_link(order)
    except ConfigurationError:
        PAYMENT_REQUESTS_TOTAL.labels(status=PaymentRequestStatus.CONFIG_ERROR.value).inc()
        raise
    except UpstreamError:
        PAYMENT_REQUESTS_TOTAL.labels(status=PaymentRequestStatus.UPSTREAM_ERROR.value).inc()
        raise

    PAYMENT_REQUESTS_TOTAL.labels(status=PaymentRequestStatus.CREATED.value).inc()
    return JSONResponse(content=result)


@router.get("/success", response_class=HTMLResponse)
async def payment_success(
    order_code: Annotated[str | None, Query(alias="orderCode")] = None,
    status: str | None = None,
) -> HTMLResponse:
    logger.info(f"Payment success: orderCode={order_code} status={status}")
    return HTMLResponse(render_success_page(order_code, status))


@router.get("/cancel", response_class=HTMLResponse)
async def payment_cancel(
    order_code: Annotated[str | None, Query(alias="orderCode")] = None,
) -> HTMLResponse:
    logger.info(f"Payment cancelled: orderCode={order_code}")
    return HTMLResponse(render_cancel_page(order_code))
