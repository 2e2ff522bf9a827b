"""Map relay errors onto the JSON error bodies clients expect."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.errors import (
    ConfigurationError,
    PaymentValidationError,
    SignatureMismatchError,
    UpstreamError,
)
from shared.schemas import FailureResponse, ValidationErrorResponse, WebhookRejectedResponse

logger = logging.getLogger(__name__)


async def handle_validation_error(request: Request, exc: PaymentValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorResponse(error=exc.error, message=exc.message).model_dump(),
    )


async def handle_configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} configuration error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=FailureResponse(error="Configuration error", details=str(exc)).model_dump(),
    )


async def handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.error(
        f"{request.method} {request.url.path} upstream error: {exc} "
        f"(status={exc.status_code}, details={exc.details})"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=FailureResponse(error="Failed to create payment", details=exc.details).model_dump(),
    )


async def handle_signature_mismatch(request: Request, exc: SignatureMismatchError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} invalid webhook signature")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=WebhookRejectedResponse(error="Invalid signature").model_dump(),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} unreadable body: {exc.errors()}")
    if request.url.path == "/webhook":
        content = WebhookRejectedResponse(error="Invalid webhook payload").model_dump()
    else:
        content = ValidationErrorResponse(
            error="Invalid request", message="Request body must be valid JSON"
        ).model_dump()
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PaymentValidationError, handle_validation_error)
    app.add_exception_handler(ConfigurationError, handle_configuration_error)
    app.add_exception_handler(UpstreamError, handle_upstream_error)
    app.add_exception_handler(SignatureMismatchError, handle_signature_mismatch)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
