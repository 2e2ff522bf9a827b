import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from services.api.dependencies import set_payment_gateway, set_settings
from services.api.errors import register_exception_handlers
from services.api.middleware import MetricsMiddleware
from services.api.routes import health, metrics, payments, webhook
from services.heartbeat.pinger import run_heartbeat
from shared.config import Settings, get_settings
from shared.payos import PaymentGateway

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> "AsyncGenerator[None, None]":
    settings: Settings = app.state.settings

    set_settings(settings)
    set_payment_gateway(PaymentGateway(settings))
    logger.info(f"Relay configured for {settings.server_url}")
    if not settings.credentials_configured:
        logger.warning("PayOS credentials are incomplete; /create-payment will fail")

    heartbeat_task: asyncio.Task[int] | None = None
    stop_event = asyncio.Event()
    if settings.heartbeat_enabled:
        heartbeat_task = asyncio.create_task(run_heartbeat(settings, stop_event=stop_event))

    yield

    if heartbeat_task is not None:
        stop_event.set()
        with contextlib.suppress(asyncio.CancelledError):
            await heartbeat_task
    logger.info("Relay shut down")


def _mount_public_dir(app: FastAPI, public_dir: str) -> None:
    path = Path(public_dir)
    if not path.is_dir():
        logger.warning(f"Public directory {path} not found, static files disabled")
        return
    app.mount("/", StaticFiles(directory=path, html=True), name="public")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="PayOS Relay",
        description="Payment link creation and webhook verification for PayOS",
        version=health.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(MetricsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(metrics.router, tags=["metrics"])
    app.include_router(payments.router, tags=["payments"])
    app.include_router(webhook.router, tags=["webhook"])

    _mount_public_dir(app, settings.public_dir)

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


app = create_app()


if __name__ == "__main__":
    run()
