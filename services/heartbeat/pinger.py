import asyncio
import logging

import httpx

from shared.config import Settings
from shared.enums import HeartbeatStatus
from shared.metrics import HEARTBEATS_TOTAL

logger = logging.getLogger(__name__)


async def ping_once(client: httpx.AsyncClient, url: str) -> bool:
    try:
        response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        HEARTBEATS_TOTAL.labels(status=HeartbeatStatus.FAILED.value).inc()
        logger.warning(f"Heartbeat to {url} failed: {e}")
        return False

    if response.is_error:
        HEARTBEATS_TOTAL.labels(status=HeartbeatStatus.FAILED.value).inc()
        logger.warning(f"Heartbeat to {url} returned status {response.status_code}")
        return False

    HEARTBEATS_TOTAL.labels(status=HeartbeatStatus.OK.value).inc()
    logger.debug(f"Heartbeat to {url} ok")
    return True


async def _wait_or_stop(stop_event: asyncio.Event, timeout: float) -> bool:
    try:
        await asyncio.wait_for(stop_event.wait(), timeout=timeout)
    except TimeoutError:
        return False
    return True


async def run_heartbeat(
    settings: Settings,
    stop_event: asyncio.Event | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    max_beats: int | None = None,
) -> int:
    """Ping ``settings.heartbeat_url`` every interval until stopped.

    The first ping goes out one full interval after start. Failures are only
    logged; the loop keeps going. Returns the number of pings attempted.
    """
    stop_event = stop_event or asyncio.Event()
    url = settings.heartbeat_url
    interval = settings.heartbeat_interval_seconds

    logger.info(f"Heartbeat started: pinging {url} every {interval}s")

    beats = 0
    async with httpx.AsyncClient(transport=transport) as client:
        while not stop_event.is_set():
            if max_beats is not None and beats >= max_beats:
                break
            if await _wait_or_stop(stop_event, interval):
                break
            await ping_once(client, url)
            beats += 1

    logger.info(f"Heartbeat stopped after {beats} pings")
    return beats
