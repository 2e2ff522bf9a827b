import asyncio
import logging
import signal

from services.heartbeat.pinger import run_heartbeat
from shared.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def _run() -> int:
    settings = get_settings()
    stop_event = asyncio.Event()

    loop = asyncio.get_running_loop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(signum, stop_event.set)

    return await run_heartbeat(settings, stop_event=stop_event)


def main() -> None:
    beats = asyncio.run(_run())
    logger.info(f"Heartbeat process exiting after {beats} pings")


if __name__ == "__main__":
    main()
