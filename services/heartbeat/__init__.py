"""Keep-alive heartbeat that pings the relay's own health endpoint."""

from services.heartbeat.pinger import ping_once, run_heartbeat

__all__ = ["ping_once", "run_heartbeat"]
