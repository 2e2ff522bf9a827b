"""FastAPI relay service between merchant clients and PayOS."""

from services.api.main import app, create_app

__all__ = ["app", "create_app"]
