from shared.config import Settings
from shared.payos import PaymentGateway

_settings: Settings | None = None
_payment_gateway: PaymentGateway | None = None


def set_settings(settings: Settings) -> None:
    global _settings
    _settings = settings


def set_payment_gateway(gateway: PaymentGateway) -> None:
    global _payment_gateway
    _payment_gateway = gateway


def get_app_settings() -> Settings:
    if _settings is None:
        raise RuntimeError("Settings not initialized")
    return _settings


def get_payment_gateway() -> PaymentGateway:
    if _payment_gateway is None:
        raise RuntimeError("Payment gateway not initialized")
    return _payment_gateway
