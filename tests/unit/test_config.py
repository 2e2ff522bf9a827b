import pytest
from pydantic import ValidationError

from shared.config import Settings


def make_settings(**overrides) -> Settings:
    values = {"_env_file": None, "server_url": "http://localhost:3000"}
    values.update(overrides)
    return Settings(**values)


@pytest.mark.unit
class TestSettings:
    def test_default_values(self, monkeypatch):
        for name in ("PAYOS_CLIENT_ID", "PAYOS_API_KEY", "PAYOS_CHECKSUM_KEY"):
            monkeypatch.delenv(name, raising=False)
        settings = make_settings()
        assert settings.payos_client_id == ""
        assert settings.payos_api_key == ""
        assert settings.payos_checksum_key == ""
        assert settings.payos_api_url == "https://api-merchant.payos.vn"
        assert settings.payos_timeout_seconds is None

    def test_default_server_settings(self):
        settings = make_settings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.payment_ttl_seconds == 3600
        assert settings.public_dir == "public"
        assert settings.cors_origins == ["*"]

    def test_default_heartbeat_settings(self):
        settings = make_settings()
        assert settings.heartbeat_enabled is False
        assert settings.heartbeat_interval_seconds == 840.0

    def test_server_url_is_required(self, monkeypatch):
        monkeypatch.delenv("SERVER_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_empty_server_url_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(server_url="")

    def test_override_from_env(self, monkeypatch):
        monkeypatch.setenv("SERVER_URL", "https://relay.example.com")
        monkeypatch.setenv("PAYOS_CLIENT_ID", "cid")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("HEARTBEAT_ENABLED", "true")

        settings = Settings(_env_file=None)
        assert settings.server_url == "https://relay.example.com"
        assert settings.payos_client_id == "cid"
        assert settings.port == 8080
        assert settings.heartbeat_enabled is True

    def test_extra_env_vars_ignored(self, monkeypatch):
        monkeypatch.setenv("UNKNOWN_SETTING", "should_be_ignored")
        settings = make_settings()
        assert not hasattr(settings, "unknown_setting")

    def test_settings_are_immutable(self):
        settings = make_settings()
        with pytest.raises(ValidationError):
            settings.port = 1


@pytest.mark.unit
class TestDerivedUrls:
    def test_return_and_cancel_urls(self):
        settings = make_settings(server_url="https://relay.example.com")
        assert settings.cancel_url == "https://relay.example.com/cancel"
        assert settings.return_url == "https://relay.example.com/success"

    def test_trailing_slash_stripped(self):
        settings = make_settings(server_url="https://relay.example.com/")
        assert settings.cancel_url == "https://relay.example.com/cancel"

    def test_heartbeat_url(self):
        settings = make_settings(server_url="https://relay.example.com")
        assert settings.heartbeat_url == "https://relay.example.com/health"

    def test_payment_requests_url(self):
        settings = make_settings(payos_api_url="https://api-merchant.payos.vn/")
        assert settings.payment_requests_url == "https://api-merchant.payos.vn/v2/payment-requests"


@pytest.mark.unit
class TestCredentialsConfigured:
    def test_all_present(self):
        settings = make_settings(
            payos_client_id="cid", payos_api_key="key", payos_checksum_key="sum"
        )
        assert settings.credentials_configured is True

    @pytest.mark.parametrize("missing", ["payos_client_id", "payos_api_key", "payos_checksum_key"])
    def test_any_missing(self, missing):
        values = {"payos_client_id": "cid", "payos_api_key": "key", "payos_checksum_key": "sum"}
        values[missing] = ""
        settings = make_settings(**values)
        assert settings.credentials_configured is False
