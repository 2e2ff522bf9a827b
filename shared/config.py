from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    payos_client_id: str = Field(default="")
    payos_api_key: str = Field(default="")
    payos_checksum_key: str = Field(default="")
    payos_api_url: str = Field(default="https://api-merchant.payos.vn")
    payos_timeout_seconds: float | None = Field(default=None, gt=0)

    # Public base URL of this service; return/cancel links and the heartbeat
    # target are derived from it.
    server_url: str = Field(..., min_length=1)

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    payment_ttl_seconds: int = Field(default=3600, gt=0)

    heartbeat_enabled: bool = Field(default=False)
    heartbeat_interval_seconds: float = Field(default=840.0, gt=0)

    public_dir: str = Field(default="public")
    cors_origins: list[str] = Field(default=["*"])
    log_level: str = Field(default="INFO")

    @field_validator("server_url", "payos_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def cancel_url(self) -> str:
        return f"{self.server_url}/cancel"

    @property
    def return_url(self) -> str:
        return f"{self.server_url}/success"

    @property
    def heartbeat_url(self) -> str:
        return f"{self.server_url}/health"

    @property
    def payment_requests_url(self) -> str:
        return f"{self.payos_api_url}/v2/payment-requests"

    @property
    def credentials_configured(self) -> bool:
        return bool(self.payos_client_id and self.payos_api_key and self.payos_checksum_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
