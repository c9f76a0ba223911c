from functools import lru_cache

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

from currency_converter.models.constants import (
    BASE_CURRENCY,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
)

ALLOWED_RATE_PROVIDERS = {"static", "external-http"}


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    EXCHANGE_API_URL, EXCHANGE_RATE_PROVIDER, HTTP_RETRIES).
    """

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Exchange rates
    base_currency: str = BASE_CURRENCY
    exchange_api_url: AnyHttpUrl = "https://api.exchangerate-api.com/v4/latest/USD"
    http_timeout_seconds: float = 5.0
    http_retries: int = 0  # single attempt unless configured
    http_backoff_seconds: float = 0.5

    # Allowed: 'external-http' (live API), 'static' (built-in fixed table)
    exchange_rate_provider: str = "external-http"

    # Form defaults
    default_from_currency: str = DEFAULT_FROM_CURRENCY
    default_to_currency: str = DEFAULT_TO_CURRENCY

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def init_post_load(self) -> None:
        """Normalize currency codes and validate the provider name."""
        self.base_currency = self.base_currency.upper()
        self.default_from_currency = self.default_from_currency.upper()
        self.default_to_currency = self.default_to_currency.upper()
        if self.exchange_rate_provider not in ALLOWED_RATE_PROVIDERS:
            raise ValueError(
                f"Unsupported exchange_rate_provider '{self.exchange_rate_provider}'. Allowed: {ALLOWED_RATE_PROVIDERS}"
            )
        if self.http_retries < 0:
            raise ValueError("http_retries must be zero or positive")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
