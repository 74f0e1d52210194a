"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for money display defaults and logging."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    money_locale: str = Field(default="ru-RU", alias="MONEY_LOCALE")
    money_currency: str = Field(default="RUB", alias="MONEY_CURRENCY")
    money_decimal_separator: str = Field(
        default=".",
        alias="MONEY_DECIMAL_SEPARATOR",
        min_length=1,
        max_length=1,
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def format_defaults(self) -> dict[str, Any]:
        """Return locale format options bound into shared money helpers."""

        return {"locale": self.money_locale, "currency": self.money_currency}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
