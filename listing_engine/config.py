"""Feed configuration."""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FEED_URL = (
    "https://docs.google.com/spreadsheets/d/REPLACE_WITH_YOUR_SHEET_ID/pub?gid=0&single=true&output=csv"
)


class Settings(BaseSettings):
    """Runtime configuration.

    Expected sheet columns: id, title, district, price, beds, size, address,
    tags (comma-separated inside the field).
    """

    model_config = SettingsConfigDict(
        env_prefix="LISTINGS_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    data_source: Literal["static", "sheet"] = Field(default="static")
    feed_url: str = Field(default=DEFAULT_FEED_URL)
    feed_timeout_s: float = Field(default=20.0, gt=0)

    @model_validator(mode="after")
    def _require_url_for_sheet(self) -> "Settings":
        """A sheet feed without a URL can never load."""

        if self.data_source == "sheet" and not self.feed_url.strip():
            raise ValueError("feed_url is required when data_source is 'sheet'")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
