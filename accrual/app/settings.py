from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """HTTP API settings, read from ``ACCRUAL_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="ACCRUAL_", case_sensitive=False, env_file=".env")

    # comma-separated; empty means no cross-origin access
    cors_origins: str = ""

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
