from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    settle_epsilon: float = Field(0.01, alias="BILLSPLIT_SETTLE_EPSILON", gt=0)
    match_tolerance: float = Field(0.1, alias="BILLSPLIT_MATCH_TOLERANCE", gt=0)
    amount_places: int = Field(2, alias="BILLSPLIT_AMOUNT_PLACES", ge=0)
    log_level: str = Field("INFO", alias="BILLSPLIT_LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
