"""
Configuration settings for the World Indicators analysis.

Uses Pydantic Settings to load environment variables for the input dataset,
the size of the birth-rate ranking, and logging. Defaults reproduce the
fixed-path behaviour of the command line tool when nothing is configured.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_FILE = "WorldIndicators2000.csv"
DEFAULT_TOP_N = 5


class Settings(BaseSettings):
    # Input
    data_file: str = Field(DEFAULT_DATA_FILE, alias="WI_DATA_FILE")

    # Analysis
    top_n: int = Field(DEFAULT_TOP_N, ge=0, alias="WI_TOP_N")

    # Logging
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_DATA_FILE", "DEFAULT_TOP_N", "Settings", "get_settings"]
