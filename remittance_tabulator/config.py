"""Settings loaded from environment variables (prefix TABULATOR_) or a .env file."""
from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tabulator settings.

    Environment Variables:
        TABULATOR_PREVIEW_LIMIT: Rows shown in the preview table (default 5)
        TABULATOR_SHEET_NAME: Worksheet title for xlsx exports
        TABULATOR_DEFAULT_FILE_NAME: Export file name when none is given
        TABULATOR_MAX_COLUMN_WIDTH: Upper bound for auto-sized xlsx columns
        TABULATOR_WIDTH_SAMPLE_ROWS: Rows sampled when sizing xlsx columns
        TABULATOR_LOG_LEVEL: Logging level (default INFO)
    """

    model_config = SettingsConfigDict(env_prefix='TABULATOR_', env_file='.env', extra='ignore')

    PREVIEW_LIMIT: int = 5
    SHEET_NAME: str = 'Combined Data'
    DEFAULT_FILE_NAME: str = 'combined_data'
    MAX_COLUMN_WIDTH: int = 50
    WIDTH_SAMPLE_ROWS: int = 20
    LOG_LEVEL: str = 'INFO'


@lru_cache()
def get_settings() -> Settings:
    return Settings()
