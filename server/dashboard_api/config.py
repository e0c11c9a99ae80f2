"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="HEALTHTWIN_")

    # Database location
    data_path: str = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    database_file: str = "healthtwin.db"

    @property
    def database_path(self) -> str:
        return os.path.join(self.data_path, self.database_file)

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8082
    log_level: str = "INFO"

    # Engine defaults
    default_user_name: str = "Friend"
    forecast_days: int = 30
    baseline_window_days: int = 7
    streak_lookback_days: int = 365

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
