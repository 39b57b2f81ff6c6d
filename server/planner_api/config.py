"""Application configuration loaded from environment variables."""
from datetime import timedelta, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Student's local timezone (IANA name)
    timezone: str = "UTC"

    # Reminder policy
    event_lead_minutes: int = 30
    task_lead_hours: int = 24
    morning_hour: int = 8

    # Notification center
    notification_history: int = 100

    @property
    def tzinfo(self) -> tzinfo:
        return ZoneInfo(self.timezone)

    @property
    def event_lead(self) -> timedelta:
        return timedelta(minutes=self.event_lead_minutes)

    @property
    def task_lead(self) -> timedelta:
        return timedelta(hours=self.task_lead_hours)

    model_config = SettingsConfigDict(env_prefix="PLANNER_")


@lru_cache
def get_settings() -> Settings:
    return Settings()
