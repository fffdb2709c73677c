"""
⚙️ SETTINGS — Where things live and how loud the logs are
=========================================================
Read from environment variables (prefix SCHEDULER_) or a local .env file.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class SchedulerSettings(BaseSettings):
    """Runtime settings for the timetable generator."""

    data_dir: Path = Field(
        default=Path(__file__).parent / "data",
        description="Directory holding the saved catalog",
    )
    catalog_file: str = Field(
        default="catalog.json",
        description="Catalog file name inside data_dir",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Fixed seed for reproducible timetables; unset means a new timetable every time",
    )

    model_config = {
        "env_prefix": "SCHEDULER_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file


_settings: Optional[SchedulerSettings] = None


def get_settings() -> SchedulerSettings:
    """Settings singleton."""
    global _settings
    if _settings is None:
        _settings = SchedulerSettings()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
