"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from env vars (``NOTES_*``) or a .env file."""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NOTES_",
    }

    # Storage
    storage_path: Path = Path("notes_storage.json")
    storage_key: str = "notesApp"
    storage_quota_bytes: int = 5 * 1024 * 1024  # browsers allow ~5 MiB per origin

    # Timers (seconds)
    delete_animation_delay: float = 0.3
    notice_duration: float = 3.0
    notice_exit_duration: float = 0.3

    # Display
    rederive_display_date: bool = True

    # Logging
    log_level: str = "INFO"


settings = Settings()
