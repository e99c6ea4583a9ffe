from functools import lru_cache
from pathlib import Path

from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "local"
    api_v1_prefix: str = "/api/v1"

    # Store
    data_dir: Path = Path.home() / ".sismed"
    database_filename: str = "sismed.db"
    backup_filename: str = "sismed_backup.db"
    sql_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def database_path(self) -> Path:
        root = self.data_dir.expanduser()
        if not root.is_absolute():
            root = Path.cwd() / root
        return root / self.database_filename


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance so the .env is parsed once.
    """
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """
    FastAPI dependency returning the settings the application was built with.
    """
    return request.app.state.settings
