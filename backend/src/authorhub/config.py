from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str

    # App
    environment: str = "development"
    debug: bool = False
    app_name: str = "authorhub"
    app_version: str = "0.1.0"

    # Logging; LOG_JSON unset means JSON only when stdout is not a TTY
    log_level: str = "INFO"
    log_json: bool | None = None

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
