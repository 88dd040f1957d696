# sitescore/core/config.py
# -----------------------------------------------------------------------------
# Global settings (pydantic-settings v2)
# - reads the .env file and OS environment into a Settings object
# - scoring constants live in code, not here, so outputs stay reproducible
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # basics
    APP_NAME: str = "SiteScore"
    ENV: str = "dev"

    # logging
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: int | str = 10  # int = file count, str = duration ("10 days")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # ignore unrelated keys in .env
    )


settings = Settings()
