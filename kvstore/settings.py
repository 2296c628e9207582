import logging
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class Settings(BaseSettings):
    log_level: LogLevel = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="KVSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()


def configure_logging(config: Optional[Settings] = None) -> None:
    """Apply the configured level to the ``kvstore`` logger.

    Handlers and formatting are left to the host application.
    """
    config = config or settings
    logging.getLogger("kvstore").setLevel(config.log_level)
