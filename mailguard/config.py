# mailguard/config.py
import logging
import os
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "mailguard"

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # Optional override for the bundled TLD list (IANA-style text file)
    TLD_FILE: Optional[str] = os.environ.get("TLD_FILE") or None

    # Callers bound input size before validation
    MAX_INPUT_LENGTH: int = int(os.environ.get("MAX_INPUT_LENGTH", 1024))

    # File upload limits
    MAX_UPLOAD_SIZE_MB: int = int(os.environ.get("MAX_UPLOAD_SIZE_MB", 16))

    DEBUG: bool = os.environ.get("DEBUG", "False").lower() in ("1", "true", "yes")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
