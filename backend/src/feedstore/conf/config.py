import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# Environment variable -> Settings field
ENV_MAP = {
    "RSS_FEEDS_PATH": "feeds_path",
    "RSS_HOST": "host",
    "RSS_PORT": "port",
    "RSS_REQUEST_TIMEOUT": "request_timeout",
    "RSS_DEBUG": "debug",
    "RSS_LOG_PATH": "log_path",
}


class Settings(BaseModel):
    feeds_path: Path = Field(Path("/data"), description="Base directory of feeds")
    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(8080, ge=1, le=65535, description="Bind port")
    request_timeout: float = Field(
        30.0, ge=0, description="Request timeout in seconds, 0 disables it"
    )
    debug: bool = Field(False, description="Enable debug logging")
    log_path: Path | None = Field(None, description="Optional log file")

    @field_validator("feeds_path", mode="before")
    @classmethod
    def _empty_path_is_default(cls, v):
        # An empty RSS_FEEDS_PATH means "unset".
        if v in ("", None):
            return Path("/data")
        return v

    @field_validator("log_path", mode="before")
    @classmethod
    def _empty_log_path_is_none(cls, v):
        if v == "":
            return None
        return v


def load_settings(environ: dict | None = None) -> Settings:
    """Build settings from environment variables.

    Unset variables keep their defaults; invalid values raise a pydantic
    ``ValidationError``.
    """
    environ = os.environ if environ is None else environ
    values = {field: environ[var] for var, field in ENV_MAP.items() if var in environ}
    settings = Settings(**values)
    logger.debug("Loaded settings: %s", settings.model_dump())
    return settings
