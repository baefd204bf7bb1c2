"""
crates-info Configuration

Logging setup and client settings for the crates lookup tool.
"""

import logging

import structlog
from pydantic import BaseModel, Field, validator

DEFAULT_API_URL = "https://crates.io/api/v1"
DEFAULT_USER_AGENT = "crates (github.com/typable/crates)"

# Logs go to stderr so stdout only ever carries the lookup result
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Route structlog through stdlib logging instead of printing to stdout
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

crates_logger = structlog.get_logger("crates_info")


class Settings(BaseModel):
    """Settings for talking to the crates.io registry."""

    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the registry API")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent sent with every request")
    timeout: float | None = Field(default=None, description="Request timeout in seconds, None waits indefinitely")
    log_level: str = Field(default="WARNING", description="Root log level")

    @validator('api_url')
    def strip_trailing_slash(cls, v):
        return v.rstrip('/')

    @validator('log_level')
    def validate_log_level(cls, v):
        level = v.upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in valid_levels:
            raise ValueError(f"log_level must be one of: {valid_levels}")
        return level


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    logging.getLogger().setLevel(settings.log_level)
