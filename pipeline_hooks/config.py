import functools

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Levels understood by loguru out of the box
LOG_LEVELS: tuple[str, ...] = (
    "TRACE",
    "DEBUG",
    "INFO",
    "SUCCESS",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


class LoggingConfig(BaseModel):
    """Configuration for the library's loguru sink."""

    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str, info) -> str:
        """Ensure the level is one loguru knows about."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"{info.field_name} must be one of {', '.join(LOG_LEVELS)}, got {v}")
        return level


class Config(BaseSettings):
    """
    Library configuration loaded from the environment.

    Priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    HOOKS_LOG_LEVEL: str = "WARNING"
    HOOKS_LOG_FORMAT: str = DEFAULT_LOG_FORMAT

    # Separator used by HookCollection.implode() when none is given
    HOOKS_IMPLODE_SEPARATOR: str = ", "

    @functools.cached_property
    def logging(self) -> LoggingConfig:
        """Build LoggingConfig from environment variables."""
        return LoggingConfig(level=self.HOOKS_LOG_LEVEL, format=self.HOOKS_LOG_FORMAT)


config = Config()
