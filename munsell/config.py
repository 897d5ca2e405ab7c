"""
Munsell Configuration
Reads environment variables and defaults for the classifier's ambient services.
"""
import os

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


def env_flag(value: str) -> bool:
    """Parse a boolean environment value; unrecognized text counts as off."""
    return value.strip().lower() in ("1", "true", "yes", "on")


def env_log_level(value: str) -> str:
    """Normalize a log level name, falling back to the default when unknown."""
    level = value.strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


class Config:
    """Configuration class for the munsell library."""

    # Logging (applies once enable_logging() is called)
    LOG_LEVEL: str = env_log_level(os.environ.get("MUNSELL_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    LOG_SERIALIZE: bool = env_flag(os.environ.get("MUNSELL_LOG_SERIALIZE", "0"))

    # Accepted hex digit counts once a leading '#' is stripped
    HEX_LENGTHS = (3, 6, 8)

    @classmethod
    def validate_log_level(cls, level: str) -> bool:
        """Validate a loguru level name."""
        return level.upper() in LOG_LEVELS


# Global config instance
config = Config()
