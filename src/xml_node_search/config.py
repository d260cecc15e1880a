"""
Configuration management using Pydantic Settings.

Loads runtime defaults from environment variables (prefix XML_NODE_SEARCH_)
and an optional .env file. Provides type-safe access to:
- Default CSV report path
- Default console column separator
- Logging level for the command-line front end
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_COLUMN_SEPARATOR = "   |   "
DEFAULT_CSV_OUTPUT = "xml-node-search.csv"


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Command-line options always win; these values only replace the
    built-in defaults shown in ``--help``.

    Environment Variables (from .env):
        XML_NODE_SEARCH_COLUMN_SEPARATOR: Separator for verbose console lines
        XML_NODE_SEARCH_CSV_OUTPUT: Report file written when -o is not given
        XML_NODE_SEARCH_LOG_LEVEL: Logging level name (e.g., "INFO")

    Example:
        >>> config = get_app_config()
        >>> config.csv_output
        'xml-node-search.csv'
        >>> config.column_separator
        '   |   '
    """

    column_separator: str = Field(
        default=DEFAULT_COLUMN_SEPARATOR,
        description="Separator between path and node text in verbose output"
    )

    csv_output: str = Field(
        default=DEFAULT_CSV_OUTPUT,
        description="Path of the CSV report"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the command-line front end"
    )

    model_config = SettingsConfigDict(
        env_prefix='XML_NODE_SEARCH_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name and reject unknown levels."""
        level = v.strip().upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Unknown log level: '{v}'")
        return level


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Configuration is loaded from environment variables and .env file.
    Cached after first access.

    Returns:
        Singleton AppConfig instance

    Example:
        >>> config = get_app_config()
        >>> config2 = get_app_config()
        >>> config is config2  # Same instance
        True
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reset_app_config() -> None:
    """Drop the cached AppConfig so the next access re-reads the environment."""
    global _app_config
    _app_config = None
