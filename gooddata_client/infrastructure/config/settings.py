"""
Configuration settings - Infrastructure component for managing application configuration.
Uses pydantic-settings for validation and environment variable loading.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ... import __version__


class GoodDataSettings(BaseSettings):
    """GoodData service configuration."""

    model_config = SettingsConfigDict(
        env_prefix='GOODDATA_', env_file='.env', case_sensitive=False, extra='ignore'
    )

    root: str = 'https://secure.gooddata.com/gdc'
    username: Optional[str] = None
    password: Optional[str] = None
    user_agent: str = f'python-gooddata-client/{__version__}'

    # Connection settings
    connect_timeout_s: float = 10.0
    read_timeout_s: float = 120.0
    verify_ssl: bool = True

    @field_validator('root')
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Entry point must be an absolute URI."""
        if '://' not in v:
            raise ValueError(f'GOODDATA_ROOT must be an absolute URI, got {v!r}')
        return v.rstrip('/')


class PollSettings(BaseSettings):
    """Asynchronous operation polling configuration."""

    model_config = SettingsConfigDict(
        env_prefix='GOODDATA_POLL_', env_file='.env', case_sensitive=False, extra='ignore'
    )

    interval_s: float = 1.0
    budget: int = 3600

    @field_validator('interval_s')
    @classmethod
    def validate_interval(cls, v: float) -> float:
        return max(0.0, v)

    @field_validator('budget')
    @classmethod
    def validate_budget(cls, v: int) -> int:
        return max(1, v)


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

    # Sub-configurations
    gooddata: GoodDataSettings = Field(default_factory=GoodDataSettings)
    poll: PollSettings = Field(default_factory=PollSettings)

    # Logging
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            return 'INFO'
        return v.upper()

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for serialization, without secrets."""
        return {
            'gooddata': self.gooddata.model_dump(exclude={'password'}),
            'poll': self.poll.model_dump(),
            'log_level': self.log_level,
        }

    def validate_required_settings(self) -> List[str]:
        """Validate credentials and return list of missing ones."""
        missing = []
        if not self.gooddata.username:
            missing.append('GOODDATA_USERNAME')
        if not self.gooddata.password:
            missing.append('GOODDATA_PASSWORD')
        return missing


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Reload settings from environment (for testing)."""
    global _settings
    _settings = AppSettings()
    return _settings
