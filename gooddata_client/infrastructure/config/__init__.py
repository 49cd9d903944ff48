"""Configuration infrastructure package."""

from .settings import AppSettings, GoodDataSettings, PollSettings, get_settings, reload_settings

__all__ = ['AppSettings', 'GoodDataSettings', 'PollSettings', 'get_settings', 'reload_settings']
