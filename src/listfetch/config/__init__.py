"""Config – 12-factor settings for the HTTP page fetcher and logging."""
from listfetch.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ListFetchSettings,
    Settings,
    SettingsLoader,
)
from listfetch.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "ListFetchSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
