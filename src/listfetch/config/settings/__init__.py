"""Config settings – 12-factor env-based configuration."""
from listfetch.config.settings.base import ListFetchSettings, Settings
from listfetch.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ListFetchSettings", "Settings", "SettingsLoader"]
