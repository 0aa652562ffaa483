"""Config – 12-factor settings and loaders."""

from gateway_auth.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from gateway_auth.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
