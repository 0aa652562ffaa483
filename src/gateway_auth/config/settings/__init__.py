"""Config settings – 12-factor env-based configuration."""
from gateway_auth.config.settings.base import Settings
from gateway_auth.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
