"""Config – 12-factor settings for the password store."""

from password_store.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from password_store.config.settings import EnvSettingsLoader, PasswordStoreSettings, SettingsLoader

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PasswordStoreSettings",
    "SettingsLoader",
]
