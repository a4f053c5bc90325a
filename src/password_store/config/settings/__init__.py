"""Config settings – env-based configuration."""
from password_store.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from password_store.config.settings.password_store import PasswordStoreSettings

__all__ = ["EnvSettingsLoader", "PasswordStoreSettings", "SettingsLoader"]
