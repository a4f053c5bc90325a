"""Config – errors raised while loading or validating settings."""
from __future__ import annotations

from password_store.kernel.errors import BaseError
from password_store.kernel.security import MASK, is_sensitive


class ConfigError(BaseError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No ``<PREFIX>_<FIELD>`` variable for a field without a default."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"environment variable {env_key} is required", detail={"env_key": env_key})
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting holds a value the password store cannot work with.

    The value is quoted in the message unless the setting itself is
    secret-bearing (``vault_token``), in which case it is masked.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        shown = MASK if is_sensitive(setting_name) else repr(value)
        super().__init__(
            f"{setting_name}={shown}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
