"""Config settings – PasswordStoreSettings."""
from __future__ import annotations

import dataclasses

from password_store.config.errors import InvalidSettingValueError

_NAMESPACE_FIELDS = ("default_namespace", "reserved_namespace")


@dataclasses.dataclass
class PasswordStoreSettings:
    """Settings for the redaction facade and its Vault backends.

    Loaded by :class:`~password_store.config.EnvSettingsLoader` from
    ``PASSWORD_STORE_<FIELD>`` variables, e.g.
    ``PASSWORD_STORE_DEFAULT_NAMESPACE``. Invalid values fail at
    construction.
    """

    _prefix = "PASSWORD_STORE"

    # Namespace used when a payload carries no usable "id".
    default_namespace: str = "mgmt-secrets"
    # References into this namespace are never re-wrapped on write.
    reserved_namespace: str = "mgmt-secrets"
    secret_type: str = "Opaque"
    storage_context: str = "management"
    vault_url: str = "http://127.0.0.1:8200"
    vault_token: str | None = None

    def __post_init__(self) -> None:
        for name in _NAMESPACE_FIELDS:
            value = getattr(self, name)
            if not value:
                raise InvalidSettingValueError(name, value, "must not be empty")
            if ":" in value:
                raise InvalidSettingValueError(name, value, "must not contain ':'")
        if not self.vault_url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("vault_url", self.vault_url, "must be an http(s) URL")
        if self.vault_token is not None and not self.vault_token.strip():
            raise InvalidSettingValueError("vault_token", self.vault_token, "must not be blank")


__all__ = ["PasswordStoreSettings"]
