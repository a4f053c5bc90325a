"""Redaction – the password-redacting store facade."""
from password_store.redaction.install import install_password_store
from password_store.redaction.naming import secret_name, secret_namespace
from password_store.redaction.store import PasswordStore
from password_store.redaction.walker import Direction, FieldMatch, walk

__all__ = [
    "Direction",
    "FieldMatch",
    "PasswordStore",
    "install_password_store",
    "secret_name",
    "secret_namespace",
    "walk",
]
