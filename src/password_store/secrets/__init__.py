"""Secrets – backend ports, reference codec and the secret manager."""
from password_store.secrets.manager import SecretManager
from password_store.secrets.port import Namespace, NamespaceBackend, SecretBackend, SecretEntry
from password_store.secrets.reference import SEPARATOR, decode, encode

__all__ = [
    "Namespace",
    "NamespaceBackend",
    "SEPARATOR",
    "SecretBackend",
    "SecretEntry",
    "SecretManager",
    "decode",
    "encode",
]
