"""
password_store – schema-driven password redaction for resource stores.

Import path convention::

    from password_store.redaction import PasswordStore, install_password_store
    from password_store.schema import InMemorySchemaRegistry, build_field_index
    from password_store.secrets import SecretManager, decode, encode
    from password_store.adapters.vault import VaultSecretBackend
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
