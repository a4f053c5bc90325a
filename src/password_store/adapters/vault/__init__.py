"""HashiCorp Vault adapter – secret and namespace backends."""
from password_store.adapters.vault.store import VaultNamespaceBackend, VaultSecretBackend

__all__ = ["VaultNamespaceBackend", "VaultSecretBackend"]
