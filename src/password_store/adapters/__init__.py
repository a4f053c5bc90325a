"""Adapters – concrete secret and namespace backends."""
