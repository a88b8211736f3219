"""User CRUD backend package wiring and entrypoints."""

from usercrud_backend.settings import BackendSettings, get_settings

__all__ = ["BackendSettings", "get_settings"]
