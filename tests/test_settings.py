from __future__ import annotations

import pytest

from usercrud_backend.settings import BackendSettings, get_settings


def test_settings_read_mongo_uri_from_env() -> None:
    assert get_settings().mongo_uri == "sqlite://"


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MONGO_URI", raising=False)

    config = BackendSettings(_env_file=None)

    assert config.mongo_uri == "mongodb://localhost:27017/usercrud"
    assert config.api_port == 3000
