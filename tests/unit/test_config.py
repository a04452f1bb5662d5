"""Tests for database pool settings."""

from typing import Any
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from vocabmaster import database
from vocabmaster.config import Settings


class TestDatabasePoolSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.DATABASE_POOL_SIZE == 5
        assert settings.DATABASE_MAX_OVERFLOW == 5
        assert settings.DATABASE_POOL_RECYCLE_SECONDS == 1800

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_POOL_SIZE", "3")
        monkeypatch.setenv("DATABASE_MAX_OVERFLOW", "0")

        settings = Settings()

        assert settings.DATABASE_POOL_SIZE == 3
        assert settings.DATABASE_MAX_OVERFLOW == 0

    def test_pool_size_must_be_positive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_POOL_SIZE", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_server_engine_uses_pool_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict[str, Any]] = []

        def fake_create_engine(url: str, **kwargs: Any) -> MagicMock:
            calls.append({"url": url, **kwargs})
            return MagicMock()

        monkeypatch.setattr(database, "create_engine", fake_create_engine)
        monkeypatch.setattr(database, "_engine", None)
        monkeypatch.setattr(database, "_session_factory", None)
        monkeypatch.setenv("DATABASE_URL", "postgresql://vocab@localhost/vocabmaster")
        monkeypatch.setenv("DATABASE_POOL_SIZE", "4")
        monkeypatch.setenv("DATABASE_MAX_OVERFLOW", "2")
        monkeypatch.setenv("DATABASE_POOL_RECYCLE_SECONDS", "600")

        database.initialize_database(Settings())

        assert calls == [
            {
                "url": "postgresql://vocab@localhost/vocabmaster",
                "pool_size": 4,
                "max_overflow": 2,
                "pool_pre_ping": True,
                "pool_recycle": 600,
            }
        ]
