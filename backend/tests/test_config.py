"""
LinkHub Backend — Settings Tests
==================================
"""

import pytest
from pydantic import ValidationError

from linkhub.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("MONGO_URL", "MONGO_DB_NAME", "LOG_LEVEL", "BACKEND_PORT"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.mongo_url == "mongodb://127.0.0.1:27017"
        assert settings.mongo_db_name == "linkedin"
        assert settings.backend_port == 3000
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MONGO_URL", "mongodb://db:27017")
        monkeypatch.setenv("MONGO_DB_NAME", "social")

        settings = Settings(_env_file=None)

        assert settings.mongo_url == "mongodb://db:27017"
        assert settings.mongo_db_name == "social"

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
