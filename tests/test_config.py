"""Тесты конфигурации"""

import pytest
from pydantic import ValidationError

from obs_presign.config import Configuration
from obs_presign.models.types import Protocol

ENV_VARS = (
    "KEY_ID",
    "KEY_SECRET",
    "BUCKET_NAME",
    "HOST_NAME",
    "PROTOCOL",
    "DEFAULT_EXPIRES",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfiguration:
    def test_defaults(self) -> None:
        config = Configuration()
        assert config.key_id is None
        assert config.key_secret is None
        assert config.bucket_name == ""
        assert config.protocol is Protocol.HTTPS
        assert config.default_expires == 3600
        assert config.log_level == "INFO"

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("KEY_ID", "AK")
        monkeypatch.setenv("KEY_SECRET", "SK")
        monkeypatch.setenv("BUCKET_NAME", "photos")
        monkeypatch.setenv("HOST_NAME", "obs.example.com")
        monkeypatch.setenv("PROTOCOL", "HTTP")
        monkeypatch.setenv("DEFAULT_EXPIRES", "600")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = Configuration()

        assert config.protocol is Protocol.HTTP
        assert config.default_expires == 600
        assert config.log_level == "DEBUG"
        context = config.bucket_context()
        assert context.bucket_name == "photos"
        assert context.host_name == "obs.example.com"
        assert context.access_key == "AK"
        assert context.secret_access_key == "SK"

    def test_reads_dotenv_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("KEY_ID=from-file\nBUCKET_NAME=b1\n", encoding="utf-8")
        config = Configuration()
        assert config.key_id == "from-file"
        assert config.bucket_name == "b1"

    def test_invalid_log_level(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Configuration()

    def test_expiry_must_be_positive(self, monkeypatch) -> None:
        monkeypatch.setenv("DEFAULT_EXPIRES", "0")
        with pytest.raises(ValidationError):
            Configuration()

    def test_secret_hidden_from_repr(self, monkeypatch) -> None:
        monkeypatch.setenv("KEY_SECRET", "very-secret-value")
        assert "very-secret-value" not in repr(Configuration())
