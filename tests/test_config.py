import pytest
from pydantic import ValidationError

from comicinfo.config import Settings


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("COMICINFO_LOG_LEVEL", "debug")
    assert Settings(_env_file=None).log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("COMICINFO_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    monkeypatch.delenv("COMICINFO_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COMICINFO_MAX_UPLOAD_BYTES", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.max_upload_bytes == 1024 * 1024
