from pathlib import Path

import pytest
from pydantic import ValidationError

from app.settings import Settings, choose_env_file


def test_defaults_point_at_local_cms(monkeypatch):
    monkeypatch.delenv("CMS_URL", raising=False)
    monkeypatch.delenv("PAYLOAD_API_KEY", raising=False)
    s = Settings(_env_file=None)

    assert s.CMS_URL == "http://localhost:3030"
    assert s.DATE_LOCALE == "en-IN"
    assert s.posts_api_url == "http://localhost:3030/api/posts"
    assert s.cms_headers == {"Content-Type": "application/json"}


def test_reads_cms_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CMS_URL", "https://cms.example/")
    monkeypatch.setenv("PAYLOAD_API_KEY", "k")
    s = Settings(_env_file=None)

    assert s.posts_api_url == "https://cms.example/api/posts"
    assert s.cms_headers["Authorization"] == "Bearer k"


def test_settings_are_immutable():
    s = Settings(CMS_URL="http://cms.example")

    with pytest.raises(ValidationError):
        s.CMS_URL = "http://elsewhere"


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
