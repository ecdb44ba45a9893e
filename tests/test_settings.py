from pathlib import Path

from app.settings import Settings, choose_env_file


def test_contentful_url_uses_environment():
    s = Settings(
        CONTENTFUL_HOST="preview.contentful.com",
        CONTENTFUL_SPACE_ID="abc",
        CONTENTFUL_ENVIRONMENT="dev",
    )
    assert s.contentful_url == "https://preview.contentful.com/spaces/abc/environments/dev"


def test_defaults():
    s = Settings(_env_file=None)
    assert s.CONTENTFUL_ENVIRONMENT == "master"
    assert s.BLOG_CONTENT_TYPE == "blogPost"
    assert s.ASSET_URL_SCHEME == "https:"


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
