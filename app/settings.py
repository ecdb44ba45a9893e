from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Contentful
    CONTENTFUL_SPACE_ID: str = ""
    CONTENTFUL_ACCESS_TOKEN: str = ""
    CONTENTFUL_ENVIRONMENT: str = "master"
    CONTENTFUL_HOST: str = "cdn.contentful.com"
    CONTENTFUL_TIMEOUT: float = 10.0
    CONTENTFUL_INCLUDE_DEPTH: int = 2

    # Blog
    BLOG_CONTENT_TYPE: str = "blogPost"
    ASSET_URL_SCHEME: str = "https:"

    # Contact form
    CONTACT_FORM_ENDPOINT: str = ""
    CONTACT_TIMEOUT: float = 10.0

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    PORTFOLIO_API_KEY: str = ""

    @property
    def contentful_url(self) -> str:
        return f"https://{self.CONTENTFUL_HOST}/spaces/{self.CONTENTFUL_SPACE_ID}/environments/{self.CONTENTFUL_ENVIRONMENT}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
