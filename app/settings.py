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
        frozen=True,
    )

    # Payload CMS
    CMS_URL: str = "http://localhost:3030"
    PAYLOAD_API_KEY: str = ""

    # Blog
    BLOG_PATH_PREFIX: str = "/blog"
    DATE_LOCALE: str = "en-IN"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    CMS_POSTS_API_KEY: str = ""

    @property
    def posts_api_url(self) -> str:
        return f"{self.CMS_URL.rstrip('/')}/api/posts"

    @property
    def cms_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.PAYLOAD_API_KEY:
            headers["Authorization"] = f"Bearer {self.PAYLOAD_API_KEY}"
        return headers


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
