from pathlib import Path
from typing import List

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

    # Content
    CONTENT_DIR: Path = Path("content/insights")
    CONTENT_EXTENSION: str = ".mdx"

    # Site
    BASE_URL: str = "http://localhost:3000"
    INSIGHTS_PATH: str = "/insights"
    STATIC_ROUTES: List[str] = ["", "/insights"]

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def site_url(self) -> str:
        return self.BASE_URL.rstrip("/")


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
