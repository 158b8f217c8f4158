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

    # Content store
    CONTENT_DIR: str = "content"
    DEFAULT_LANG: str = "en"
    LANGUAGES: List[str] = ["en"]

    # Build output
    OUTPUT_DIR: str = "build"
    BUILD_WORKERS: int = 1
    POSTS_PREFIX: str = "/posts/"

    # Suggestions
    SUGGESTION_LIMIT: int = 5
    SUGGESTION_TAG_WEIGHT: int = 2
    SUGGESTION_SERIES_WEIGHT: int = 1

    # Table of contents
    TOC_MAX_DEPTH: int = 3

    # Site
    REPO_PATH: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def output_path(self) -> Path:
        return Path(self.OUTPUT_DIR)

    @property
    def source_base_url(self) -> str:
        return f"https://github.com/{self.REPO_PATH}/tree/master"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
