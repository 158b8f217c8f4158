from fastapi import Depends

from postpages.repos.pages_repo import BuiltPagesRepo
from postpages.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_pages_repo(current_settings: Settings = Depends(get_settings)):
    return BuiltPagesRepo(current_settings.output_path)
