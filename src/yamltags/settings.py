"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for loading and validating YAML documents.

    Values are read from ``YAMLTAGS_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="YAMLTAGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # What to do when a tag names a rule nobody registered:
    #   warn  - log a warning and skip the rule
    #   fail  - record an UNKNOWN_RULE failure and keep going
    #   raise - abort the pass with UnknownRuleError
    unknown_rule: Literal["warn", "fail", "raise"] = "warn"

    # Loader safety limits
    max_document_size: int = 5_000_000  # characters
    max_depth: int = 20
    max_node_count: int = 50_000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment once."""
    return Settings()
