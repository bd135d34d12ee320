"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `BKMTREE_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """bkmtree settings.

    All fields are environment-configurable. Prefix is `BKMTREE_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="BKMTREE_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    # Alternate bookmarks live next to the document as `<document><suffix>`
    bookmarks_suffix: str = Field(default=".bkm", min_length=1)
    encoding: str = Field(default="utf-8")


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("BKMTREE_ENV_FILE")
    if env_file_override:
        return Settings(_env_file=Path(env_file_override))

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
