"""Configuration and store root resolution (Pydantic settings)."""

import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_APP_DIR_NAME = "paper-reader-data"


class StoreSettings(BaseSettings):
    """Store settings. Env prefix PAPERSTORE_."""

    model_config = SettingsConfigDict(
        env_prefix="PAPERSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Optional[Path] = Field(
        default=None,
        description="Explicit store root; overrides the platform default",
    )
    app_dir_name: str = Field(
        default=DEFAULT_APP_DIR_NAME,
        description="Subfolder created under the local application-data area",
    )


def local_app_data_dir() -> Path:
    """Return the platform's local application-data directory."""
    if sys.platform == "win32":
        local = os.environ.get("LOCALAPPDATA")
        if local:
            return Path(local)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def resolve_store_root(settings: Optional[StoreSettings] = None) -> Path:
    """Resolve the absolute store root path.

    The directory is not created here; DataFileStore creates it lazily.

    Args:
        settings: Settings to use (defaults to environment-loaded settings)

    Returns:
        Absolute path of the store root
    """
    settings = settings or StoreSettings()
    if settings.data_dir is not None:
        return settings.data_dir.expanduser().absolute()
    return (local_app_data_dir() / settings.app_dir_name).absolute()
