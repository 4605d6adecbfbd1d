"""Module with settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
import tomllib
from importlib import metadata
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _get_vendor_version() -> str:
    if _PYPROJECT.exists():
        with _PYPROJECT.open("rb") as f:
            return tomllib.load(f)["project"]["version"]
    return metadata.version(Settings.SHORT_NAME)


class Settings(BaseModel):
    """Settings for the command-line tools."""

    DEBUG: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None
    LOG_RETENTION: str = "10 days"
    LOG_ROTATION: str = "1d"

    FULL_NAME: ClassVar[str] = "LDAP Bind SDK"
    SHORT_NAME: ClassVar[str] = "ldap-bind-sdk"
    VENDOR_VERSION: str = Field(
        default_factory=_get_vendor_version,
        alias="VERSION",
    )

    @field_validator("LOG_LEVEL", mode="before")
    def upper_log_level(cls, level: str) -> str:  # noqa: N805
        """Normalize loguru level name."""
        return str(level).upper()

    def get_version_lines(self) -> list[str]:
        """Lines printed by the `version` command."""
        return [
            f"Full Name:  {self.FULL_NAME}",
            f"Short Name:  {self.SHORT_NAME}",
            f"Version Number:  {self.VENDOR_VERSION}",
        ]

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)
