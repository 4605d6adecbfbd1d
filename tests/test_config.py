"""Test settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import tomllib
from pathlib import Path

import pytest

from ldap_sdk.config import Settings


def test_version_from_pyproject() -> None:
    """Test default version is the project version."""
    with open(Path(__file__).parent.parent / "pyproject.toml", "rb") as f:
        version = tomllib.load(f)["project"]["version"]

    assert Settings().VENDOR_VERSION == version


def test_version_lines(settings: Settings) -> None:
    """Test version lines."""
    assert settings.get_version_lines() == [
        "Full Name:  LDAP Bind SDK",
        "Short Name:  ldap-bind-sdk",
        "Version Number:  1.2.3",
    ]


def test_from_os(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings read from environ."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", "logs/launcher.log")
    monkeypatch.setenv("VERSION", "9.9.9")
    monkeypatch.delenv("DEBUG", raising=False)

    settings = Settings.from_os()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FILE == "logs/launcher.log"
    assert settings.VENDOR_VERSION == "9.9.9"
    assert settings.DEBUG is False
