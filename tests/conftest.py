"""Test main config.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import io
from dataclasses import dataclass

import pytest

from ldap_sdk.config import Settings


@dataclass
class TestCreds:
    """Credentials used across tests."""

    __test__ = False

    authid: str = "u:alice"
    password: str = "s3cr3t"
    realm: str = "example.com"


@pytest.fixture
def creds() -> TestCreds:
    """Get creds."""
    return TestCreds()


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Get settings with fixed version."""
    return Settings(VERSION="1.2.3")


@pytest.fixture
def out() -> io.StringIO:
    """Output sink."""
    return io.StringIO()


@pytest.fixture
def err() -> io.StringIO:
    """Error sink."""
    return io.StringIO()
