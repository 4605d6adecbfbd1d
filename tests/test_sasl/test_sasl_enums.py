"""Test SASL enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from ldap_sdk.ldap_codes import LDAPCodes
from ldap_sdk.sasl import (
    InvalidQoPError,
    SASLError,
    SASLMethod,
    SASLQualityOfProtection as QoP,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("auth", QoP.AUTH),
        ("AUTH-INT", QoP.AUTH_INT),
        (" Auth-Conf ", QoP.AUTH_CONF),
        ("auth-none", None),
        ("", None),
    ],
)
def test_decode(name: str, expected: QoP | None) -> None:
    """Test decode ignores case and returns None for unknown names."""
    assert QoP.decode(name) is expected


def test_decode_list() -> None:
    """Test decode list keeps order and duplicates."""
    assert QoP.decode_list("auth-conf, auth-int,,auth,auth-conf") == [
        QoP.AUTH_CONF,
        QoP.AUTH_INT,
        QoP.AUTH,
        QoP.AUTH_CONF,
    ]
    assert QoP.decode_list("") == []
    assert QoP.decode_list(" , ") == []


def test_decode_list_invalid() -> None:
    """Test unknown names raise InvalidQoPError."""
    with pytest.raises(InvalidQoPError) as exc_info:
        QoP.decode_list("auth,privacy")

    assert "privacy" in str(exc_info.value)
    assert isinstance(exc_info.value, SASLError)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.result_code == LDAPCodes.PARAM_ERROR


def test_to_string() -> None:
    """Test QoP joined in given order."""
    assert QoP.to_string([QoP.AUTH_INT, QoP.AUTH]) == "auth-int,auth"
    assert QoP.to_string([]) == ""
    assert QoP.to_string(QoP) == "auth,auth-int,auth-conf"


def test_digest_md5_registered() -> None:
    """Test DIGEST-MD5 is a known mechanism name."""
    assert SASLMethod("DIGEST-MD5") is SASLMethod.DIGEST_MD5
