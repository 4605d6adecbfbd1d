"""SASL enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from __future__ import annotations

from enum import StrEnum
from typing import Iterable

from .exceptions import InvalidQoPError


class SASLMethod(StrEnum):
    """SASL choices."""

    PLAIN = "PLAIN"
    EXTERNAL = "EXTERNAL"
    GSSAPI = "GSSAPI"
    CRAM_MD5 = "CRAM-MD5"
    DIGEST_MD5 = "DIGEST-MD5"
    SCRAM_SHA_1 = "SCRAM-SHA-1"
    SCRAM_SHA_256 = "SCRAM-SHA-256"
    OAUTHBEARER = "OAUTHBEARER"


class SASLQualityOfProtection(StrEnum):
    """Quality of protection negotiated after a SASL bind.

    ```
    AUTH = "auth"            authentication only
    AUTH_INT = "auth-int"    authentication with integrity protection
    AUTH_CONF = "auth-conf"  authentication with integrity and confidentiality
    ```
    """

    AUTH = "auth"
    AUTH_INT = "auth-int"
    AUTH_CONF = "auth-conf"

    @classmethod
    def decode(cls, name: str) -> SASLQualityOfProtection | None:
        """Get a QoP by its name, ignoring case.

        Args:
            name (str): QoP name, e.g. `auth-conf`

        Returns:
            SASLQualityOfProtection | None: member or None if unknown
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None

    @classmethod
    def decode_list(cls, value: str) -> list[SASLQualityOfProtection]:
        """Decode a comma-separated list of QoP names.

        Order is kept, empty items are skipped.

        Args:
            value (str): names, e.g. `auth-conf,auth-int,auth`

        Raises:
            InvalidQoPError: if one of the names is unknown

        Returns:
            list[SASLQualityOfProtection]: decoded values
        """
        result = []
        for item in value.split(","):
            if not item.strip():
                continue

            qop = cls.decode(item)
            if qop is None:
                raise InvalidQoPError(
                    f"Unsupported SASL quality of protection '{item.strip()}'",
                )
            result.append(qop)
        return result

    @staticmethod
    def to_string(qop: Iterable[SASLQualityOfProtection]) -> str:
        """Join QoP values with commas, in the given order."""
        return ",".join(item.value for item in qop)
