"""SASL bind configuration.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .digest_md5 import DEFAULT_QOP, DigestMD5BindRequestProperties
from .enums import SASLMethod, SASLQualityOfProtection
from .exceptions import InvalidQoPError, SASLError

__all__ = [
    "DEFAULT_QOP",
    "DigestMD5BindRequestProperties",
    "InvalidQoPError",
    "SASLError",
    "SASLMethod",
    "SASLQualityOfProtection",
]
