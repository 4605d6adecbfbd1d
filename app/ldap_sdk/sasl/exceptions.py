"""SASL exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum

from ldap_sdk.errors import BaseDomainException
from ldap_sdk.ldap_codes import LDAPCodes


class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    INVALID_QOP_ERROR = 1


class SASLError(BaseDomainException):
    """Base exception for SASL configuration errors."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR
    result_code: LDAPCodes = LDAPCodes.LOCAL_ERROR


class InvalidQoPError(SASLError, ValueError):
    """Raised when a quality of protection name is unknown."""

    code = ErrorCodes.INVALID_QOP_ERROR
    result_code = LDAPCodes.PARAM_ERROR
