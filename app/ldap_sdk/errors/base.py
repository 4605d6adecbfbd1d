"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class BaseDomainException(Exception):  # noqa N818
    """Base exception, each subclass carries a domain error code."""

    code: IntEnum

    def __init_subclass__(cls) -> None:
        """Check that the subclass declares an error code."""
        super().__init_subclass__()

        if not isinstance(getattr(cls, "code", None), IntEnum):
            raise AttributeError(f"{cls.__name__}.code must be an IntEnum")
