"""Domain errors shared by the SDK packages.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import BaseDomainException

__all__ = [
    "BaseDomainException",
]
