"""Tool listing SASL mechanism names.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Sequence, TextIO

from ldap_sdk.ldap_codes import LDAPCodes
from ldap_sdk.sasl import SASLMethod

from .base import ToolArgumentParser, ToolExit, write_line

TOOL_NAME = "sasl-mechanisms"


def main(
    args: Sequence[str],
    out: TextIO | None,
    err: TextIO | None,
) -> LDAPCodes:
    """Print registered SASL mechanism names, one per line."""
    parser = ToolArgumentParser(
        prog=TOOL_NAME,
        description="List SASL mechanism names.",
        out=out,
        err=err,
    )
    try:
        parser.parse_args(list(args))
    except ToolExit as exc:
        return exc.result_code

    for mechanism in SASLMethod:
        write_line(out, mechanism.value)
    return LDAPCodes.SUCCESS
