"""Tool printing DIGEST-MD5 bind request properties.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path
from typing import Sequence, TextIO

from loguru import logger as loguru_logger
from pydantic import ValidationError

from ldap_sdk.ldap_codes import LDAPCodes
from ldap_sdk.sasl import (
    DigestMD5BindRequestProperties,
    SASLError,
    SASLQualityOfProtection,
)

from .base import ToolArgumentParser, ToolExit, write_line

TOOL_NAME = "bind-properties"

log = loguru_logger.bind(name="launcher")


def _get_parser(
    out: TextIO | None,
    err: TextIO | None,
) -> ToolArgumentParser:
    parser = ToolArgumentParser(
        prog=TOOL_NAME,
        description=(
            "Build DIGEST-MD5 bind request properties and print them. "
            "The password is never printed."
        ),
        out=out,
        err=err,
    )
    parser.add_argument(
        "--authid",
        required=True,
        help="Authentication ID, e.g. 'dn:uid=alice,dc=example,dc=com' "
        "or 'u:alice'",
    )
    parser.add_argument("--authzid", help="Alternate authorization ID")
    parser.add_argument("--realm", help="Realm, server chooses if omitted")

    password = parser.add_mutually_exclusive_group()
    password.add_argument("--password", help="Password")
    password.add_argument(
        "--password-file",
        type=Path,
        help="File with password, read as raw bytes",
    )

    choices = SASLQualityOfProtection.to_string(SASLQualityOfProtection)
    parser.add_argument(
        "--qop",
        default="",
        help=f"Comma-separated allowed QoP, most preferred first ({choices})",
    )
    return parser


def main(
    args: Sequence[str],
    out: TextIO | None,
    err: TextIO | None,
) -> LDAPCodes:
    """Run tool.

    Args:
        args (Sequence[str]): command-line arguments
        out (TextIO | None): output sink
        err (TextIO | None): error sink

    Returns:
        LDAPCodes: SUCCESS, PARAM_ERROR on bad arguments or LOCAL_ERROR if\
            password file can not be read
    """
    parser = _get_parser(out, err)
    try:
        parsed = parser.parse_args(list(args))
    except ToolExit as exc:
        return exc.result_code

    password: str | bytes | None = parsed.password
    if parsed.password_file is not None:
        try:
            password = parsed.password_file.read_bytes()
        except OSError as exc:
            log.error(f"Can not read password file: {exc}")
            write_line(err, f"Unable to read password file: {exc}")
            return LDAPCodes.LOCAL_ERROR

    try:
        properties = DigestMD5BindRequestProperties(
            parsed.authid,
            password,
            authorization_id=parsed.authzid,
            realm=parsed.realm,
            allowed_qop=SASLQualityOfProtection.decode_list(parsed.qop),
        )
    except SASLError as exc:
        write_line(err, str(exc))
        return exc.result_code
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            write_line(err, f"Invalid {field}: {error['msg']}")
        return LDAPCodes.PARAM_ERROR

    write_line(out, str(properties))
    return LDAPCodes.SUCCESS
