"""Launcher dispatching to command-line tools by name.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys
from typing import TextIO

from loguru import logger as loguru_logger

from ldap_sdk.config import Settings
from ldap_sdk.ldap_codes import LDAPCodes

from . import bind_properties, sasl_mechanisms
from .base import ToolEntryPoint, write_line

VERSION_COMMAND = "version"

log = loguru_logger.bind(name="launcher")

TOOLS: dict[str, ToolEntryPoint] = {
    bind_properties.TOOL_NAME: bind_properties.main,
    sasl_mechanisms.TOOL_NAME: sasl_mechanisms.main,
}


def get_supported_names() -> list[str]:
    """Get tool names accepted by the launcher."""
    return [*TOOLS, VERSION_COMMAND]


def main(
    out: TextIO | None,
    err: TextIO | None,
    *args: str,
    settings: Settings | None = None,
) -> LDAPCodes:
    """Run a tool selected by the first argument.

    Without arguments, or with `version`, prints version lines. Names
    are matched ignoring case, the remaining arguments are passed to the
    tool as is.

    Args:
        out (TextIO | None): output sink, None to suppress output
        err (TextIO | None): error sink, None to suppress errors
        *args (str): tool name and its arguments
        settings (Settings | None): settings, taken from environ if None

    Returns:
        LDAPCodes: tool result code, PARAM_ERROR for an unknown tool name
    """
    if not args or args[0].lower() == VERSION_COMMAND:
        settings = settings or Settings.from_os()
        for line in settings.get_version_lines():
            write_line(out, line)
        return LDAPCodes.SUCCESS

    name, *tool_args = args
    tool = TOOLS.get(name.lower())

    if tool is None:
        log.warning(f"Unrecognized tool name '{name}'")
        write_line(err, f"Unrecognized tool name '{name}'")
        write_line(err, "Supported tool names include:")
        for supported in get_supported_names():
            write_line(err, f"     {supported}")
        return LDAPCodes.PARAM_ERROR

    log.debug(f"Running {name.lower()} with {len(tool_args)} arguments")
    result = tool(tool_args, out, err)
    log.debug(f"{name.lower()} finished with {result.name}")
    return result


def setup_logging(settings: Settings) -> None:
    """Replace default loguru handler according to settings."""
    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
    )

    if settings.LOG_FILE:
        loguru_logger.add(
            settings.LOG_FILE,
            filter=lambda rec: rec["extra"].get("name") == "launcher",
            level=settings.LOG_LEVEL,
            retention=settings.LOG_RETENTION,
            rotation=settings.LOG_ROTATION,
            colorize=False,
        )


def run() -> None:
    """Console entry point."""
    settings = Settings.from_os()
    setup_logging(settings)
    result = main(sys.stdout, sys.stderr, *sys.argv[1:], settings=settings)
    sys.exit(int(result))
