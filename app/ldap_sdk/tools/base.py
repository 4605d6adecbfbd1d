"""Common parts of command-line tools.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
import sys
from typing import Any, Callable, NoReturn, Sequence, TextIO

from ldap_sdk.ldap_codes import LDAPCodes

ToolEntryPoint = Callable[
    [Sequence[str], TextIO | None, TextIO | None],
    LDAPCodes,
]


def write_line(sink: TextIO | None, line: str = "") -> None:
    """Write a line to sink, do nothing if sink is None."""
    if sink is not None:
        print(line, file=sink)


class ToolExit(Exception):  # noqa N818
    """Raised by parser instead of terminating the process."""

    def __init__(self, status: int) -> None:
        """Set exit status."""
        super().__init__(status)
        self.status = status

    @property
    def result_code(self) -> LDAPCodes:
        """Status 0 comes from `--help`, anything else is a usage error."""
        if self.status == 0:
            return LDAPCodes.SUCCESS
        return LDAPCodes.PARAM_ERROR


class ToolArgumentParser(argparse.ArgumentParser):
    """Argument parser bound to output and error sinks.

    Help goes to `out`, usage errors go to `err`. Either may be None,
    then the text is dropped. Instead of calling `sys.exit` the parser
    raises `ToolExit`.
    """

    def __init__(
        self,
        *args: Any,
        out: TextIO | None,
        err: TextIO | None,
        **kwargs: Any,
    ) -> None:
        """Create parser.

        Args:
            *args: argparse.ArgumentParser args
            out (TextIO | None): output sink
            err (TextIO | None): error sink
            **kwargs: argparse.ArgumentParser kwargs
        """
        super().__init__(*args, **kwargs)
        self.out = out
        self.err = err

    def _sink(self, file: TextIO | None) -> TextIO | None:
        if file is sys.stderr:
            return self.err
        return self.out

    def print_usage(self, file: TextIO | None = None) -> None:
        sink = self._sink(file)
        if sink is not None:
            super().print_usage(sink)

    def print_help(self, file: TextIO | None = None) -> None:
        sink = self._sink(file)
        if sink is not None:
            super().print_help(sink)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message and self.err is not None:
            self.err.write(message)
        raise ToolExit(status)
