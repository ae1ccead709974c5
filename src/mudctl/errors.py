"""
Exceptions raised by mudctl operations.

Every error is fatal to the current invocation; the CLI turns any
MudctlError into an ``Error: ...`` line on stderr and exit status 1.
"""
from typing import List, Optional

import click


class MudctlError(Exception):
    """Base class for errors raised while running an operation."""

    exit_code = 1


class ConfigError(MudctlError):
    """A precondition on local state does not hold, e.g. a missing cache directory."""


class DelegateError(MudctlError):
    """
    A delegated external command could not be started or exited non-zero.
    """

    def __init__(self, command: List[str], returncode: Optional[int], reason: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        self.reason = reason
        if reason:
            message = f"'{' '.join(command)}' could not be started: {reason}"
        else:
            message = f"'{' '.join(command)}' exited with status {returncode}"
        super().__init__(message)


class AddressLookupError(MudctlError, LookupError):
    """The container runtime answered, but the container has no IP address."""

    def __init__(self, container_name: str):
        self.container_name = container_name
        super().__init__(f"No IP address assigned to container '{container_name}'")


class UsageError(click.UsageError):
    """
    Bad or missing command line arguments.

    Unlike click's own usage errors this prints the full usage text,
    not just the one-line synopsis, and exits with status 1.
    """

    exit_code = 1

    def show(self, file=None):
        err = file is None
        if self.ctx is not None:
            click.echo(self.ctx.get_help(), file=file, err=err)
            click.echo(file=file, err=err)
        click.echo(f"Error: {self.format_message()}", file=file, err=err)
