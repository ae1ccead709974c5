"""
Status output on stderr, so stdout only carries command results.
"""
import click

PREFIX = "[mudctl]"


def status(message: str):
    """Prints a progress line."""
    click.secho(f"{PREFIX} {message}", err=True, fg="cyan")


def success(message: str):
    """Prints a completion line."""
    click.secho(f"{PREFIX} {message}", err=True, fg="green")
