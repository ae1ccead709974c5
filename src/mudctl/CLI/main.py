"""
Command Line Interface for mudctl.
"""
import click
from dotenv import find_dotenv, load_dotenv
from pathlib import Path
from pydantic import ValidationError

from ..errors import MudctlError, UsageError
from ..MANAGERS.dispatcher import OperationDispatcher
from ..UTILS.console import success
from ..MODELS.settings import (
    DEFAULT_BIND_ADDRESS,
    DEFAULT_BIND_PORT,
    DEFAULT_DOCKER_IMAGE,
    DEFAULT_DOCKER_IMAGE_TAG,
    DEFAULT_DOCKER_NAME,
    DEFAULT_MUD_CACHE_PATH,
    Operation,
    Settings,
)

ENVVAR_PREFIX = "MUDCTL"

CONTEXT_SETTINGS = {
    # The operation must come after every option.
    "allow_interspersed_args": False,
    "auto_envvar_prefix": ENVVAR_PREFIX,
    "help_option_names": ["-h", "--help"],
}

OPERATIONS_EPILOG = """\b
Operations:
  docker-pull       Pull the image
  docker-run        Run the service container in the background
  docker-run-shell  Run an interactive shell in a throwaway container
  docker-rm         Remove the container
  docker-kill       Kill the running container
  docker-logs       Show the container logs with timestamps
  docker-trace      Follow the last 50 log lines until interrupted
  setup-cache-dir   Create the cache directory (uses sudo)
  clear-cache-dir   Delete the cache directory contents (uses sudo)
  docker-address    Print the container IP address
"""


class MudctlCommand(click.Command):
    """
    Reports every parsing problem as a UsageError with the full usage text.
    """
    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except UsageError:
            raise
        except click.UsageError as e:
            ctx = e.ctx or click.Context(self, info_name=info_name, parent=parent)
            raise UsageError(e.format_message(), ctx) from e


def describe_validation_error(error: ValidationError) -> str:
    """
    Turns a pydantic error into one line per offending option.
    """
    lines = []
    for detail in error.errors():
        field = str(detail["loc"][0]) if detail["loc"] else "operation"
        lines.append(f"Invalid value for '--{field.replace('_', '-')}': {detail['msg']}")
    return "\n".join(lines)


@click.command(cls=MudctlCommand, context_settings=CONTEXT_SETTINGS, epilog=OPERATIONS_EPILOG)
@click.option('--docker-image', metavar='ID', default=DEFAULT_DOCKER_IMAGE, show_default=True,
              help='Image to pull and run, without a tag.')
@click.option('--docker-image-tag', metavar='TAG', default=DEFAULT_DOCKER_IMAGE_TAG, show_default=True,
              help='Image tag.')
@click.option('--docker-name', metavar='NAME', default=DEFAULT_DOCKER_NAME, show_default=True,
              help='Container name.')
@click.option('--mud-cache-path', metavar='PATH', default=DEFAULT_MUD_CACHE_PATH, show_default=True,
              type=click.Path(path_type=Path), help='Host cache directory mounted into the container.')
@click.option('--bind-address', metavar='ADDR', default=DEFAULT_BIND_ADDRESS, show_default=True,
              help='Host address the service port is published on.')
@click.option('--bind-port', metavar='PORT', default=DEFAULT_BIND_PORT, show_default=True,
              type=click.IntRange(1, 65535), help='Service port, on the host and in the container.')
@click.argument('operation', metavar='<operation>', type=click.Choice([op.value for op in Operation]))
@click.pass_context
def cli(ctx, operation, **options):
    """
    mudctl - control the MUD manager service container.

    Every option can also be set through an environment variable named
    after it, e.g. MUDCTL_BIND_PORT for --bind-port.
    """
    try:
        settings = Settings(operation=Operation(operation), **options)
    except ValidationError as e:
        raise UsageError(describe_validation_error(e), ctx) from e

    ctx.ensure_object(dict)
    dispatcher = OperationDispatcher(ctx.obj.get('runner'))
    try:
        result = dispatcher.dispatch(settings)
    except MudctlError as e:
        raise click.ClickException(str(e)) from e

    if result.output:
        click.echo(result.output)
    success(f"{settings.operation.value} finished.")

def main():
    """
    Main entry point for the CLI.
    """
    # Variables already set in the environment take precedence over .env.
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path)
    cli(obj={})

if __name__ == '__main__':
    main()
