"""
Container lifecycle actions, each delegated to a single docker command.
"""
from typing import Optional

from ..errors import AddressLookupError, ConfigError
from ..MODELS.container_spec import ContainerSpec, PortBinding, RestartPolicyCondition, VolumeMount
from ..MODELS.settings import Settings
from ..RUNNERS.process_runner import CommandResult, ProcessRunner
from ..UTILS.console import status

CONTAINER_CACHE_PATH = "/var/cache/mud-manager"
CONTAINER_PORT_ENV = "MUD_MANAGER_PORT"
SHELL_ENTRYPOINT = "/bin/sh"
TRACE_TAIL_LINES = 50
ADDRESS_FORMAT = "{{range .NetworkSettings.Networks}}{{.IPAddress}} {{end}}"


class ContainerManager:
    """
    Manages the MUD manager container through the docker CLI.
    """
    def __init__(self, runner: Optional[ProcessRunner] = None):
        """
        Initializes the container manager.

        :param runner: Runner used for docker calls.
        """
        self.runner = runner or ProcessRunner()

    def pull(self, settings: Settings) -> CommandResult:
        """Pulls the configured image and tag."""
        return self.runner.docker(["pull", str(settings.image)])

    def service_spec(self, settings: Settings) -> ContainerSpec:
        """
        Describes the long-running service container.

        The cache directory is the only writable path, the root filesystem is read-only.
        """
        return ContainerSpec(
            image=str(settings.image),
            name=settings.docker_name,
            detach=True,
            read_only=True,
            restart_policy=RestartPolicyCondition.UNLESS_STOPPED,
            ports=[
                PortBinding(
                    host_address=settings.bind_address,
                    host_port=settings.bind_port,
                    container_port=settings.bind_port,
                )
            ],
            volumes=[VolumeMount(source=str(settings.mud_cache_path), target=CONTAINER_CACHE_PATH)],
            environment={CONTAINER_PORT_ENV: str(settings.bind_port)},
        )

    def run(self, settings: Settings) -> CommandResult:
        """
        Starts the service container in the background.

        :raises ConfigError: If the cache directory does not exist.
        """
        if not settings.mud_cache_path.is_dir():
            raise ConfigError(
                f"Cache directory {settings.mud_cache_path} does not exist, "
                f"run 'setup-cache-dir' first"
            )
        return self.runner.docker(self.service_spec(settings).to_run_args())

    def run_shell(self, settings: Settings) -> CommandResult:
        """Starts a throwaway interactive container with a shell entrypoint."""
        spec = ContainerSpec(
            image=str(settings.image),
            entrypoint=SHELL_ENTRYPOINT,
            interactive=True,
            remove_on_exit=True,
        )
        return self.runner.docker(spec.to_run_args())

    def remove(self, settings: Settings) -> CommandResult:
        return self.runner.docker(["container", "rm", settings.docker_name])

    def kill(self, settings: Settings) -> CommandResult:
        return self.runner.docker(["kill", settings.docker_name])

    def logs(self, settings: Settings) -> CommandResult:
        return self.runner.docker(["logs", "--timestamps", settings.docker_name])

    def trace(self, settings: Settings) -> CommandResult:
        """
        Follows the container logs until interrupted.

        An interrupt is the normal way to stop tracing and counts as success.
        """
        command = ["logs", "--timestamps", "--follow", "--tail", str(TRACE_TAIL_LINES), settings.docker_name]
        try:
            return self.runner.docker(command)
        except KeyboardInterrupt:
            status(f"Stopped tracing {settings.docker_name}.")
            return CommandResult(command=[self.runner.docker_binary] + command)

    def address(self, settings: Settings) -> CommandResult:
        """
        Looks up the IP address of the container.

        :return: A result whose output is the address, one per attached network.
        :raises AddressLookupError: If docker reports no address for the container.
        """
        result = self.runner.docker(
            ["inspect", "--format", ADDRESS_FORMAT, settings.docker_name], capture=True
        )
        addresses = (result.output or "").split()
        if not addresses:
            raise AddressLookupError(settings.docker_name)
        return CommandResult(command=result.command, output="\n".join(addresses))
