"""
Maps each operation to the action implementing it.
"""
from typing import Callable, Dict, Optional

from ..MODELS.settings import Operation, Settings
from ..RUNNERS.process_runner import CommandResult, ProcessRunner
from .cache_manager import CacheManager
from .container_manager import ContainerManager

Action = Callable[[Settings], CommandResult]


class OperationDispatcher:
    """
    Looks up the action for a configured operation and runs it.
    """
    def __init__(self, runner: Optional[ProcessRunner] = None):
        """
        Initializes the dispatcher and its action table.

        :param runner: Runner shared by all actions.
        """
        self.runner = runner or ProcessRunner()
        self.containers = ContainerManager(self.runner)
        self.cache = CacheManager(self.runner)
        self.actions: Dict[Operation, Action] = {
            Operation.DOCKER_PULL: self.containers.pull,
            Operation.DOCKER_RUN: self.containers.run,
            Operation.DOCKER_RUN_SHELL: self.containers.run_shell,
            Operation.DOCKER_RM: self.containers.remove,
            Operation.DOCKER_KILL: self.containers.kill,
            Operation.DOCKER_LOGS: self.containers.logs,
            Operation.DOCKER_TRACE: self.containers.trace,
            Operation.SETUP_CACHE_DIR: self.cache.setup,
            Operation.CLEAR_CACHE_DIR: self.cache.clear,
            Operation.DOCKER_ADDRESS: self.containers.address,
        }

    def dispatch(self, settings: Settings) -> CommandResult:
        """
        Runs the action bound to ``settings.operation``.

        :param settings: The parsed configuration, passed unchanged to the action.
        :return: The result of the delegated command.
        :raises MudctlError: If the action fails.
        """
        action = self.actions[settings.operation]
        return action(settings)
