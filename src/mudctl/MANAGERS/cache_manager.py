"""
Host cache directory management. The directory is mounted into the
service container and its contents are opaque to us.
"""
from typing import Optional

from ..MODELS.settings import Settings
from ..RUNNERS.privilege import elevate
from ..RUNNERS.process_runner import CommandResult, ProcessRunner

# Owner inside the service image.
CACHE_DIR_OWNER = "1000"
CACHE_DIR_GROUP = "1000"
CACHE_DIR_MODE = "0750"


class CacheManager:
    """
    Creates and empties the cache directory with elevated privileges.
    """
    def __init__(self, runner: Optional[ProcessRunner] = None):
        """
        Initializes the cache manager.

        :param runner: Runner used for the install/find calls.
        """
        self.runner = runner or ProcessRunner()

    def setup(self, settings: Settings) -> CommandResult:
        """
        Creates the cache directory (and missing parents) with fixed ownership and mode.
        Existing directories get their owner and mode reset.
        """
        command = [
            "install", "-d",
            "-o", CACHE_DIR_OWNER,
            "-g", CACHE_DIR_GROUP,
            "-m", CACHE_DIR_MODE,
            str(settings.mud_cache_path),
        ]
        return self.runner.run(elevate(command))

    def clear(self, settings: Settings) -> CommandResult:
        """
        Removes everything below the cache directory, keeping the directory itself.
        """
        command = ["find", str(settings.mud_cache_path), "-mindepth", "1", "-delete"]
        return self.runner.run(elevate(command))
