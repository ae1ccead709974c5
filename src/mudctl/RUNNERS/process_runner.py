# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Execution of delegated system commands (docker, install, find).
"""
import os
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from ..errors import DelegateError
from ..UTILS.console import status

DOCKER_BINARY_ENV = "MUDCTL_DOCKER"


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a delegated command that exited successfully.
    """
    command: List[str]
    returncode: int = 0
    output: Optional[str] = None


class ProcessRunner:
    """
    Runs one external command to completion, in the foreground.
    """
    def __init__(self, docker_binary: Optional[str] = None):
        """
        Initializes the process runner.

        Args:
            docker_binary (Optional[str]): Executable used for docker calls.
                Defaults to $MUDCTL_DOCKER, then 'docker'.
        """
        self.docker_binary = docker_binary or os.environ.get(DOCKER_BINARY_ENV, "docker")

    def docker(self, args: List[str], capture: bool = False) -> CommandResult:
        """
        Runs a docker subcommand.

        Args:
            args (List[str]): Arguments following the docker executable.
            capture (bool): Capture stdout into the result instead of passing it through.
        """
        return self.run([self.docker_binary] + list(args), capture=capture)

    def run(self, command: List[str], capture: bool = False) -> CommandResult:
        """
        Runs a command, inheriting stdin and stderr from this process.

        Args:
            command (List[str]): Command and arguments to execute.
            capture (bool): Capture stdout into the result instead of passing it through.

        Returns:
            CommandResult: The command and its (captured) output.

        Raises:
            DelegateError: If the command cannot be started or exits non-zero.
        """
        status(f"Running: {' '.join(command)}")
        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE if capture else None,
                text=True,
                # Avoid shell=True for security reasons (CWE-78)
                shell=False,
            )
        except OSError as e:
            raise DelegateError(command, None, reason=str(e)) from e

        if completed.returncode != 0:
            raise DelegateError(command, completed.returncode)

        output = completed.stdout.strip() if capture else None
        return CommandResult(command=command, returncode=completed.returncode, output=output)
