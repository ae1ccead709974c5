"""
Shared fixtures. No test talks to a real docker daemon.
"""
import os

import pytest
from mudctl.RUNNERS.process_runner import CommandResult, ProcessRunner


class RecordingRunner(ProcessRunner):
    """
    ProcessRunner that records commands instead of executing them.
    """
    def __init__(self, output=None, error=None):
        super().__init__(docker_binary="docker")
        self.commands = []
        self.output = output
        self.error = error

    def run(self, command, capture=False):
        self.commands.append(list(command))
        if self.error is not None:
            raise self.error
        output = (self.output or "").strip() if capture else None
        return CommandResult(command=list(command), output=output)


@pytest.fixture
def recording_runner():
    return RecordingRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keeps MUDCTL_* variables of the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("MUDCTL_"):
            monkeypatch.delenv(name)
