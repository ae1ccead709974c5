"""
Unit tests for the delegated command runner and the privilege wrapper.
"""
import subprocess

import pytest

from mudctl.errors import DelegateError
from mudctl.RUNNERS import privilege
from mudctl.RUNNERS import process_runner
from mudctl.RUNNERS.process_runner import ProcessRunner


@pytest.fixture
def fake_run(monkeypatch):
    """Replaces subprocess.run and records its calls."""
    calls = []
    outcome = {"returncode": 0, "stdout": None}

    def run(command, **kwargs):
        calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, outcome["returncode"], stdout=outcome["stdout"])

    monkeypatch.setattr(process_runner.subprocess, "run", run)
    run.calls = calls
    run.outcome = outcome
    return run


class TestProcessRunner:
    """Tests for ProcessRunner."""

    def test_docker_prefixes_binary(self, fake_run):
        result = ProcessRunner(docker_binary="docker").docker(["pull", "img:latest"])
        command, kwargs = fake_run.calls[0]
        assert command == ["docker", "pull", "img:latest"]
        assert kwargs["shell"] is False
        assert kwargs["stdout"] is None
        assert result.returncode == 0
        assert result.output is None

    def test_docker_binary_from_environment(self, fake_run, monkeypatch):
        monkeypatch.setenv("MUDCTL_DOCKER", "podman")
        ProcessRunner().docker(["ps"])
        assert fake_run.calls[0][0] == ["podman", "ps"]

    def test_capture_strips_output(self, fake_run):
        fake_run.outcome["stdout"] = "172.17.0.2\n"
        result = ProcessRunner(docker_binary="docker").docker(["inspect", "x"], capture=True)
        assert fake_run.calls[0][1]["stdout"] == subprocess.PIPE
        assert result.output == "172.17.0.2"

    def test_nonzero_exit_raises(self, fake_run):
        fake_run.outcome["returncode"] = 125
        with pytest.raises(DelegateError) as excinfo:
            ProcessRunner(docker_binary="docker").docker(["kill", "mud-manager"])
        assert excinfo.value.returncode == 125
        assert excinfo.value.command == ["docker", "kill", "mud-manager"]
        assert "exited with status 125" in str(excinfo.value)

    def test_missing_executable_raises(self, monkeypatch):
        def run(command, **kwargs):
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr(process_runner.subprocess, "run", run)
        with pytest.raises(DelegateError) as excinfo:
            ProcessRunner(docker_binary="no-such-docker").docker(["ps"])
        assert excinfo.value.returncode is None
        assert "could not be started" in str(excinfo.value)


class TestPrivilege:
    """Tests for the sudo wrapper."""

    def test_elevate_as_user(self, monkeypatch):
        monkeypatch.setattr(privilege.os, "geteuid", lambda: 1000)
        assert privilege.elevate(["install", "-d", "/x"]) == ["sudo", "--", "install", "-d", "/x"]

    def test_elevate_as_root(self, monkeypatch):
        monkeypatch.setattr(privilege.os, "geteuid", lambda: 0)
        assert privilege.elevate(["install", "-d", "/x"]) == ["install", "-d", "/x"]
