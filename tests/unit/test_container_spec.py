"""
Unit tests for docker run command rendering.
"""
from mudctl.MODELS.container_spec import ContainerSpec, PortBinding, RestartPolicyCondition, VolumeMount


def test_minimal_spec():
    spec = ContainerSpec(image="mud-manager:latest")
    assert spec.to_run_args() == ["run", "mud-manager:latest"]

def test_full_spec_order():
    spec = ContainerSpec(
        image="mud-manager:latest",
        name="mud",
        detach=True,
        read_only=True,
        restart_policy=RestartPolicyCondition.UNLESS_STOPPED,
        ports=[PortBinding(host_address="127.0.0.1", host_port=8080, container_port=8888)],
        volumes=[VolumeMount(source="/srv/cache", target="/cache")],
        environment={"A": "1"},
    )
    assert spec.to_run_args() == [
        "run", "--detach",
        "--name", "mud",
        "--restart", "unless-stopped",
        "--read-only",
        "--publish", "127.0.0.1:8080:8888",
        "--volume", "/srv/cache:/cache",
        "--env", "A=1",
        "mud-manager:latest",
    ]

def test_interactive_shell_spec():
    spec = ContainerSpec(image="img:1", entrypoint="/bin/sh", interactive=True, remove_on_exit=True)
    assert spec.to_run_args() == ["run", "--interactive", "--tty", "--rm", "--entrypoint", "/bin/sh", "img:1"]

def test_ipv6_port_binding_is_bracketed():
    binding = PortBinding(host_address="::1", host_port=9000, container_port=9000)
    assert binding.to_arg() == "[::1]:9000:9000"
