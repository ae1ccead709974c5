"""
The configuration record built once per invocation and the closed set of operations.
"""
from enum import Enum
from ipaddress import ip_address
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..REGISTRY.image_reference import ImageReference

DEFAULT_DOCKER_IMAGE = "registry.gitlab.com/mud-manager/mud-manager"
DEFAULT_DOCKER_IMAGE_TAG = "latest"
DEFAULT_DOCKER_NAME = "mud-manager"
DEFAULT_MUD_CACHE_PATH = Path("/var/cache/mud-manager")
DEFAULT_BIND_ADDRESS = "0.0.0.0"
DEFAULT_BIND_PORT = 8888


class Operation(str, Enum):
    """
    Operations understood by the CLI. Anything else is rejected while parsing.
    """
    DOCKER_PULL = "docker-pull"
    DOCKER_RUN = "docker-run"
    DOCKER_RUN_SHELL = "docker-run-shell"
    DOCKER_RM = "docker-rm"
    DOCKER_KILL = "docker-kill"
    DOCKER_LOGS = "docker-logs"
    DOCKER_TRACE = "docker-trace"
    SETUP_CACHE_DIR = "setup-cache-dir"
    CLEAR_CACHE_DIR = "clear-cache-dir"
    DOCKER_ADDRESS = "docker-address"


class Settings(BaseModel):
    """
    Immutable configuration for a single operation.
    """
    model_config = ConfigDict(frozen=True)

    operation: Operation
    docker_image: str = DEFAULT_DOCKER_IMAGE
    docker_image_tag: str = DEFAULT_DOCKER_IMAGE_TAG
    docker_name: str = Field(DEFAULT_DOCKER_NAME, min_length=1)
    mud_cache_path: Path = DEFAULT_MUD_CACHE_PATH
    bind_address: str = DEFAULT_BIND_ADDRESS
    bind_port: int = Field(DEFAULT_BIND_PORT, ge=1, le=65535)

    @field_validator("docker_image")
    @classmethod
    def _check_image(cls, value: str) -> str:
        if ImageReference.parse(value).is_pinned:
            raise ValueError("must not include a tag or digest, use --docker-image-tag")
        return value

    @field_validator("docker_image_tag")
    @classmethod
    def _check_tag(cls, value: str) -> str:
        return ImageReference.validate_tag(value)

    @field_validator("mud_cache_path")
    @classmethod
    def _absolute_cache_path(cls, value: Path) -> Path:
        # docker treats a source without a leading slash as a named volume.
        return value.absolute()

    @field_validator("bind_address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        # Normalizes e.g. '::0' and rejects host names.
        return str(ip_address(value))

    @property
    def image(self) -> ImageReference:
        """The image and tag to pull or run."""
        return ImageReference.parse(self.docker_image).with_tag(self.docker_image_tag)
