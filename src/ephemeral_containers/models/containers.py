"""Container configuration and lifecycle state models."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from docker import DockerClient
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ephemeral_containers.utils.exceptions import ValidationError

DEFAULT_HOST_PORT = "9876"
DEFAULT_PROTOCOL = "tcp"

# Mutates the pending field mapping before the spec is frozen
ContainerOption = Callable[[Dict[str, Any]], None]


class ContainerSpec(BaseModel):
    """Immutable configuration of one disposable container."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    image: str = Field(description="Docker image to be pulled.")
    container_port: str = Field(description="Port inside the container to publish.")
    host_port: str = Field(default=DEFAULT_HOST_PORT, description="Host port mapped to the container.")
    protocol: str = Field(default=DEFAULT_PROTOCOL, description="Transport protocol of the mapping.")
    volume_bindings: Tuple[str, ...] = Field(
        default=(), description="Volume binds, e.g. '/host/path:/container/path'."
    )
    environment: Tuple[str, ...] = Field(
        default=(), description="KEY=VALUE entries loaded into the container."
    )
    post_start_command: Tuple[str, ...] = Field(
        default=(), description="Command executed inside the container once it is running."
    )
    readiness_delay: timedelta = Field(
        default=timedelta(0), description="Time given to the container to be ready."
    )

    @field_validator("image", "container_port")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("cannot be empty")
        return value

    @field_validator("readiness_delay")
    @classmethod
    def _not_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("cannot be negative")
        return value

    @classmethod
    def build(cls, image: str, container_port: str, *options: ContainerOption) -> "ContainerSpec":
        """
        Build a spec from the two required values and any number of options.

        Args:
            image: Docker image to be pulled
            container_port: Port inside the container to publish
            *options: Mutators such as ``with_host_port("13306")``

        Returns:
            Frozen ContainerSpec

        Raises:
            ValidationError: If a required value is empty or an option value is invalid
        """
        if not image:
            raise ValidationError("image", "imageToPull cannot be empty")
        if not container_port:
            raise ValidationError("container_port", "containerPort cannot be empty")

        fields: Dict[str, Any] = {"image": image, "container_port": container_port}
        for option in options:
            option(fields)

        try:
            return cls(**fields)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "spec"
            raise ValidationError(field, first["msg"]) from e

    @property
    def port_key(self) -> str:
        """Docker-style ``<port>/<protocol>`` description of the mapping."""
        return f"{self.container_port}/{self.protocol}"


def new_container_spec(image: str, container_port: str, *options: ContainerOption) -> ContainerSpec:
    """Shorthand for :meth:`ContainerSpec.build`."""
    return ContainerSpec.build(image, container_port, *options)


def with_host_port(host_port: str) -> ContainerOption:
    def apply(fields: Dict[str, Any]) -> None:
        fields["host_port"] = host_port

    return apply


def with_container_protocol(protocol: str) -> ContainerOption:
    def apply(fields: Dict[str, Any]) -> None:
        fields["protocol"] = protocol

    return apply


def with_volume_bindings(bindings: Sequence[str]) -> ContainerOption:
    def apply(fields: Dict[str, Any]) -> None:
        fields["volume_bindings"] = tuple(bindings)

    return apply


def with_environment(env: Sequence[str]) -> ContainerOption:
    def apply(fields: Dict[str, Any]) -> None:
        fields["environment"] = tuple(env)

    return apply


def with_command(cmd: Sequence[str]) -> ContainerOption:
    def apply(fields: Dict[str, Any]) -> None:
        fields["post_start_command"] = tuple(cmd)

    return apply


def with_readiness_delay(delay: Union[timedelta, float, int]) -> ContainerOption:
    """Wait ``delay`` (a timedelta, or seconds) after start before the container is used."""

    def apply(fields: Dict[str, Any]) -> None:
        fields["readiness_delay"] = delay

    return apply


class ContainerState(str, Enum):
    configured = "configured"
    running = "running"
    terminated = "terminated"


@dataclass(frozen=True)
class Configured:
    """Spec built, nothing created on the engine yet."""

    spec: ContainerSpec
    state = ContainerState.configured


@dataclass(frozen=True)
class Running:
    """Provisioned container together with the client that owns it."""

    spec: ContainerSpec
    client: DockerClient
    container_id: str
    state = ContainerState.running


@dataclass(frozen=True)
class Terminated:
    """Container stopped and removed (best effort)."""

    spec: ContainerSpec
    container_id: Optional[str] = None
    state = ContainerState.terminated


LifecycleState = Union[Configured, Running, Terminated]
