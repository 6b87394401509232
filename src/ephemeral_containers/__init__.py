"""Disposable Docker containers for integration tests."""

from .bootstrap import MySQLBootstrap, bootstrap_database
from .config import Settings, get_settings
from .managers import ExecResult, ManagedContainer
from .models import (
    ContainerSpec,
    ContainerState,
    new_container_spec,
    with_command,
    with_container_protocol,
    with_environment,
    with_host_port,
    with_readiness_delay,
    with_volume_bindings,
)
from .utils.exceptions import (
    CommandExecutionError,
    ContainerCreateError,
    ContainerStartError,
    EphemeralContainerError,
    ImagePullError,
    InvalidStateError,
    PortResolutionError,
    ProvisioningError,
    RuntimeConnectionError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "CommandExecutionError",
    "ContainerCreateError",
    "ContainerSpec",
    "ContainerStartError",
    "ContainerState",
    "EphemeralContainerError",
    "ExecResult",
    "ImagePullError",
    "InvalidStateError",
    "ManagedContainer",
    "MySQLBootstrap",
    "PortResolutionError",
    "ProvisioningError",
    "RuntimeConnectionError",
    "Settings",
    "ValidationError",
    "bootstrap_database",
    "get_settings",
    "new_container_spec",
    "with_command",
    "with_container_protocol",
    "with_environment",
    "with_host_port",
    "with_readiness_delay",
    "with_volume_bindings",
]
