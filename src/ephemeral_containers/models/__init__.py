"""Configuration and state models for ephemeral containers."""

from .containers import (
    DEFAULT_HOST_PORT,
    DEFAULT_PROTOCOL,
    Configured,
    ContainerOption,
    ContainerSpec,
    ContainerState,
    LifecycleState,
    Running,
    Terminated,
    new_container_spec,
    with_command,
    with_container_protocol,
    with_environment,
    with_host_port,
    with_readiness_delay,
    with_volume_bindings,
)

__all__ = [
    "DEFAULT_HOST_PORT",
    "DEFAULT_PROTOCOL",
    "Configured",
    "ContainerOption",
    "ContainerSpec",
    "ContainerState",
    "LifecycleState",
    "Running",
    "Terminated",
    "new_container_spec",
    "with_command",
    "with_container_protocol",
    "with_environment",
    "with_host_port",
    "with_readiness_delay",
    "with_volume_bindings",
]
