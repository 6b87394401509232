"""Lifecycle of one disposable Docker container."""

import time
from typing import Callable, Optional, Sequence

from docker import DockerClient
from docker.errors import DockerException
from requests.exceptions import RequestException

from ephemeral_containers.config import Settings, get_settings
from ephemeral_containers.managers.exec_manager import ExecResult, execute_command
from ephemeral_containers.models.containers import (
    Configured,
    ContainerOption,
    ContainerSpec,
    ContainerState,
    LifecycleState,
    Running,
    Terminated,
)
from ephemeral_containers.utils import get_logger
from ephemeral_containers.utils.docker_client import create_docker_client
from ephemeral_containers.utils.exceptions import (
    CommandExecutionError,
    ContainerCreateError,
    ContainerStartError,
    ImagePullError,
    InvalidStateError,
    PortResolutionError,
    RuntimeConnectionError,
    ValidationError,
)
from ephemeral_containers.utils.ports import resolve_port_bindings

logger = get_logger(__name__)

ClientFactory = Callable[[Settings], DockerClient]

# docker-py leaves transport failures (requests, sockets) unwrapped
RUNTIME_ERRORS = (DockerException, RequestException, OSError)


class ManagedContainer:
    """
    One disposable container: configured, then running, then terminated.

    Provisioning pulls the image, creates and starts the container, waits the
    readiness delay and runs the optional post-start command. A failed
    provisioning leaves the instance configured; it should be discarded.
    Teardown stops and removes the container and never raises.

    Example:
        >>> with ManagedContainer.create("mysql:8", "3306", with_host_port("13306")) as db:
        ...     run_tests_against("127.0.0.1", 13306)
    """

    def __init__(
        self,
        spec: ContainerSpec,
        client_factory: ClientFactory = create_docker_client,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize a configured container.

        Args:
            spec: Container configuration
            client_factory: Callable returning a connected Docker client
            settings: Settings override (cached settings by default)
        """
        self.settings = settings or get_settings()
        self._client_factory = client_factory
        self._state: LifecycleState = Configured(spec)

    @classmethod
    def create(
        cls, image: str, container_port: str, *options: ContainerOption, **kwargs
    ) -> "ManagedContainer":
        """Build the spec and the container in one call; kwargs go to ``__init__``."""
        return cls(ContainerSpec.build(image, container_port, *options), **kwargs)

    @property
    def spec(self) -> ContainerSpec:
        return self._state.spec

    @property
    def state(self) -> ContainerState:
        return self._state.state

    @property
    def container_id(self) -> Optional[str]:
        if isinstance(self._state, (Running, Terminated)):
            return self._state.container_id
        return None

    @property
    def client(self) -> Optional[DockerClient]:
        if isinstance(self._state, Running):
            return self._state.client
        return None

    def provision(self) -> str:
        """
        Pull, create, start and initialize the container.

        Returns:
            Docker container ID

        Raises:
            InvalidStateError: If the container was already provisioned
            RuntimeConnectionError: If the Docker daemon is unreachable
            PortResolutionError: If the port or protocol is malformed
            ImagePullError: If the image cannot be pulled
            ContainerCreateError: If the container cannot be created
            ContainerStartError: If the container cannot be started
            CommandExecutionError: If the post-start command fails
        """
        if not isinstance(self._state, Configured):
            raise InvalidStateError("provision", self.state.value)
        spec = self._state.spec

        try:
            client = self._client_factory(self.settings)
        except Exception as e:
            raise RuntimeConnectionError(e) from e

        try:
            container_id = self._provision(client, spec)
        except Exception:
            self._close_client(client)
            raise

        self._state = Running(spec=spec, client=client, container_id=container_id)
        return container_id

    def _provision(self, client: DockerClient, spec: ContainerSpec) -> str:
        try:
            ports = resolve_port_bindings(
                spec.container_port, spec.protocol, spec.host_port, host_ip=self.settings.host_ip
            )
        except ValueError as e:
            raise PortResolutionError(spec.container_port, spec.protocol, e) from e

        try:
            client.images.pull(spec.image)
        except RUNTIME_ERRORS as e:
            logger.error("Docker API error pulling image", extra={"image": spec.image, "error": str(e)})
            raise ImagePullError(spec.image, e) from e

        logger.info("Image pulled", extra={"image": spec.image})

        try:
            # detach=False attaches stdout and stderr to the container
            container = client.containers.create(
                image=spec.image,
                environment=list(spec.environment),
                ports=ports,
                volumes=list(spec.volume_bindings),
                detach=False,
            )
        except RUNTIME_ERRORS as e:
            logger.error("Docker API error creating container", extra={"error": str(e)})
            raise ContainerCreateError(spec.image, e) from e

        container_id = container.id
        logger.info(
            "Docker container created",
            extra={"docker_id": container_id, "image": spec.image, "ports": spec.port_key},
        )

        try:
            container.start()
        except RUNTIME_ERRORS as e:
            logger.error(
                "Docker API error starting container",
                extra={"docker_id": container_id, "error": str(e)},
            )
            raise ContainerStartError(container_id, e) from e

        delay = spec.readiness_delay.total_seconds()
        if delay > 0:
            logger.info(
                "Waiting for container readiness",
                extra={"docker_id": container_id, "delay_s": delay},
            )
            time.sleep(delay)

        if spec.post_start_command:
            try:
                execute_command(client, container_id, spec.post_start_command)
            except RUNTIME_ERRORS as e:
                raise CommandExecutionError(container_id, list(spec.post_start_command), e) from e

        logger.info(
            "Docker container started",
            extra={"docker_id": container_id, "host_port": spec.host_port},
        )
        return container_id

    def execute(self, cmd: Sequence[str], environment: Optional[Sequence[str]] = None) -> ExecResult:
        """
        Run a further command inside the running container.

        Args:
            cmd: Command and arguments
            environment: Extra KEY=VALUE entries for the command only

        Raises:
            InvalidStateError: If the container is not running
            ValidationError: If the command is empty
            CommandExecutionError: If the exec cannot be created or started
        """
        if not isinstance(self._state, Running):
            raise InvalidStateError("execute a command in", self.state.value)
        state = self._state

        if not cmd:
            raise ValidationError("cmd", "cannot be empty")

        try:
            result = execute_command(state.client, state.container_id, cmd, environment=environment)
        except RUNTIME_ERRORS as e:
            raise CommandExecutionError(state.container_id, list(cmd), e) from e
        return result

    def teardown(self) -> None:
        """Stop then remove the container, logging any failure instead of raising."""
        if not isinstance(self._state, Running):
            logger.warning(
                "Teardown skipped, container is not running",
                extra={"state": self.state.value},
            )
            return
        state = self._state

        try:
            state.client.api.stop(state.container_id, timeout=self.settings.stop_timeout_s)
            logger.info("Docker container stopped", extra={"docker_id": state.container_id})
        except Exception as e:
            logger.warning(
                "Unable to stop container",
                extra={"docker_id": state.container_id, "error": str(e)},
            )

        try:
            state.client.api.remove_container(state.container_id)
            logger.info("Docker container removed", extra={"docker_id": state.container_id})
        except Exception as e:
            logger.warning(
                "Unable to remove container",
                extra={"docker_id": state.container_id, "error": str(e)},
            )

        self._close_client(state.client)

        self._state = Terminated(spec=state.spec, container_id=state.container_id)

    @staticmethod
    def _close_client(client: DockerClient) -> None:
        try:
            client.close()
        except Exception as e:
            logger.warning("Unable to close docker client", extra={"error": str(e)})

    def __enter__(self) -> "ManagedContainer":
        self.provision()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.teardown()
        return False

    def __repr__(self) -> str:
        return (
            f"<ManagedContainer(image={self.spec.image}, port={self.spec.port_key}, "
            f"state={self.state.value}, id={self.container_id})>"
        )
