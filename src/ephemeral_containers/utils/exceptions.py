"""Custom exceptions for ephemeral containers."""


class EphemeralContainerError(Exception):
    """Base exception for ephemeral container errors."""

    pass


class ValidationError(EphemeralContainerError):
    """Exception raised when a container configuration is invalid."""

    def __init__(self, field: str, reason: str) -> None:
        """
        Initialize ValidationError.

        Args:
            field: Name of the offending configuration field
            reason: Why the value was rejected
        """
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid container configuration for '{field}': {reason}")


class InvalidStateError(EphemeralContainerError):
    """Exception raised when an operation is not valid in the current lifecycle state."""

    def __init__(self, operation: str, state: str) -> None:
        """
        Initialize InvalidStateError.

        Args:
            operation: Operation that was attempted
            state: Lifecycle state the container was in
        """
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} a container in state '{state}'")


class ProvisioningError(EphemeralContainerError):
    """Base exception for a failed provisioning step."""

    step = "provision"

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """
        Initialize ProvisioningError.

        Args:
            message: Error message
            original_error: Underlying exception from the Docker SDK
        """
        self.original_error = original_error
        if original_error is not None:
            message = f"{message}: {original_error}"
        super().__init__(message)


class RuntimeConnectionError(ProvisioningError):
    """Exception raised when the Docker daemon cannot be reached."""

    step = "connect"

    def __init__(self, original_error: Exception | None = None) -> None:
        super().__init__("Unable to create docker client", original_error)


class PortResolutionError(ProvisioningError):
    """Exception raised when the port mapping cannot be resolved."""

    step = "resolve_ports"

    def __init__(self, port: str, protocol: str, original_error: Exception | None = None) -> None:
        """
        Initialize PortResolutionError.

        Args:
            port: Container port that was requested
            protocol: Protocol that was requested
            original_error: Underlying parsing error
        """
        self.port = port
        self.protocol = protocol
        super().__init__(f"Unable to get port {port}/{protocol}", original_error)


class ImagePullError(ProvisioningError):
    """Exception raised when an image cannot be pulled."""

    step = "pull"

    def __init__(self, image: str, original_error: Exception | None = None) -> None:
        """
        Initialize ImagePullError.

        Args:
            image: Image reference that failed to pull
            original_error: Underlying exception from the Docker SDK
        """
        self.image = image
        super().__init__(f"Unable to pull image {image}", original_error)


class ContainerCreateError(ProvisioningError):
    """Exception raised when the container cannot be created."""

    step = "create"

    def __init__(self, image: str, original_error: Exception | None = None) -> None:
        self.image = image
        super().__init__(f"Unable to create container from {image}", original_error)


class ContainerStartError(ProvisioningError):
    """
    Exception raised when a created container fails to start.

    The container is left in place; ``container_id`` lets the caller remove it.
    """

    step = "start"

    def __init__(self, container_id: str, original_error: Exception | None = None) -> None:
        self.container_id = container_id
        super().__init__(f"Unable to start container {container_id}", original_error)


class CommandExecutionError(ProvisioningError):
    """
    Exception raised when a command inside the container fails.

    The container keeps running; ``container_id`` identifies it.
    """

    step = "exec"

    def __init__(
        self,
        container_id: str,
        cmd: list[str],
        original_error: Exception | None = None,
        exit_code: int | None = None,
    ) -> None:
        """
        Initialize CommandExecutionError.

        Args:
            container_id: Container the command was run in
            cmd: Command and arguments
            original_error: Underlying exception from the Docker SDK, if any
            exit_code: Exit code of the command when it ran but failed
        """
        self.container_id = container_id
        self.cmd = cmd
        self.exit_code = exit_code
        message = "Commands were not executed"
        if exit_code is not None:
            message = f"Command {cmd} exited with code {exit_code}"
        super().__init__(message, original_error)
