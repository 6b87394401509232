"""One-shot command execution inside a running container."""

import time
from contextlib import closing
from dataclasses import dataclass
from typing import Optional, Sequence

from docker import DockerClient

from ephemeral_containers.utils import get_logger

logger = get_logger(__name__)


@dataclass
class ExecResult:
    """Result of a command run inside a container."""

    exec_id: str
    exit_code: Optional[int]
    output: str
    wall_ms: int = 0

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def execute_command(
    client: DockerClient,
    container_id: str,
    cmd: Optional[Sequence[str]],
    environment: Optional[Sequence[str]] = None,
) -> Optional[ExecResult]:
    """
    Execute a command in a container and collect its combined output.

    The exec is created with stdout and stderr attached, then started over a
    streaming connection that is drained into a single buffer. The stream is
    closed whether or not draining succeeds.

    Args:
        client: Docker client owning the container
        container_id: Docker container ID
        cmd: Command and arguments; ``None`` or empty means nothing to run
        environment: KEY=VALUE entries set for this exec only; never logged

    Returns:
        ExecResult, or None when there was no command

    Raises:
        DockerException: If creating, starting or inspecting the exec fails
        RequestException, OSError: If the daemon connection breaks mid-exec
    """
    if not cmd:
        return None

    start_time = time.time()
    argv = list(cmd)

    exec_instance = client.api.exec_create(
        container_id,
        argv,
        stdout=True,
        stderr=True,
        environment=list(environment) if environment else None,
    )
    exec_id = exec_instance["Id"]

    chunks = []
    with closing(client.api.exec_start(exec_id, stream=True)) as stream:
        for chunk in stream:
            chunks.append(chunk)

    exit_code = client.api.exec_inspect(exec_id).get("ExitCode")
    output = b"".join(chunks).decode("utf-8", errors="replace")
    wall_ms = int((time.time() - start_time) * 1000)

    log = logger.info if exit_code == 0 else logger.warning
    log(
        "Exec completed",
        extra={
            "container_id": container_id,
            "exec_id": exec_id,
            "cmd": argv,
            "exit_code": exit_code,
            "wall_ms": wall_ms,
            "output": output,
        },
    )

    return ExecResult(exec_id=exec_id, exit_code=exit_code, output=output, wall_ms=wall_ms)
