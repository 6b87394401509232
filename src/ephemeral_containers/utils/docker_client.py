"""Docker client construction for ephemeral containers."""

import docker
from docker import DockerClient
from docker.errors import DockerException

from ephemeral_containers.config import Settings, get_settings
from ephemeral_containers.utils.logging import get_logger

logger = get_logger(__name__)


def create_docker_client(settings: Settings | None = None) -> DockerClient:
    """
    Create a new Docker client and verify the daemon answers.

    Every managed container owns the client returned here, so no client is
    cached or shared between containers.

    Args:
        settings: Settings to read ``docker_host`` from (cached settings by default)

    Returns:
        Connected DockerClient instance

    Raises:
        DockerException: If unable to connect to Docker daemon
    """
    settings = settings or get_settings()

    if settings.docker_host:
        client = docker.DockerClient(base_url=settings.docker_host)
    else:
        client = docker.from_env()

    try:
        client.ping()
    except DockerException as e:
        logger.error("Failed to connect to Docker daemon", extra={"error": str(e)})
        client.close()
        raise

    logger.debug(
        "Connected to Docker daemon",
        extra={"docker_host": settings.docker_host or "environment"},
    )
    return client
