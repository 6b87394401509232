"""Test configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from ephemeral_containers.config import Settings
from ephemeral_containers.utils.docker_client import create_docker_client


def _stream(chunks):
    stream = MagicMock()
    stream.__iter__.return_value = iter(chunks)
    return stream


@pytest.fixture
def make_stream():
    """Factory for exec output streams yielding the given byte chunks."""
    return _stream


@pytest.fixture
def mock_container():
    """Create mock Docker container returned by containers.create."""
    container = MagicMock()
    container.id = "docker123"
    return container


@pytest.fixture
def mock_docker_client(mock_container):
    """Create mock Docker client where every call succeeds."""
    client = MagicMock()
    client.containers.create.return_value = mock_container
    client.api.exec_create.return_value = {"Id": "exec123"}
    client.api.exec_start.side_effect = lambda *args, **kwargs: _stream([b"hello ", b"world"])
    client.api.exec_inspect.return_value = {"ExitCode": 0}
    return client


@pytest.fixture
def client_factory(mock_docker_client):
    """Client factory handing out the mock Docker client."""
    return MagicMock(return_value=mock_docker_client)


@pytest.fixture
def settings():
    """Settings independent of the caller's environment."""
    return Settings(docker_host=None, host_ip="127.0.0.1", stop_timeout_s=None)


@pytest.fixture(scope="session")
def docker_available():
    """Check if Docker daemon is available."""
    try:
        client = create_docker_client(Settings())
        client.close()
        return True
    except Exception:
        return False


@pytest.fixture
def require_docker(docker_available):
    """Skip test if Docker is not available."""
    if not docker_available:
        pytest.skip("Docker daemon not available - skipping integration test")
