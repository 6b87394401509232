"""Port mapping resolution for the Docker SDK."""

from typing import Dict, Tuple

PROTOCOLS = ("tcp", "udp", "sctp")


def parse_port(port: str) -> int:
    """
    Parse a single port number.

    Raises:
        ValueError: If the value is not an integer in 1-65535
    """
    value = port.strip()
    if not value.isdigit():
        raise ValueError(f"invalid port '{port}'")
    number = int(value)
    if not 0 < number < 65536:
        raise ValueError(f"port {number} out of range")
    return number


def container_port_key(container_port: str, protocol: str) -> str:
    """
    Build the ``<port>/<protocol>`` key the Docker API uses for exposed ports.

    Raises:
        ValueError: If the port or protocol is malformed
    """
    proto = protocol.strip().lower()
    if proto not in PROTOCOLS:
        raise ValueError(f"invalid protocol '{protocol}', expected one of {', '.join(PROTOCOLS)}")
    return f"{parse_port(container_port)}/{proto}"


def resolve_port_bindings(
    container_port: str,
    protocol: str,
    host_port: str,
    host_ip: str = "127.0.0.1",
) -> Dict[str, Tuple[str, int]]:
    """
    Resolve one container port into the ``ports`` mapping of ``containers.create``.

    Example:
        >>> resolve_port_bindings("3306", "tcp", "13306")
        {'3306/tcp': ('127.0.0.1', 13306)}

    Raises:
        ValueError: If any port or the protocol is malformed
    """
    key = container_port_key(container_port, protocol)
    return {key: (host_ip, parse_port(host_port))}
