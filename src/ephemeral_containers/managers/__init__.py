"""Container lifecycle managers."""

from .container_manager import ClientFactory, ManagedContainer
from .exec_manager import ExecResult, execute_command

__all__ = ["ClientFactory", "ExecResult", "ManagedContainer", "execute_command"]
