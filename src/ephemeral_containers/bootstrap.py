"""MySQL schema bootstrap for a provisioned database container."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ephemeral_containers.managers.container_manager import ManagedContainer
from ephemeral_containers.managers.exec_manager import ExecResult
from ephemeral_containers.utils import get_logger
from ephemeral_containers.utils.exceptions import CommandExecutionError

logger = get_logger(__name__)

TRANSACTION_TABLE_DDL = """CREATE TABLE IF NOT EXISTS transaction (
    id         BIGINT AUTO_INCREMENT PRIMARY KEY,
    amount     DECIMAL(19,2),
    created_at DATETIME
);"""


class MySQLBootstrap(BaseModel):
    """Connection details and schema for the bootstrap commands."""

    database: str = Field(default="bdd_poc", description="Database to create.")
    user: str = Field(default="root", description="MySQL user.")
    password: str = Field(default="1234", description="Password of the MySQL user.")
    host: str = Field(default="127.0.0.1", description="Host as seen from inside the container.")
    port: int = Field(default=3306, description="MySQL port inside the container.")
    schema_sql: str = Field(default=TRANSACTION_TABLE_DDL, description="DDL applied to the database.")

    def _client(self) -> List[str]:
        return [
            "mysql",
            "-h",
            self.host,
            "-P",
            str(self.port),
            "-u",
            self.user,
        ]

    def environment(self) -> List[str]:
        """Exec environment carrying the password, keeping it out of argv."""
        return [f"MYSQL_PWD={self.password}"]

    def commands(self) -> List[List[str]]:
        """Argv lists creating the database and then the schema; both are safe to re-run."""
        return [
            self._client() + ["-e", f"CREATE DATABASE IF NOT EXISTS `{self.database}`;"],
            self._client() + [self.database, "-e", self.schema_sql],
        ]


def bootstrap_database(
    container: ManagedContainer, bootstrap: Optional[MySQLBootstrap] = None
) -> List[ExecResult]:
    """
    Create the database and schema inside a running MySQL container.

    Args:
        container: Provisioned container running a MySQL server
        bootstrap: Connection and schema settings (defaults match the BDD setup)

    Returns:
        One ExecResult per command

    Raises:
        InvalidStateError: If the container is not running
        CommandExecutionError: If a command cannot run or exits non-zero
    """
    bootstrap = bootstrap or MySQLBootstrap()
    results = []
    for cmd in bootstrap.commands():
        result = container.execute(cmd, environment=bootstrap.environment())
        if not result.succeeded:
            raise CommandExecutionError(container.container_id, cmd, exit_code=result.exit_code)
        results.append(result)

    logger.info(
        "Database bootstrapped",
        extra={"docker_id": container.container_id, "database": bootstrap.database},
    )
    return results
