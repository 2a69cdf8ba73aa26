"""Database health service implementations for connectivity checks."""

from django.db import DatabaseError

from app.domain import HealthStatus

from .interfaces import DatabaseHealthPort
from .url import db_render_database_label


class DjangoDatabaseHealthService(DatabaseHealthPort):
    """Database health service backed by a Django database connection."""

    def __init__(self, connection, database_url: str):
        """Initialize database health service.

        Args:
            connection: Django connection used for connectivity checks.
            database_url: Configured database URL used for the diagnostic label.

        Raises:
            ValueError: Raised when connection is None.
        """

        if connection is None:
            raise ValueError("connection must not be None")
        self._connection = connection
        self._database_url = database_url

    def db_connection_label(self) -> str:
        """Return the target database URL for diagnostics.

        Returns:
            str: Database URL with the password hidden.

        Raises:
            ValueError: Raised if the configured URL cannot be parsed.
        """

        return db_render_database_label(self._database_url)

    def db_check_health(self) -> HealthStatus:
        """Verify database connectivity using a deterministic lightweight query.

        Returns:
            HealthStatus: Health payload with status and diagnostic detail.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            with self._connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
            return HealthStatus(status="ok", detail="database connectivity verified")
        except DatabaseError as error:
            raise ConnectionError("database connectivity check failed") from error
