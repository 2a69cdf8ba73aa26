"""Tests for the Django-backed database health service."""

import pytest
from django.db import OperationalError

from app.db import DjangoDatabaseHealthService


class _RecordingCursor:
    """Cursor test double that records executed statements."""

    def __init__(self, error: Exception | None = None):
        """Initialize cursor double.

        Args:
            error: Optional error raised from `execute`.
        """

        self.statements: list[str] = []
        self._error = error

    def __enter__(self) -> "_RecordingCursor":
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    def execute(self, statement: str) -> None:
        """Record statement or raise the configured error.

        Args:
            statement: SQL statement text.

        Raises:
            Exception: Configured error when present.
        """

        if self._error is not None:
            raise self._error
        self.statements.append(statement)

    def fetchone(self) -> tuple[int]:
        return (1,)


class _ConnectionStub:
    """Connection test double returning one shared cursor."""

    def __init__(self, cursor: _RecordingCursor):
        self._cursor = cursor

    def cursor(self) -> _RecordingCursor:
        return self._cursor


def test_db_health_reports_ok_when_select_succeeds() -> None:
    """Return healthy status after a successful `SELECT 1`.

    Returns:
        None: Assertions validate health payload.

    Raises:
        AssertionError: Raised when health status is wrong.
    """

    cursor = _RecordingCursor()
    service = DjangoDatabaseHealthService(
        connection=_ConnectionStub(cursor),
        database_url="postgresql+psycopg://postgres:secret@db:5432/app",
    )

    health_status = service.db_check_health()

    assert health_status.status == "ok"
    assert health_status.detail == "database connectivity verified"
    assert cursor.statements == ["SELECT 1"]


def test_db_health_translates_database_error_to_connection_error() -> None:
    """Raise ConnectionError when the database driver fails.

    Returns:
        None: Assertions validate error translation.

    Raises:
        AssertionError: Raised when the driver error leaks unchanged.
    """

    service = DjangoDatabaseHealthService(
        connection=_ConnectionStub(_RecordingCursor(error=OperationalError("connection refused"))),
        database_url="postgresql+psycopg://postgres:secret@db:5432/app",
    )

    with pytest.raises(ConnectionError, match="database connectivity check failed"):
        service.db_check_health()


def test_db_health_connection_label_hides_password() -> None:
    """Expose the target URL without the password.

    Returns:
        None: Assertions validate label rendering.

    Raises:
        AssertionError: Raised when the password is exposed.
    """

    service = DjangoDatabaseHealthService(
        connection=_ConnectionStub(_RecordingCursor()),
        database_url="postgresql+psycopg://postgres:secret@db:5432/app",
    )

    assert service.db_connection_label() == "postgresql+psycopg://postgres:***@db:5432/app"


def test_db_health_requires_connection() -> None:
    """Reject a missing connection at construction time.

    Returns:
        None: Assertions validate constructor guard.

    Raises:
        AssertionError: Raised when None is accepted.
    """

    with pytest.raises(ValueError, match="connection must not be None"):
        DjangoDatabaseHealthService(connection=None, database_url="sqlite://")
