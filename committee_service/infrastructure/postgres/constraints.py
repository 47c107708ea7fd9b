"""Map driver integrity errors onto the persistence error taxonomy."""

from psycopg2 import errorcodes
from sqlalchemy.exc import IntegrityError

from committee_service.core.errors import (
    ForeignKeyViolation,
    GovernancePersistenceError,
    TransactionError,
    UniqueConstraintViolation,
)


# SQLite extended result codes (sqlite3.Error.sqlite_errorname)
_SQLITE_FOREIGN_KEY = {"SQLITE_CONSTRAINT_FOREIGNKEY"}
_SQLITE_UNIQUE = {"SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}


def violation_kind(error: IntegrityError) -> str:
    """
    Return "foreign_key", "unique" or "other" for an IntegrityError.

    PostgreSQL reports the SQLSTATE on ``pgcode``; SQLite exposes the
    extended result name on ``sqlite_errorname``.
    """
    orig = error.orig

    pgcode = getattr(orig, "pgcode", None)
    if pgcode == errorcodes.FOREIGN_KEY_VIOLATION:
        return "foreign_key"
    if pgcode == errorcodes.UNIQUE_VIOLATION:
        return "unique"
    if pgcode is not None:
        return "other"

    errorname = getattr(orig, "sqlite_errorname", None)
    if errorname in _SQLITE_FOREIGN_KEY:
        return "foreign_key"
    if errorname in _SQLITE_UNIQUE:
        return "unique"
    if errorname is None:
        # sqlite3 before Python 3.11 only carries the message
        text = str(orig)
        if text.startswith("FOREIGN KEY constraint failed"):
            return "foreign_key"
        if text.startswith("UNIQUE constraint failed"):
            return "unique"

    return "other"


def classify_integrity_error(error: IntegrityError, context: str) -> GovernancePersistenceError:
    """Build the domain error for an IntegrityError raised while doing ``context``."""
    kind = violation_kind(error)
    message = f"{context}: {error.orig}"

    if kind == "foreign_key":
        return ForeignKeyViolation(message)
    if kind == "unique":
        return UniqueConstraintViolation(message)
    return TransactionError(message)
