"""Helpers for interpreting database errors."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(exc: IntegrityError, column: str | None = None) -> bool:
    """Whether the error is a unique-constraint violation, optionally on ``column``.

    Matches both the PostgreSQL ("duplicate key value violates unique
    constraint") and SQLite ("UNIQUE constraint failed") wordings.
    """
    orig = str(exc.orig).lower() if exc.orig else ""
    if "unique" not in orig and "duplicate" not in orig:
        return False
    return column is None or column.lower() in orig
