"""Storage-level error taxonomy shared by the data-access services."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

# PostgreSQL SQLSTATE codes
_UNIQUE_VIOLATION = "23505"
_FOREIGN_KEY_VIOLATION = "23503"


class StoreError(Exception):
    """Base exception for data-access failures."""

    pass


class ConstraintViolation(StoreError):
    """Raised when a uniqueness rule is violated."""

    pass


class ReferenceViolation(StoreError):
    """Raised when a foreign key points at a missing row."""

    pass


def classify_integrity_error(
    exc: IntegrityError,
    *,
    duplicate: str,
    missing: str = "Referenced row does not exist",
) -> StoreError:
    """Map a driver integrity error onto the store taxonomy."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == _FOREIGN_KEY_VIOLATION:
        return ReferenceViolation(missing)
    if code == _UNIQUE_VIOLATION:
        return ConstraintViolation(duplicate)

    # SQLite only reports the failure in the message text
    text = str(orig).upper()
    if "FOREIGN KEY" in text:
        return ReferenceViolation(missing)
    return ConstraintViolation(duplicate)
