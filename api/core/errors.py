"""
Error vocabulary shared by repositories and routers.

Routers branch on the exception type, never on the message text. Each class
carries the HTTP status it is rendered with (see `main.py`).
"""

from __future__ import annotations


class ApiError(Exception):
    status_code = 500
    title = "Internal server error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Bad or missing input. Never reaches the store."""

    status_code = 400
    title = "Invalid request"


class ConstraintError(ApiError):
    """Uniqueness / foreign-key / not-null / check violation raised by the store."""

    status_code = 409
    title = "Constraint violation"

    def __init__(self, message: str, *, kind: str = "integrity", constraint: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.constraint = constraint


class DependencyError(ApiError):
    """Delete refused because other rows still reference the entity."""

    status_code = 400

    def __init__(self, *, label: str, dependents: str, count: int | None = None) -> None:
        amount = f"{count} " if count is not None else ""
        super().__init__(f"cannot delete {label}: {amount}{dependents} depend on it")
        self.title = f"Cannot delete {label}"
        self.count = count


class DataAccessError(ApiError):
    """Any other store failure: connectivity, timeout, malformed query."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.operation: str | None = None
        self.entity: str | None = None
        self.entity_id: str | None = None


class QueryLoadError(RuntimeError):
    pass


class QueryNotFoundError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"query not found: {self.name}"
