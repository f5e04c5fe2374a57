"""
Centralized HTTP exceptions for consistent error handling.

Every failure an admin operation can report is one of these types, so the
HTTP layer can render it without knowing which service raised it.

Usage:
    from shared.utils.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Airline", "AA")
    raise ValidationError("Invalid IATA code provided.", field="iata_code")
"""

from fastapi import HTTPException, status
from typing import Any

from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions should inherit from this class
    to ensure consistent logging and response format.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        # Log the error with context
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(detail, status_code=status_code, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    Also raised when an active-only lookup hits a soft-deleted row.

    Usage:
        raise NotFoundError("Airline", "AA")
        raise NotFoundError("Country", "FRA", active_only=True)
    """

    def __init__(
        self,
        entity: str,
        entity_id: int | str | None = None,
        *,
        active_only: bool = False,
        **log_context: Any,
    ):
        prefix = f"Active {entity.lower()}" if active_only else entity
        if entity_id is not None:
            detail = f"{prefix} '{entity_id}' not found."
        else:
            detail = f"{prefix} not found."

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            log_level="warning",
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


class NoDataError(AppException):
    """No rows matched an aggregate query (404). Distinct from a zero result."""

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            log_level="warning",
            **log_context,
        )


# =============================================================================
# 400 Bad Request Errors
# =============================================================================


class ValidationError(AppException):
    """
    Input validation error (400).

    Usage:
        raise ValidationError("Search term cannot be empty.")
        raise ValidationError("Invalid ISO code provided.", field="iso_code", value="FR")
    """

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            log_level="warning",
            **log_context,
        )


class InvalidArgumentError(ValidationError):
    """A numeric argument is outside its allowed range."""

    def __init__(self, argument: str, value: Any, constraint: str, **log_context: Any):
        detail = f"Invalid {argument} ({value}): {constraint}"
        super().__init__(detail, argument=argument, value=value, **log_context)


# =============================================================================
# 409 Conflict Errors
# =============================================================================


class ConflictError(AppException):
    """
    Resource conflict error (409).

    Usage:
        raise ConflictError("The record was modified by another user.")
    """

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            log_level="warning",
            **log_context,
        )


class DuplicateEntityError(ConflictError):
    """Entity with the same unique key already exists (active or deleted)."""

    def __init__(self, entity: str, field: str, value: str, **log_context: Any):
        detail = f"{entity} with {field} '{value}' already exists."
        super().__init__(detail, entity=entity, field=field, value=value, **log_context)


class AlreadyActiveError(ConflictError):
    """Reactivation requested for a row that is not deleted."""

    def __init__(self, entity: str, entity_id: int | str, **log_context: Any):
        detail = f"{entity} '{entity_id}' is already active."
        super().__init__(detail, entity=entity, entity_id=entity_id, **log_context)


class AlreadyInactiveError(ConflictError):
    """Deletion requested for a row that is already deleted."""

    def __init__(self, entity: str, entity_id: int | str, **log_context: Any):
        detail = f"{entity} '{entity_id}' is already inactive."
        super().__init__(detail, entity=entity, entity_id=entity_id, **log_context)


class ConcurrentModificationError(ConflictError):
    """The row changed between the read and the conditional write."""

    def __init__(self, entity: str, entity_id: int | str, **log_context: Any):
        detail = (
            f"{entity} '{entity_id}' was modified by another request. "
            "Please reload and try again."
        )
        super().__init__(detail, entity=entity, entity_id=entity_id, **log_context)


class DependencyBlockedError(ConflictError):
    """
    Deletion refused because live rows still reference the target.

    The full list of blocking dependency kinds is kept on `blocking`.
    """

    def __init__(
        self,
        entity: str,
        entity_id: int | str,
        blocking: list[str],
        **log_context: Any,
    ):
        self.blocking = list(blocking)
        detail = (
            f"Cannot delete {entity.lower()} '{entity_id}' as it has associated: "
            f"{', '.join(self.blocking)}. Please resolve dependencies first."
        )
        super().__init__(
            detail,
            entity=entity,
            entity_id=entity_id,
            blocking=self.blocking,
            **log_context,
        )


# =============================================================================
# 500 Internal Server Errors
# =============================================================================


class InfrastructureError(AppException):
    """
    Storage or unexpected failure (500).

    The message is generic; details are only logged.

    Usage:
        raise InfrastructureError("reactivating the fare code")
    """

    def __init__(self, operation: str | None = None, **log_context: Any):
        if operation:
            detail = f"An error occurred while {operation}. Please try again."
        else:
            detail = "An internal error occurred. Please try again."
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            log_level="error",
            operation=operation,
            **log_context,
        )


class DatabaseError(InfrastructureError):
    """Database operation failed."""
