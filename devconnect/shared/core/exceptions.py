# 📄 File: devconnect/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types DevConnect uses to say exactly what went wrong,
# like "that post doesn't exist" or "that comment isn't yours", instead of a generic failure.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, document store, security manager, API exception handlers

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status


class DevConnectException(Exception):
    """
    Base exception class for the DevConnect application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(DevConnectException):
    """
    Exception raised for authentication failures.
    Used when a token is missing, malformed or expired, or credentials are wrong.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None
    ):
        if not details:
            details = {}
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


class AuthorizationError(DevConnectException):
    """
    Exception raised for authorization failures.
    Used when an authenticated user tries to mutate something they do not own.
    """

    def __init__(
        self,
        message: str = "Access denied",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        required_action: Optional[str] = None,
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id
        if required_action:
            details["required_action"] = required_action
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="AUTHORIZATION_ERROR"
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(DevConnectException):
    """
    Exception raised for data validation failures.
    Used when input data breaks a domain rule, e.g. dates in the wrong order.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(DevConnectException):
    """
    Exception raised when requested resource is not found.
    Used for missing users, profiles, posts and nested list items.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class InvalidIdentifierError(NotFoundError):
    """
    Exception raised when an identifier fails the structural kind check.

    Subclasses NotFoundError so callers that only care about presence can
    treat a malformed id the same as a missing document.
    """

    def __init__(
        self,
        value: Any,
        message: str = "Malformed identifier",
        resource_type: Optional[str] = None
    ):
        super().__init__(
            message=message,
            resource_type=resource_type,
            details={"value": str(value), "constraint": "object_id"}
        )
        self.error_code = "INVALID_IDENTIFIER"


class ConflictError(DevConnectException):
    """
    Exception raised for resource conflicts.
    Used for duplicate registrations and repeated like/unlike actions.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: Optional[str] = None,
        conflict_field: Optional[str] = None,
        existing_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if conflict_field:
            details["conflict_field"] = conflict_field
        if existing_value is not None:
            details["existing_value"] = str(existing_value)

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="CONFLICT_ERROR"
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(DevConnectException):
    """
    Exception raised for database operation failures.
    Used for connection issues, driver errors, write failures, etc.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        collection: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if collection:
            details["collection"] = collection

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


class AccountDeletionError(DevConnectException):
    """
    Exception raised when a cascading account deletion stops part way.

    The steps listed in ``completed_steps`` are not rolled back; re-running
    the deletion finishes the job because every step is an idempotent
    filter delete.
    """

    def __init__(
        self,
        user_id: str,
        failed_step: str,
        completed_steps: Optional[List[str]] = None,
        message: str = "Account deletion did not complete"
    ):
        self.user_id = user_id
        self.failed_step = failed_step
        self.completed_steps = list(completed_steps or [])

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={
                "user_id": user_id,
                "failed_step": failed_step,
                "completed_steps": self.completed_steps,
            },
            error_code="ACCOUNT_DELETION_ERROR"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def is_server_error(exception: Exception) -> bool:
    """
    Check if exception represents a server error (5xx).

    Args:
        exception: Exception to check

    Returns:
        bool: True if server error, False otherwise
    """
    if isinstance(exception, (DevConnectException, HTTPException)):
        return 500 <= exception.status_code < 600

    return True  # Default to server error for unknown exceptions
