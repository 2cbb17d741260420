"""Domain exceptions for the coffee-shop task tracker.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CoffeeTasksException(Exception):
    """Base exception for all application errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CoffeeTasksException):
    """Raised when input validation fails (invalid-argument)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(CoffeeTasksException):
    """Raised when the caller is not authenticated (missing or invalid ID token)."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(CoffeeTasksException):
    """Raised when the caller's stored role does not allow the operation."""

    def __init__(
        self,
        required_role: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional required role, action, and message.

        Args:
            required_role: Role the operation requires (e.g. 'superadmin').
            action: Action that was attempted (e.g. 'create_account').
            message: Human-readable message; default used when role/action omitted.
        """
        if required_role and action:
            message = f"Permission denied: {action} requires role {required_role}"
        details: dict[str, Any] = {}
        if required_role:
            details["required_role"] = required_role
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(CoffeeTasksException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'coffeeshop', 'task').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserAlreadyExistsException(CoffeeTasksException):
    """Raised when creating a login whose email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email is already registered",
            "USER_ALREADY_EXISTS",
            {"email": email},
        )


class InvalidStatusTransitionException(CoffeeTasksException):
    """Raised when a task result cannot move from its current status to the requested one."""

    def __init__(self, result_id: str, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot move task result from {current} to {requested}",
            "INVALID_STATUS_TRANSITION",
            {"result_id": result_id, "current": current, "requested": requested},
        )


class StoreNotConfiguredException(CoffeeTasksException):
    """Raised when an operation requires Firestore but credentials are not configured."""

    def __init__(
        self,
        message: str = "Firestore is not configured (set FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH).",
    ) -> None:
        super().__init__(
            message=message,
            error_code="SERVICE_UNAVAILABLE",
        )
