"""
Custom exception hierarchy for structured error handling.

WHY: Every failure the admin services know about is raised as a subclass of
AppException, so the HTTP layer can render it without inspecting messages:
1. Domain failures (invalid payload, not found, conflict) render as the
   soft result body {"valid": false, "error", "error_description"}
2. Anything outside this hierarchy is an unexpected error and goes to the
   generic handler

IMPORTANT: Never map a bare Exception to "not found". Only the typed
ResourceNotFoundError family means the record is absent.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        **context: Any,
    ):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            status_code: HTTP status code (overrides class default)
            **context: Additional context for debugging (filtered in to_dict)
        """
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.context = context
        super().__init__(self.message)

    def filtered_context(self) -> Dict[str, Any]:
        """Context with sensitive keys removed."""
        sensitive_fields = {"password", "token", "secret", "key", "salt"}
        return {k: v for k, v in self.context.items() if k.lower() not in sensitive_fields}

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for JSON response.

        Returns:
            Dictionary with error details (sensitive fields filtered out)
        """
        filtered_context = self.filtered_context()
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "details": filtered_context if filtered_context else None,
        }


class DomainError(AppException):
    """
    Base class for expected, user-facing failures of the admin operations.

    WHY: These are reported to the caller as a soft result instead of an
    error page. `error` is the short title, `message` doubles as
    `error_description`.
    """

    error: str = "Request failed."

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": False,
            "error": self.error,
            "error_description": self.message,
        }


# ============================================================================
# Validation & Input Exceptions
# ============================================================================


class ValidationError(DomainError):
    """
    Raised when input validation fails.

    HTTP Status: 400 Bad Request
    """

    status_code = 400
    error = "Invalid payload"
    default_message = "Validation failed"


class InvalidPayloadError(ValidationError):
    """
    Raised when a required field is missing or a field has the wrong format.

    WHY: The message names the offending field ("price is required.",
    "price must be an integer.") so the caller can fix the request.

    HTTP Status: 400 Bad Request
    """

    default_message = "Invalid payload"


# ============================================================================
# Resource Exceptions
# ============================================================================


class ResourceNotFoundError(DomainError):
    """
    Raised when a requested resource doesn't exist.

    HTTP Status: 404 Not Found
    """

    status_code = 404
    error = "Resource not found."
    default_message = "Resource does not exist"


class ResourceAlreadyExistsError(DomainError):
    """
    Raised when attempting to create a resource that already exists.

    WHY: Raised both by service pre-checks and by the DAO when the database
    rejects a write with a unique-constraint violation.

    HTTP Status: 409 Conflict
    """

    status_code = 409
    error = "Resource already exists."
    default_message = "Resource already exists"


class BusinessRuleViolation(DomainError):
    """
    Raised when a business rule is violated.

    HTTP Status: 409 Conflict
    """

    status_code = 409
    error = "Business rule violation."
    default_message = "Business rule violation"


# ============================================================================
# Entity-specific Exceptions
# ============================================================================


class StoreNotFoundError(ResourceNotFoundError):
    error = "Store not found."
    default_message = "Store does not exist"


class EmployeeNotFoundError(ResourceNotFoundError):
    error = "Employee not found."
    default_message = "Employee does not exist"


class PackageNotFoundError(ResourceNotFoundError):
    error = "Package not found."
    default_message = "Package does not exist"


class CustomerNotFoundError(ResourceNotFoundError):
    error = "Customer not found."
    default_message = "Customer does not exist"


class BookingNotFoundError(ResourceNotFoundError):
    error = "Booking not found."
    default_message = "Booking does not exist"


class EmployeeConflictError(ResourceAlreadyExistsError):
    """
    Raised when an employee's email or phone is already taken.

    HTTP Status: 409 Conflict
    """

    error = "Invalid payload"
    default_message = "Employee email or phone already exist."


class PackageInUseError(BusinessRuleViolation):
    """
    Raised when deleting a package that bookings still reference.

    HTTP Status: 409 Conflict
    """

    error = "Package in use."
    default_message = "Package is referenced by existing bookings"


class StoreInUseError(BusinessRuleViolation):
    """
    Raised when deleting a store that employees or bookings still reference.

    HTTP Status: 409 Conflict
    """

    error = "Store in use."
    default_message = "Store is referenced by existing employees or bookings"
