"""
Tests for custom exception hierarchy.

WHY: Comprehensive exception testing ensures:
1. Domain errors serialize to the soft result shape
2. HTTP status codes map correctly
3. Context data is properly filtered
4. Exception handlers render the right body
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from store_admin.core.exceptions import (
    AppException,
    DomainError,
    ValidationError,
    InvalidPayloadError,
    ResourceNotFoundError,
    ResourceAlreadyExistsError,
    BusinessRuleViolation,
    StoreNotFoundError,
    EmployeeNotFoundError,
    PackageNotFoundError,
    CustomerNotFoundError,
    EmployeeConflictError,
    PackageInUseError,
    StoreInUseError,
)
from store_admin.core.exception_handlers import app_exception_handler, generic_exception_handler


class TestAppException:
    """Test base AppException class."""

    def test_default_message(self):
        """Verify default message is used when none provided."""
        exc = AppException()
        assert exc.message == "An unexpected error occurred"
        assert exc.status_code == 500

    def test_custom_status_code(self):
        """Verify custom status code overrides class default."""
        exc = AppException(status_code=418)
        assert exc.status_code == 418

    def test_to_dict_basic(self):
        """Verify exception serializes to dict correctly."""
        exc = AppException(message="Test error", store_id=7)
        result = exc.to_dict()

        assert result["error"] == "AppException"
        assert result["message"] == "Test error"
        assert result["status_code"] == 500
        assert result["details"] == {"store_id": 7}

    def test_filtered_context_drops_sensitive_keys(self):
        """Passwords and salts never reach error details."""
        exc = AppException(password="secret", salt="pepper", email="a@example.com")
        assert exc.filtered_context() == {"email": "a@example.com"}


class TestDomainErrors:
    """Domain errors render as {"valid": false, "error", "error_description"}."""

    def test_domain_error_to_dict(self):
        exc = InvalidPayloadError(message="price is required.", field="price")
        assert exc.to_dict() == {
            "valid": False,
            "error": "Invalid payload",
            "error_description": "price is required.",
        }

    @pytest.mark.parametrize(
        "exc_class,error,description",
        [
            (StoreNotFoundError, "Store not found.", "Store does not exist"),
            (EmployeeNotFoundError, "Employee not found.", "Employee does not exist"),
            (PackageNotFoundError, "Package not found.", "Package does not exist"),
            (CustomerNotFoundError, "Customer not found.", "Customer does not exist"),
        ],
    )
    def test_not_found_errors(self, exc_class, error, description):
        """Each entity has its own not-found title and default description."""
        exc = exc_class(resource_id=1)
        assert isinstance(exc, ResourceNotFoundError)
        assert exc.status_code == 404
        assert exc.to_dict()["error"] == error
        assert exc.to_dict()["error_description"] == description

    def test_employee_conflict(self):
        exc = EmployeeConflictError(email="a@example.com")
        assert isinstance(exc, ResourceAlreadyExistsError)
        assert exc.status_code == 409
        assert exc.to_dict() == {
            "valid": False,
            "error": "Invalid payload",
            "error_description": "Employee email or phone already exist.",
        }

    def test_in_use_errors_are_business_rule_violations(self):
        assert issubclass(PackageInUseError, BusinessRuleViolation)
        assert issubclass(StoreInUseError, BusinessRuleViolation)
        assert PackageInUseError().status_code == 409

    def test_validation_error_status(self):
        assert ValidationError().status_code == 400
        assert issubclass(ValidationError, DomainError)


class TestExceptionHandlers:
    """Handlers turn exceptions into JSON responses."""

    def _make_app(self) -> FastAPI:
        app = FastAPI()
        app.add_exception_handler(AppException, app_exception_handler)
        app.add_exception_handler(Exception, generic_exception_handler)

        @app.get("/missing-store")
        async def missing_store():
            raise StoreNotFoundError(resource_id=99)

        @app.get("/server-error")
        async def server_error():
            raise AppException(message="Database unavailable")

        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret connection string")

        return app

    def test_domain_error_renders_soft_result(self):
        client = TestClient(self._make_app())
        response = client.get("/missing-store")

        assert response.status_code == 404
        assert response.json() == {
            "valid": False,
            "error": "Store not found.",
            "error_description": "Store does not exist",
        }

    def test_app_exception_keeps_structured_body(self):
        client = TestClient(self._make_app())
        response = client.get("/server-error")

        assert response.status_code == 500
        assert response.json()["message"] == "Database unavailable"

    def test_unexpected_error_is_generic(self):
        """Unexpected errors never leak their message."""
        client = TestClient(self._make_app(), raise_server_exceptions=False)
        response = client.get("/boom")

        assert response.status_code == 500
        body = response.json()
        assert body["valid"] is False
        assert "secret" not in response.text
