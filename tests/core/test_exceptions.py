"""Unit tests for domain exceptions."""

import pytest

from src.core.exceptions import (
    ConfigurationError,
    DatabaseError,
    InventoryServiceError,
    LocationNotFoundError,
    StorageError,
    ValidationError,
)


class TestInventoryServiceError:
    """Tests for the base exception."""

    def test_basic_initialization(self):
        error = InventoryServiceError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "InventoryServiceError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = InventoryServiceError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = InventoryServiceError(
            "Test error",
            code="TEST_CODE",
            details={"extra": "info"},
        )
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test error",
            "details": {"extra": "info"},
        }


class TestStorageErrors:
    """Tests for storage-related exceptions."""

    def test_storage_error_inheritance(self):
        error = StorageError("Storage failed")
        assert isinstance(error, InventoryServiceError)
        assert error.code == "StorageError"

    def test_database_error(self):
        error = DatabaseError(operation="list_by_location", error="disk I/O error")
        assert isinstance(error, StorageError)
        assert error.code == "DATABASE_ERROR"
        assert "list_by_location" in error.message
        assert error.details == {"operation": "list_by_location", "error": "disk I/O error"}

    def test_location_not_found(self):
        error = LocationNotFoundError("wh-central")
        assert error.code == "LOCATION_NOT_FOUND"
        assert "wh-central" in error.message
        assert error.details["location_id"] == "wh-central"


class TestValidationError:
    def test_fields(self):
        error = ValidationError("cfn", "CFN is required", "")
        assert error.code == "VALIDATION_ERROR"
        assert error.details["field"] == "cfn"
        assert error.details["value"] is None

    def test_value_truncated(self):
        error = ValidationError("search", "too long", "x" * 500)
        assert len(error.details["value"]) == 100


@pytest.mark.parametrize(
    "error",
    [
        StorageError("x"),
        DatabaseError("op", "err"),
        LocationNotFoundError("L1"),
        ValidationError("f", "m"),
        ConfigurationError("bad"),
    ],
)
def test_all_catchable_as_base(error):
    with pytest.raises(InventoryServiceError):
        raise error
