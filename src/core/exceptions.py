"""
Domain exceptions for the inventory service.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class InventoryServiceError(Exception):
    """Base exception for all inventory service errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(InventoryServiceError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class LocationNotFoundError(StorageError):
    """Location is not known to the store."""

    def __init__(self, location_id: str):
        super().__init__(
            f"Location not found: {location_id}",
            code="LOCATION_NOT_FOUND",
            details={"location_id": location_id},
        )


# Validation Exceptions
class ValidationError(InventoryServiceError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class ConfigurationError(InventoryServiceError):
    """Configuration error."""

    pass
