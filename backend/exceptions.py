"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application. The API layer translates
them to HTTP responses in utils.error_handlers.
"""


class ApplicationError(Exception):
    """Base exception for all application errors (translated to 500 unless more specific)"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when an entity, or an entity it references, does not exist"""

    def __init__(self, entity: str, entity_id, message: str | None = None):
        details = {"entity": entity, "id": str(entity_id)}
        msg = message or f"{entity} with id={entity_id} not found"
        super().__init__(msg, details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class ConflictError(ApplicationError):
    """Raised when a write violates a uniqueness constraint (duplicate login or email)"""

    def __init__(self, message: str, operation: str | None = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
