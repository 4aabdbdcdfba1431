"""
Domain errors.

Aggregates and value objects raise these to reject an operation. Use cases
catch them at their entry point and turn them into failure Results; the
``code`` of each class becomes the Result's ``error_code``.
"""

from typing import Any


class DomainException(Exception):
    """Rejected domain operation with a human message and a stable code."""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = {key: value for key, value in details.items() if value is not None}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class ValidationException(DomainException):
    """Malformed input: blank required text, inverted date range, bad identifier."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, field=field)
        self.field = field


class InvalidOperationException(DomainException):
    """
    Operation not allowed from the aggregate's current state.

    Example:
        ```python
        raise InvalidOperationException(
            operation="confirm",
            current_state="cancelled",
            message="Can only confirm scheduled appointments",
        )
        ```
    """

    code = "INVALID_OPERATION"

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        super().__init__(
            message or f"Cannot {operation} while {current_state}",
            operation=operation,
            current_state=current_state,
        )
        self.operation = operation
        self.current_state = current_state


class EntityNotFoundException(DomainException):
    """Referenced identity is absent from storage."""

    code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        super().__init__(
            message or f"{entity_type} not found",
            entity_type=entity_type,
            entity_id=str(entity_id),
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
