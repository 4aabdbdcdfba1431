"""
Result type.

Every use case returns a Result instead of raising for expected failures.
A Result is either a success (optionally carrying a value) or a failure
carrying a non-empty error message and an optional machine-readable code.
"""

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class InvalidResultError(ValueError):
    """Raised when a Result is built with an inconsistent success/error pair."""


class Result(Generic[T]):
    """
    Tagged success/failure outcome.

    Example:
        ```python
        result = Result.success(appointment_id)
        if result.is_failure:
            logger.warning(result.error)
        ```
    """

    __slots__ = ("_is_success", "_error", "_error_code", "_value")

    def __init__(
        self,
        is_success: bool,
        error: str = "",
        value: T | None = None,
        error_code: str | None = None,
    ) -> None:
        if is_success and error:
            raise InvalidResultError("A successful result cannot carry an error")
        if not is_success and not error:
            raise InvalidResultError("A failed result must carry an error message")

        self._is_success = is_success
        self._error = error
        self._error_code = error_code
        self._value = value

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def error(self) -> str:
        """Error message, empty on success."""
        return self._error

    @property
    def error_code(self) -> str | None:
        return self._error_code

    @property
    def value(self) -> T | None:
        """Carried value; None for failures and value-less successes."""
        return self._value

    @classmethod
    def success(cls, value: Any = None) -> "Result[Any]":
        """Create a successful result, with or without a value."""
        return cls(True, value=value)

    @classmethod
    def failure(cls, error: str, code: str | None = None) -> "Result[Any]":
        """Create a failed result."""
        return cls(False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self._is_success

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r}, code={self._error_code!r})"
