"""
Result<T> pattern for per-file error handling.

Loading an export file may fail for reasons that must not stop the run
(unreadable file, broken JSON, wrong document shape). Those operations
return a Result so the caller decides what to substitute.
"""

from dataclasses import dataclass
from typing import Optional, Generic, TypeVar, Callable
from enum import Enum


T = TypeVar('T')
U = TypeVar('U')


class ResultStatus(Enum):
    """Status of a Result."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class Result(Generic[T]):
    """
    Wrapper for an operation that may succeed or fail.

    Attributes:
        status: Result status (SUCCESS or FAILURE)
        value: The result value if successful (None if failure)
        error: The exception that caused failure (None if success)
        message: Optional message describing the result

    Examples:
        >>> result = load_json(Path("source_data/students_list.txt"))
        >>> names = result.map(extract_names).unwrap_or({})
    """

    status: ResultStatus
    value: Optional[T] = None
    error: Optional[Exception] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if the result represents success."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if the result represents failure."""
        return self.status == ResultStatus.FAILURE

    @classmethod
    def success(cls, value: T, message: Optional[str] = None) -> 'Result[T]':
        """
        Create a successful result.

        Args:
            value: The result value
            message: Optional success message

        Returns:
            Result instance with SUCCESS status
        """
        return cls(
            status=ResultStatus.SUCCESS,
            value=value,
            message=message
        )

    @classmethod
    def failure(
        cls,
        message: str,
        error: Optional[Exception] = None
    ) -> 'Result[T]':
        """
        Create a failure result.

        Args:
            message: Error message describing the failure
            error: Optional exception that caused the failure

        Returns:
            Result instance with FAILURE status
        """
        return cls(
            status=ResultStatus.FAILURE,
            message=message,
            error=error
        )

    def unwrap(self) -> T:
        """
        Return the value of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(
                f"Cannot unwrap failure result: {self.message}"
            )
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the value if successful, otherwise ``default``."""
        return self.value if self.is_success else default

    def map(self, func: Callable[[T], U]) -> 'Result[U]':
        """
        Apply ``func`` to the success value.

        A failure passes through untouched. An exception raised by ``func``
        turns the result into a failure carrying that exception.

        Examples:
            >>> Result.success({"tbl": []}).map(lambda doc: doc["tbl"]).value
            []
        """
        if self.is_failure:
            return Result.failure(self.message, self.error)

        try:
            new_value = func(self.value)
            return Result.success(new_value, self.message)
        except Exception as e:
            return Result.failure(str(e), e)
