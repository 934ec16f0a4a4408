"""
Result type for maintenance operations that can be refused.

Validation problems (a negative budget floor, an unknown manager) are not
store failures, so services report them as values instead of raising:

    result = await budget_service.add_budget_to_manager("alice@example.com", 5_000_000)
    if not result:
        print(f"Error ({result.error_code}): {result.error}")
    else:
        change = result.unwrap()
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a service call.

    Attributes:
        success: Whether the operation ran
        value: The payload on success
        error: Human-readable reason on failure
        error_code: One of services.error_codes on failure
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None) -> "Result[T]":
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Get the value of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore
