"""Result[T, E] pattern: services return this instead of raising for expected failures."""
from __future__ import annotations
from typing import TypeVar, Generic, Optional

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    def __init__(
        self,
        is_success: bool,
        value: Optional[T] = None,
        error: Optional[E] = None,
        message: Optional[str] = None,
        code: Optional[int] = None,
    ):
        if is_success and error is not None:
            raise ValueError("A successful Result cannot carry an error")
        if not is_success and value is not None:
            raise ValueError("A failed Result cannot carry a value")
        self.is_success = is_success
        self.value = value
        self.error = error
        self.message = message
        self.code = code

    @classmethod
    def ok(cls, value: T = None, message: Optional[str] = None) -> "Result[T, E]":
        return cls(is_success=True, value=value, message=message)

    @classmethod
    def fail(cls, error: E, code: Optional[int] = None) -> "Result[T, E]":
        """A failure; an AppError lends its status_code when no code is given."""
        if code is None:
            code = getattr(error, "status_code", None)
        return cls(is_success=False, error=error, code=code)

    def unwrap(self) -> T:
        if not self.is_success:
            raise RuntimeError(f"Tried to unwrap a failed result: {self.error!r}")
        return self.value

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self.value!r})"
        return f"Result.fail({self.error!r}, code={self.code!r})"
