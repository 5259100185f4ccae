# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result type for argument parsing.

`ParseResult` carries either a parsed value or the `ArgumentError` that
stopped parsing, so callers can propagate failures by early return instead of
exceptions. `attempt()` bridges the raising coercion API into that form.

Example:
    result = attempt(classify("--port=abc").number)
    if not result.ok:
        return result          # propagate the failure
    port = result.value
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from argtoken.exceptions import ArgumentError

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a successful `value` or an `error`, never both."""

    value: T | None = None
    error: ArgumentError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("ParseResult cannot hold both a value and an error")

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ArgumentError) -> ParseResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> ParseResult[T]:
    """
    Call `func` and capture an `ArgumentError` as a failed `ParseResult`.

    Other exceptions propagate unchanged.
    """
    try:
        return ParseResult.success(func(*args, **kwargs))
    except ArgumentError as error:
        return ParseResult.failure(error)
