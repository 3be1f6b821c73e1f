"""Exceptions raised by vector operations."""

from __future__ import annotations

from typing import Any


class VectorError(Exception):
    """Base class for every error raised by planevec."""


class DivisionByZeroError(VectorError, ZeroDivisionError):
    """Raised when an operation would divide by an exact zero."""

    def __init__(self) -> None:
        super().__init__("Tried to divide by 0")


class InvalidNumberError(VectorError, TypeError, ValueError):
    """Raised when an expected finite number is missing or invalid."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Expected a finite number, instead got {value!r}")
        self.value = value


class OutOfRangeError(VectorError, ValueError):
    """Raised for a valid number that is outside the accepted range."""


class BoundTypeMismatchError(VectorError, TypeError):
    """Raised when a clamp gets one number bound and one vector bound."""

    def __init__(self, first: Any, second: Any) -> None:
        super().__init__(
            "Bounds must both be numbers or both be vectors, "
            f"got {type(first).__name__} and {type(second).__name__}"
        )
