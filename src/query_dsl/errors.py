"""Project-specific exceptions for query-dsl-builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class QueryDslError(Exception):
    """Base exception for the project."""


class TypeMismatchError(TypeError, QueryDslError):
    """Raised when a setter receives a value of an unexpected type."""

    def __init__(self, expected: str, actual: str, *, detail: str | None = None) -> None:
        """Build exception payload for mistyped argument values."""
        message = f"Argument must be an instance of {expected}, got {actual}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


def format_allowed_values(allowed: Sequence[str]) -> str:
    """Join allowed values as `'a', 'b' or 'c'`.

    Args:
        allowed (Sequence[str]): Allowed values in declaration order.

    Returns:
        str: Human readable enumeration.

    """
    quoted = [f"'{value}'" for value in allowed]
    if len(quoted) < 2:  # noqa: PLR2004
        return "".join(quoted)
    return f"{', '.join(quoted[:-1])} or {quoted[-1]}"


class InvalidOptionError(ValueError, QueryDslError):
    """Raised when an option value is outside its enumerated set."""

    def __init__(self, param: str, allowed: Sequence[str]) -> None:
        """Build exception payload for out-of-set option values."""
        self.param = param
        self.allowed = tuple(allowed)
        super().__init__(f"The '{param}' parameter should be one of {format_allowed_values(self.allowed)}")


class UnsupportedOperationError(NotImplementedError, QueryDslError):
    """Raised when a clause kind does not support a generic setter."""

    def __init__(self, operation: str, clause_type: str) -> None:
        """Build exception payload for unsupported clause operations."""
        super().__init__(f"'{operation}' is not supported by '{clause_type}' clauses.")
