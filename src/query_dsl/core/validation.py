"""Eager validation helpers shared by every clause setter."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from pydantic import BaseModel, ValidationError

from query_dsl.errors import InvalidOptionError, TypeMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable

_ModelT = TypeVar("_ModelT", bound=BaseModel)

_logger = logging.getLogger(__name__)


def _type_name(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(item.__name__ for item in expected)
    return expected.__name__


def check_type(value: Any, expected: type | tuple[type, ...]) -> None:
    """Ensure a value is an instance of the expected type.

    Args:
        value (Any): Value supplied by the caller.
        expected (type | tuple[type, ...]): Accepted class or classes.

    Raises:
        TypeMismatchError: If `value` is not an instance of `expected`.

    """
    if not isinstance(value, expected):
        raise TypeMismatchError(expected=_type_name(expected), actual=type(value).__name__)


def allowed_values(allowed: Iterable[str] | type[StrEnum]) -> tuple[str, ...]:
    """Return allowed values as lowercase strings in declaration order.

    Args:
        allowed (Iterable[str] | type[StrEnum]): Raw values or an enum class.

    Returns:
        tuple[str, ...]: Canonical allowed values.

    """
    if isinstance(allowed, type) and issubclass(allowed, StrEnum):
        return tuple(member.value for member in allowed)
    return tuple(str(value).lower() for value in allowed)


def invalid_param(
    param: str,
    allowed: Iterable[str] | type[StrEnum],
    value: Any,
    *,
    reference_url: str | None = None,
) -> NoReturn:
    """Log and raise the error reported for an out-of-set option value.

    Args:
        param (str): Parameter name quoted in the error message.
        allowed (Iterable[str] | type[StrEnum]): Allowed values.
        value (Any): Rejected value.
        reference_url (str | None): Documentation page of the clause.

    Raises:
        InvalidOptionError: Always.

    """
    if reference_url:
        _logger.warning("Got '%s' - %r. See %s", param, value, reference_url)
    else:
        _logger.warning("Got '%s' - %r.", param, value)
    raise InvalidOptionError(param=param, allowed=allowed_values(allowed))


def check_enum(
    value: Any,
    allowed: Iterable[str] | type[StrEnum],
    *,
    param: str,
    reference_url: str | None = None,
) -> str:
    """Validate an enumerated option value case-insensitively.

    Args:
        value (Any): Raw value supplied by the caller.
        allowed (Iterable[str] | type[StrEnum]): Allowed values.
        param (str): Parameter name quoted in the error message.
        reference_url (str | None): Documentation page of the clause.

    Raises:
        InvalidOptionError: If `value` is not a string or not an allowed value.

    Returns:
        str: Lowercase canonical value.

    """
    choices = allowed_values(allowed)
    if not isinstance(value, str):
        invalid_param(param, choices, value, reference_url=reference_url)

    normalized = value.strip().lower()
    if normalized not in choices:
        invalid_param(param, choices, value, reference_url=reference_url)
    return normalized


def build_value(model: type[_ModelT], **fields: Any) -> _ModelT:
    """Build a structured option value, reporting bad fields as type errors.

    Args:
        model (type[_ModelT]): Frozen value model to instantiate.
        **fields (Any): Field values supplied by the caller.

    Raises:
        TypeMismatchError: If pydantic rejects any field.

    Returns:
        _ModelT: Validated model instance.

    """
    try:
        return model(**fields)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise TypeMismatchError(
            expected=f"{model.__name__}.{location}" if location else model.__name__,
            actual=type(first.get("input")).__name__,
            detail=first["msg"],
        ) from exc
