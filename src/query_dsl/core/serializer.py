"""Recursive conversion of clause trees into plain documents."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class Serializable(Protocol):
    """Define the contract of objects rendering their own document."""

    def to_dict(self) -> dict[str, Any]:
        """Return the plain document of this object.

        Returns:
            dict[str, Any]: Document ready for JSON encoding.

        """


def to_document(value: Any) -> Any:
    """Convert a value into a plain document tree.

    Clauses render themselves, structured values are dumped, sequences and
    mappings are rebuilt with converted members, primitives pass through.

    Args:
        value (Any): Clause, structured value, container or primitive.

    Returns:
        Any: Plain value made of dicts, lists and primitives.

    """
    if isinstance(value, Serializable):
        return value.to_dict()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, StrEnum):
        return value.value
    if isinstance(value, list | tuple):
        return [to_document(item) for item in value]
    if isinstance(value, Mapping):
        return {key: to_document(item) for key, item in value.items()}
    return value
