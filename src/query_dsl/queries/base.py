"""Base class of every query clause."""

from __future__ import annotations

from typing import Any, Self

from query_dsl.core import Clause, check_type, to_document


class Query(Clause):
    """A query clause rendered as `{type: {...}}`."""

    def boost(self, factor: float) -> Self:
        """Set the relevance boost of this query."""
        return self.set_option("boost", factor)

    def name(self, name: str) -> Self:
        """Set the query name reported back in `matched_queries`."""
        return self.set_option("_name", name)

    def _append_option(self, option: str, items: Any, expected: type) -> Self:
        """Validate then append items to a list option that always renders as a list."""
        values = list(items) if isinstance(items, list | tuple) else [items]
        for value in values:
            check_type(value, expected)
        if values:
            self._options.setdefault(option, []).extend(values)
        return self


class FieldQuery(Query):
    """A query scoped to one field, rendered as `{type: {field: {...}}}`."""

    def __init__(self, clause_type: str, field: str) -> None:
        """Create a field-scoped query.

        Args:
            clause_type (str): Query type tag.
            field (str): Target field name.

        """
        super().__init__(clause_type)
        self._field = field

    @property
    def field(self) -> str:
        """Return the target field name."""
        return self._field

    def _document_body(self) -> dict[str, Any]:
        return {self._field: to_document(self._options)}

