"""Leaf queries: match-all, full-text and term-level queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from query_dsl.core import to_document
from query_dsl.domain import Operator
from query_dsl.queries.base import FieldQuery, Query

if TYPE_CHECKING:
    from collections.abc import Sequence


class MatchAllQuery(Query):
    """Match every document, optionally with a constant boost."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-match-all-query.html"

    def __init__(self) -> None:
        """Create a `match_all` query."""
        super().__init__("match_all")


class MatchNoneQuery(Query):
    """Match no document."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-match-all-query.html"

    def __init__(self) -> None:
        """Create a `match_none` query."""
        super().__init__("match_none")


class MatchQuery(FieldQuery):
    """Full-text query analysed against one field."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-match-query.html"

    def __init__(self, field: str, query: str | None = None) -> None:
        """Create a `match` query.

        Args:
            field (str): Target field name.
            query (str | None): Query text.

        """
        super().__init__("match", field)
        self.set_option("query", query)

    def query(self, query: str) -> Self:
        """Set the query text."""
        return self.set_option("query", query)

    def operator(self, operator: str) -> Self:
        """Set the boolean operator combining analysed terms (`and` or `or`)."""
        return self.set_option("operator", self._check_enum(operator, Operator, param="operator"))

    def fuzziness(self, fuzziness: int | str) -> Self:
        """Set the allowed edit distance, e.g. `AUTO` or `1`."""
        return self.set_option("fuzziness", fuzziness)

    def analyzer(self, analyzer: str) -> Self:
        """Set the analyzer used for the query text."""
        return self.set_option("analyzer", analyzer)

    def minimum_should_match(self, minimum_should_match: int | str) -> Self:
        """Set how many analysed terms must match."""
        return self.set_option("minimum_should_match", minimum_should_match)


class TermQuery(FieldQuery):
    """Exact term match against one field."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-term-query.html"

    def __init__(self, field: str, value: Any = None) -> None:
        """Create a `term` query."""
        super().__init__("term", field)
        self.set_option("value", value)

    def value(self, value: Any) -> Self:
        """Set the exact term to match."""
        return self.set_option("value", value)

    def case_insensitive(self, *, enable: bool = True) -> Self:
        """Enable ASCII case-insensitive matching."""
        return self.set_option("case_insensitive", enable)


class TermsQuery(Query):
    """Match documents holding any of several exact terms."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-terms-query.html"

    def __init__(self, field: str, values: Sequence[Any] | None = None) -> None:
        """Create a `terms` query.

        Args:
            field (str): Target field name.
            values (Sequence[Any] | None): Terms to match.

        """
        super().__init__("terms")
        self._field = field
        self._values: list[Any] = []
        self.values(values)

    def value(self, value: Any) -> Self:
        """Append one term, `None` is ignored."""
        if value is not None:
            self._values.append(value)
        return self

    def values(self, values: Sequence[Any]) -> Self:
        """Append several terms, skipping `None` entries."""
        if values is not None:
            self._values.extend(value for value in values if value is not None)
        return self

    def _document_body(self) -> dict[str, Any]:
        return {self._field: to_document(self._values), **to_document(self._options)}


class RangeQuery(FieldQuery):
    """Match documents whose field falls within bounds."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-range-query.html"

    def __init__(self, field: str) -> None:
        """Create a `range` query on a field."""
        super().__init__("range", field)

    def gt(self, value: Any) -> Self:
        """Set the exclusive lower bound."""
        return self.set_option("gt", value)

    def gte(self, value: Any) -> Self:
        """Set the inclusive lower bound."""
        return self.set_option("gte", value)

    def lt(self, value: Any) -> Self:
        """Set the exclusive upper bound."""
        return self.set_option("lt", value)

    def lte(self, value: Any) -> Self:
        """Set the inclusive upper bound."""
        return self.set_option("lte", value)

    def format(self, fmt: str) -> Self:
        """Set the date format of the bounds."""
        return self.set_option("format", fmt)

    def time_zone(self, zone: str) -> Self:
        """Set the time zone used to convert date bounds."""
        return self.set_option("time_zone", zone)


class ExistsQuery(Query):
    """Match documents holding an indexed value for a field."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-exists-query.html"

    def __init__(self, field: str | None = None) -> None:
        """Create an `exists` query."""
        super().__init__("exists")
        self.set_option("field", field)

    def field(self, field: str) -> Self:
        """Set the field to check."""
        return self.set_option("field", field)
