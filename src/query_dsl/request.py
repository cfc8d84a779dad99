"""Top-level search request body builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from query_dsl.aggregations import Aggregation
from query_dsl.core import Clause, check_type, to_document
from query_dsl.domain import SortMode, SortOrder
from query_dsl.queries import Query

if TYPE_CHECKING:
    from collections.abc import Sequence


class Sort(Clause):
    """Sort on one field, rendered as `{field: {"order": ..., "mode": ...}}`."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/sort-search-results.html"

    def __init__(self, field: str, order: str | None = None) -> None:
        """Create a sort on a field.

        Args:
            field (str): Field to sort on, or `_score`.
            order (str | None): `asc` or `desc`, engine default when omitted.

        Raises:
            InvalidOptionError: If `order` is given and is not `asc` or `desc`.

        """
        super().__init__(field)
        if order is not None:
            self.order(order)

    def order(self, order: str) -> Self:
        """Set the sort direction."""
        return self.set_option("order", self._check_enum(order, SortOrder, param="order"))

    def mode(self, mode: str) -> Self:
        """Set how a multi-valued field is reduced to one sort value."""
        return self.set_option("mode", self._check_enum(mode, SortMode, param="mode"))

    def missing(self, value: str | float) -> Self:
        """Set where documents without the field are sorted, e.g. `_last`."""
        return self.set_option("missing", value)

    def unmapped_type(self, field_type: str) -> Self:
        """Set the type assumed for the field on indices where it is not mapped."""
        return self.set_option("unmapped_type", field_type)


class RequestBodySearch:
    """Assemble a search request body from queries, aggregations and paging.

    Unlike clauses the body renders flat, without a wrapping key.

    Example:
        body = (
            RequestBodySearch()
            .query(MatchQuery("title", "search"))
            .agg(TermsAggregation("tags", "tags"))
            .size(10)
            .to_dict()
        )

    """

    def __init__(self) -> None:
        """Create an empty request body."""
        self._body: dict[str, Any] = {}
        self._aggs: dict[str, Aggregation] = {}
        self._sorts: list[Sort] = []

    def query(self, query: Query) -> Self:
        """Set the main query."""
        check_type(query, Query)
        self._body["query"] = query
        return self

    def post_filter(self, query: Query) -> Self:
        """Set a filter applied to hits after aggregations are computed."""
        check_type(query, Query)
        self._body["post_filter"] = query
        return self

    def agg(self, aggregation: Aggregation) -> Self:
        """Add one top-level aggregation."""
        check_type(aggregation, Aggregation)
        self._aggs[aggregation.name] = aggregation
        return self

    def aggs(self, aggregations: Sequence[Aggregation]) -> Self:
        """Add several top-level aggregations, all validated before any is added."""
        items = list(aggregations)
        for item in items:
            check_type(item, Aggregation)
        for item in items:
            self._aggs[item.name] = item
        return self

    def sort(self, sort: Sort) -> Self:
        """Append one sort criterion."""
        check_type(sort, Sort)
        self._sorts.append(sort)
        return self

    def size(self, size: int) -> Self:
        """Set how many hits are returned."""
        return self._set("size", size)

    def from_(self, offset: int) -> Self:
        """Set the offset of the first returned hit."""
        return self._set("from", offset)

    def source(self, source: bool | str | Sequence[str]) -> Self:
        """Select the `_source` fields returned with each hit."""
        return self._set("_source", list(source) if isinstance(source, list | tuple) else source)

    def track_total_hits(self, track: bool | int) -> Self:
        """Set whether, or up to which count, total hits are counted accurately."""
        return self._set("track_total_hits", track)

    def min_score(self, min_score: float) -> Self:
        """Exclude hits scoring below a threshold."""
        return self._set("min_score", min_score)

    def _set(self, name: str, value: Any) -> Self:
        if value is not None:
            self._body[name] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render the request body.

        Returns:
            dict[str, Any]: Search body ready for the engine's `_search` endpoint.

        """
        body = to_document(self._body)
        if self._sorts:
            body["sort"] = to_document(self._sorts)
        if self._aggs:
            body["aggs"] = {name: agg.to_dict()[name] for name, agg in self._aggs.items()}
        return body
