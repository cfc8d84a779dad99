"""Compound queries wrapping and combining other queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from query_dsl.core import ClauseContainer, check_type
from query_dsl.domain import BoostMode, FunctionScoreMode
from query_dsl.queries.base import Query
from query_dsl.queries.score_functions import ScoreFunction

if TYPE_CHECKING:
    from collections.abc import Sequence


class BoolQuery(ClauseContainer, Query):
    """Match documents matching boolean combinations of other queries.

    Clauses are grouped by occurrence type. A group holding a single query
    renders as that query, a larger group renders as a list; groups always
    render in `must`, `filter`, `must_not`, `should` order.

    Example:
        query = (
            BoolQuery()
            .must(MatchQuery("title", "search"))
            .filter(TermQuery("status", "published"))
            .should([TermQuery("tags", "python"), TermQuery("tags", "dsl")])
        )

    """

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-bool-query.html"
    group_names = ("must", "filter", "must_not", "should")
    member_type = Query

    def __init__(self) -> None:
        """Create an empty `bool` query."""
        super().__init__("bool")

    def must(self, queries: Query | Sequence[Query]) -> Self:
        """Add queries that must match and contribute to the score.

        Args:
            queries (Query | Sequence[Query]): One query or a list of queries.

        Raises:
            TypeMismatchError: If one item is not a `Query`.

        Returns:
            Self: This query.

        """
        return self.add_to_group("must", queries)

    def filter(self, queries: Query | Sequence[Query]) -> Self:
        """Add queries that must match, evaluated in filter context without scoring.

        Args:
            queries (Query | Sequence[Query]): One query or a list of queries.

        Raises:
            TypeMismatchError: If one item is not a `Query`.

        Returns:
            Self: This query.

        """
        return self.add_to_group("filter", queries)

    def must_not(self, queries: Query | Sequence[Query]) -> Self:
        """Add queries that must not match, evaluated in filter context.

        Args:
            queries (Query | Sequence[Query]): One query or a list of queries.

        Raises:
            TypeMismatchError: If one item is not a `Query`.

        Returns:
            Self: This query.

        """
        return self.add_to_group("must_not", queries)

    def should(self, queries: Query | Sequence[Query]) -> Self:
        """Add queries that should match.

        Without `must` or `filter` clauses at least one `should` clause has to
        match, see `minimum_should_match`.

        Args:
            queries (Query | Sequence[Query]): One query or a list of queries.

        Raises:
            TypeMismatchError: If one item is not a `Query`.

        Returns:
            Self: This query.

        """
        return self.add_to_group("should", queries)

    def disable_coord(self, *, enable: bool) -> Self:
        """Enable or disable coordination factor scoring."""
        return self.set_option("disable_coord", enable)

    def minimum_should_match(self, minimum_should_match: int | str) -> Self:
        """Set how many `should` clauses must match, e.g. `2` or `"30%"`."""
        return self.set_option("minimum_should_match", minimum_should_match)

    def adjust_pure_negative(self, *, enable: bool) -> Self:
        """Set whether a pure `must_not` query implicitly matches all documents first."""
        return self.set_option("adjust_pure_negative", enable)


class ConstantScoreQuery(Query):
    """Wrap a filter query and give every match the same score."""

    reference_url = (
        "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-constant-score-query.html"
    )

    def __init__(self, filter_query: Query | None = None) -> None:
        """Create a `constant_score` query."""
        super().__init__("constant_score")
        if filter_query is not None:
            self.filter(filter_query)

    def filter(self, filter_query: Query) -> Self:
        """Set the wrapped filter query."""
        check_type(filter_query, Query)
        return self.set_option("filter", filter_query)


class DisMaxQuery(Query):
    """Score documents by their best matching sub-query."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-dis-max-query.html"

    def __init__(self) -> None:
        """Create an empty `dis_max` query."""
        super().__init__("dis_max")

    def queries(self, queries: Query | Sequence[Query]) -> Self:
        """Append sub-queries; they always render as a list."""
        return self._append_option("queries", queries, Query)

    def tie_breaker(self, factor: float) -> Self:
        """Set the weight of non-best matching sub-queries."""
        return self.set_option("tie_breaker", factor)


class BoostingQuery(Query):
    """Demote documents matching a negative query."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-boosting-query.html"

    def __init__(
        self,
        positive: Query | None = None,
        negative: Query | None = None,
        negative_boost: float | None = None,
    ) -> None:
        """Create a `boosting` query."""
        super().__init__("boosting")
        if positive is not None:
            self.positive(positive)
        if negative is not None:
            self.negative(negative)
        self.set_option("negative_boost", negative_boost)

    def positive(self, query: Query) -> Self:
        """Set the query documents must match."""
        check_type(query, Query)
        return self.set_option("positive", query)

    def negative(self, query: Query) -> Self:
        """Set the query decreasing the score of matching documents."""
        check_type(query, Query)
        return self.set_option("negative", query)

    def negative_boost(self, factor: float) -> Self:
        """Set the factor applied to documents matching the negative query."""
        return self.set_option("negative_boost", factor)


class FunctionScoreQuery(Query):
    """Modify the score of documents retrieved by a query with score functions."""

    reference_url = (
        "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-function-score-query.html"
    )

    def __init__(self, query: Query | None = None) -> None:
        """Create a `function_score` query."""
        super().__init__("function_score")
        if query is not None:
            self.query(query)

    def query(self, query: Query) -> Self:
        """Set the query selecting the documents to score."""
        check_type(query, Query)
        return self.set_option("query", query)

    def function(self, function: ScoreFunction) -> Self:
        """Append one score function."""
        return self._append_option("functions", function, ScoreFunction)

    def functions(self, functions: Sequence[ScoreFunction]) -> Self:
        """Append several score functions; they always render as a list."""
        return self._append_option("functions", functions, ScoreFunction)

    def score_mode(self, mode: str) -> Self:
        """Set how function scores are combined."""
        return self.set_option("score_mode", self._check_enum(mode, FunctionScoreMode, param="score_mode"))

    def boost_mode(self, mode: str) -> Self:
        """Set how the query score and the function score are combined."""
        return self.set_option("boost_mode", self._check_enum(mode, BoostMode, param="boost_mode"))

    def max_boost(self, max_boost: float) -> Self:
        """Cap the boost produced by the functions."""
        return self.set_option("max_boost", max_boost)

    def min_score(self, min_score: float) -> Self:
        """Exclude documents scoring below a threshold."""
        return self.set_option("min_score", min_score)
