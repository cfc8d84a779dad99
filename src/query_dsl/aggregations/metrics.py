"""Single-value metric aggregations."""

from __future__ import annotations

from typing import Self

from query_dsl.aggregations.base import ValuesSourceAggregation


class AvgAggregation(ValuesSourceAggregation):
    """Average of numeric values."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-metrics-avg-aggregation.html"

    def __init__(self, name: str, field: str | None = None) -> None:
        """Create an `avg` aggregation."""
        super().__init__(name, "avg", field)


class SumAggregation(ValuesSourceAggregation):
    """Sum of numeric values."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-metrics-sum-aggregation.html"

    def __init__(self, name: str, field: str | None = None) -> None:
        """Create a `sum` aggregation."""
        super().__init__(name, "sum", field)


class MinAggregation(ValuesSourceAggregation):
    """Minimum of numeric values."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-metrics-min-aggregation.html"

    def __init__(self, name: str, field: str | None = None) -> None:
        """Create a `min` aggregation."""
        super().__init__(name, "min", field)


class MaxAggregation(ValuesSourceAggregation):
    """Maximum of numeric values."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-metrics-max-aggregation.html"

    def __init__(self, name: str, field: str | None = None) -> None:
        """Create a `max` aggregation."""
        super().__init__(name, "max", field)


class CardinalityAggregation(ValuesSourceAggregation):
    """Approximate count of distinct values."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-metrics-cardinality-aggregation.html"

    def __init__(self, name: str, field: str | None = None) -> None:
        """Create a `cardinality` aggregation."""
        super().__init__(name, "cardinality", field)

    def precision_threshold(self, threshold: int) -> Self:
        """Set the count below which results are expected to be close to exact."""
        return self.set_option("precision_threshold", threshold)
