"""Bucket aggregations."""

from __future__ import annotations

from typing import Any, Self

from query_dsl.aggregations.base import ValuesSourceAggregation
from query_dsl.core import build_value
from query_dsl.domain import CollectMode, IncludePartition, SortOrder


class TermsAggregation(ValuesSourceAggregation):
    """Build one bucket per unique value of a field."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-bucket-terms-aggregation.html"

    def __init__(self, name: str, field: str | None = None) -> None:
        """Create a `terms` aggregation.

        Args:
            name (str): Aggregation name.
            field (str | None): Field to build buckets from.

        """
        super().__init__(name, "terms", field)

    def size(self, size: int) -> Self:
        """Set how many buckets are returned."""
        return self.set_option("size", size)

    def shard_size(self, size: int) -> Self:
        """Set how many buckets each shard returns."""
        return self.set_option("shard_size", size)

    def min_doc_count(self, count: int) -> Self:
        """Drop buckets with fewer matching documents."""
        return self.set_option("min_doc_count", count)

    def show_term_doc_count_error(self, *, enable: bool) -> Self:
        """Report the worst case document count error per bucket."""
        return self.set_option("show_term_doc_count_error", enable)

    def collect_mode(self, mode: str) -> Self:
        """Set the collection strategy, `depth_first` or `breadth_first`.

        Raises:
            InvalidOptionError: If `mode` is not a supported strategy.

        """
        return self.set_option("collect_mode", self._check_enum(mode, CollectMode, param="mode"))

    def order(self, key: str, direction: str = SortOrder.DESC) -> Self:
        """Order buckets by a key.

        The first call stores one `{key: direction}` pair; later calls turn
        the order into a list of pairs, in call order.

        Args:
            key (str): Sort key, e.g. `_count`, `_key` or a sub-aggregation name.
            direction (str): `asc` or `desc`, any letter casing.

        Raises:
            InvalidOptionError: If `direction` is not `asc` or `desc`.

        Returns:
            Self: This aggregation.

        """
        entry = {key: self._check_enum(direction, SortOrder, param="direction")}
        current = self.get_option("order")
        if current is None:
            return self.set_option("order", entry)
        if isinstance(current, list):
            return self.set_option("order", [*current, entry])
        return self.set_option("order", [current, entry])

    def include(self, clause: str | list[Any]) -> Self:
        """Only build buckets for values matching a pattern or listed values."""
        return self.set_option("include", clause)

    def exclude(self, clause: str | list[Any]) -> Self:
        """Skip buckets for values matching a pattern or listed values."""
        return self.set_option("exclude", clause)

    def include_partition(self, partition: int, num_partitions: int) -> Self:
        """Only build buckets for one partition of the values."""
        partitioning = build_value(IncludePartition, partition=partition, num_partitions=num_partitions)
        return self.set_option("include", partitioning)

    def execution_hint(self, hint: str) -> Self:
        """Set the execution mechanism, e.g. `map` or `global_ordinals`."""
        return self.set_option("execution_hint", hint)
