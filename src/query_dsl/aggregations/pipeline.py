"""Sibling pipeline aggregations computed from other aggregations' output."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, Self

from query_dsl.aggregations.base import Aggregation
from query_dsl.domain import GapPolicy
from query_dsl.errors import UnsupportedOperationError

if TYPE_CHECKING:
    from collections.abc import Mapping


class PipelineAggregationBase(Aggregation):
    """Shared options of pipeline aggregations reading a `buckets_path`."""

    def __init__(self, name: str, agg_type: str, buckets_path: str | Mapping[str, str] | None = None) -> None:
        """Create a pipeline aggregation.

        Args:
            name (str): Aggregation name.
            agg_type (str): Aggregation type tag.
            buckets_path (str | Mapping[str, str] | None): Path of the metric to aggregate over.

        """
        super().__init__(name, agg_type)
        self.set_option("buckets_path", buckets_path)

    def buckets_path(self, path: str | Mapping[str, str]) -> Self:
        """Set the relative path of the metric to aggregate over."""
        return self.set_option("buckets_path", path)

    def gap_policy(self, policy: str) -> Self:
        """Set the policy applied to gaps in the data.

        Raises:
            InvalidOptionError: If `policy` is not `skip`, `insert_zeros` or `keep_values`.

        """
        return self.set_option("gap_policy", self._check_enum(policy, GapPolicy, param="gap_policy"))

    def format(self, fmt: str) -> Self:
        """Set the format of the output value."""
        return self.set_option("format", fmt)

    def field(self, _field: str) -> NoReturn:
        """Reject `field`, pipeline aggregations read `buckets_path` instead.

        Raises:
            UnsupportedOperationError: Always.

        """
        raise UnsupportedOperationError(operation="field", clause_type=self._clause_type)


class SumBucketAggregation(PipelineAggregationBase):
    """Sum a metric across all buckets of a sibling multi-bucket aggregation."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-pipeline-sum-bucket-aggregation.html"

    def __init__(self, name: str, buckets_path: str | None = None) -> None:
        """Create a `sum_bucket` aggregation."""
        super().__init__(name, "sum_bucket", buckets_path)


class AvgBucketAggregation(PipelineAggregationBase):
    """Average a metric across all buckets of a sibling aggregation."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-pipeline-avg-bucket-aggregation.html"

    def __init__(self, name: str, buckets_path: str | None = None) -> None:
        """Create an `avg_bucket` aggregation."""
        super().__init__(name, "avg_bucket", buckets_path)


class MaxBucketAggregation(PipelineAggregationBase):
    """Find the bucket holding the maximum value of a metric."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-pipeline-max-bucket-aggregation.html"

    def __init__(self, name: str, buckets_path: str | None = None) -> None:
        """Create a `max_bucket` aggregation."""
        super().__init__(name, "max_bucket", buckets_path)


class MinBucketAggregation(PipelineAggregationBase):
    """Find the bucket holding the minimum value of a metric."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/search-aggregations-pipeline-min-bucket-aggregation.html"

    def __init__(self, name: str, buckets_path: str | None = None) -> None:
        """Create a `min_bucket` aggregation."""
        super().__init__(name, "min_bucket", buckets_path)
