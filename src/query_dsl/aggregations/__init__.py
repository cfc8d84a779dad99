"""Aggregation clauses."""

from query_dsl.aggregations.base import Aggregation, ValuesSourceAggregation
from query_dsl.aggregations.bucket import TermsAggregation
from query_dsl.aggregations.metrics import (
    AvgAggregation,
    CardinalityAggregation,
    MaxAggregation,
    MinAggregation,
    SumAggregation,
)
from query_dsl.aggregations.pipeline import (
    AvgBucketAggregation,
    MaxBucketAggregation,
    MinBucketAggregation,
    PipelineAggregationBase,
    SumBucketAggregation,
)

__all__ = [
    "Aggregation",
    "AvgAggregation",
    "AvgBucketAggregation",
    "CardinalityAggregation",
    "MaxAggregation",
    "MaxBucketAggregation",
    "MinAggregation",
    "MinBucketAggregation",
    "PipelineAggregationBase",
    "SumAggregation",
    "SumBucketAggregation",
    "TermsAggregation",
    "ValuesSourceAggregation",
]
