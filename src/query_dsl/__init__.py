"""Fluent builders for search engine query DSL documents."""

from query_dsl.aggregations import (
    Aggregation,
    AvgAggregation,
    AvgBucketAggregation,
    CardinalityAggregation,
    MaxAggregation,
    MaxBucketAggregation,
    MinAggregation,
    MinBucketAggregation,
    SumAggregation,
    SumBucketAggregation,
    TermsAggregation,
)
from query_dsl.core import (
    Clause,
    ClauseContainer,
    RenderOptions,
    Serializable,
    pretty_print,
    render_json,
    to_document,
)
from query_dsl.domain import GeoPoint, IncludePartition, Script
from query_dsl.errors import InvalidOptionError, QueryDslError, TypeMismatchError, UnsupportedOperationError
from query_dsl.queries import (
    BoolQuery,
    BoostingQuery,
    ConstantScoreQuery,
    DecayScoreFunction,
    DisMaxQuery,
    ExistsQuery,
    FieldValueFactorFunction,
    FunctionScoreQuery,
    HasChildQuery,
    HasParentQuery,
    MatchAllQuery,
    MatchNoneQuery,
    MatchQuery,
    NestedQuery,
    ParentIdQuery,
    Query,
    RandomScoreFunction,
    RangeQuery,
    ScoreFunction,
    ScriptScoreFunction,
    TermQuery,
    TermsQuery,
    WeightFunction,
)
from query_dsl.request import RequestBodySearch, Sort

__all__ = [
    "Aggregation",
    "AvgAggregation",
    "AvgBucketAggregation",
    "BoolQuery",
    "BoostingQuery",
    "CardinalityAggregation",
    "Clause",
    "ClauseContainer",
    "ConstantScoreQuery",
    "DecayScoreFunction",
    "DisMaxQuery",
    "ExistsQuery",
    "FieldValueFactorFunction",
    "FunctionScoreQuery",
    "GeoPoint",
    "HasChildQuery",
    "HasParentQuery",
    "IncludePartition",
    "InvalidOptionError",
    "MatchAllQuery",
    "MatchNoneQuery",
    "MatchQuery",
    "MaxAggregation",
    "MaxBucketAggregation",
    "MinAggregation",
    "MinBucketAggregation",
    "NestedQuery",
    "ParentIdQuery",
    "Query",
    "QueryDslError",
    "RandomScoreFunction",
    "RangeQuery",
    "RenderOptions",
    "RequestBodySearch",
    "ScoreFunction",
    "Script",
    "ScriptScoreFunction",
    "Serializable",
    "Sort",
    "SumAggregation",
    "SumBucketAggregation",
    "TermQuery",
    "TermsAggregation",
    "TermsQuery",
    "TypeMismatchError",
    "UnsupportedOperationError",
    "WeightFunction",
    "pretty_print",
    "render_json",
    "to_document",
]
