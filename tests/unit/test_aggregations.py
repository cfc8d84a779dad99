from __future__ import annotations

import pytest
from pydantic import ValidationError

from query_dsl.aggregations import (
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
from query_dsl.domain import Script
from query_dsl.errors import InvalidOptionError, TypeMismatchError, UnsupportedOperationError
from query_dsl.queries import MatchAllQuery

_DIRECTION_ERROR = "The 'direction' parameter should be one of 'asc' or 'desc'"
_PARTITIONS = 20
_NEGATIVE_PARTITION_MESSAGE = r"IncludePartition\.partition, got int\. Input should be greater than or equal to 0"
_PRECISION = 100


def _terms(field: str | None = None) -> TermsAggregation:
    return TermsAggregation("my_agg", field)


@pytest.mark.parametrize(
    ("agg_class", "agg_type"),
    [
        (AvgAggregation, "avg"),
        (SumAggregation, "sum"),
        (MinAggregation, "min"),
        (MaxAggregation, "max"),
        (CardinalityAggregation, "cardinality"),
        (TermsAggregation, "terms"),
    ],
)
def test_aggregation_sets_type(agg_class: type, agg_type: str) -> None:
    aggregation = agg_class("my_agg", "my_field")

    assert aggregation.clause_type == agg_type
    assert aggregation.to_dict() == {"my_agg": {agg_type: {"field": "my_field"}}}


def test_terms_aggregation_options() -> None:
    aggregation = _terms("genre").size(5).show_term_doc_count_error(enable=True).collect_mode("BREADTH_FIRST")

    assert aggregation.to_dict() == {
        "my_agg": {
            "terms": {
                "field": "genre",
                "size": 5,
                "show_term_doc_count_error": True,
                "collect_mode": "breadth_first",
            },
        },
    }


def test_terms_aggregation_collect_mode_is_validated() -> None:
    with pytest.raises(InvalidOptionError, match="The 'mode' parameter should be one of"):
        _terms().collect_mode("width_first")


def test_terms_aggregation_order_defaults_to_desc() -> None:
    assert _terms("my_field").order("my_field").to_dict() == {
        "my_agg": {"terms": {"field": "my_field", "order": {"my_field": "desc"}}},
    }


def test_terms_aggregation_order_accumulates() -> None:
    aggregation = _terms().order("_count", "ASC").order("_key")

    assert aggregation.get_option("order") == [{"_count": "asc"}, {"_key": "desc"}]

    aggregation.order("rating")
    assert len(aggregation.get_option("order")) == 3  # noqa: PLR2004


@pytest.mark.parametrize("direction", ["asc", "ASC", "desc", "DESC"])
def test_terms_aggregation_order_direction_accepts_any_casing(direction: str) -> None:
    assert _terms().order("my_field", direction).get_option("order") == {"my_field": direction.lower()}


@pytest.mark.parametrize("direction", ["invalid_direction", None])
def test_terms_aggregation_order_direction_is_validated(direction: object) -> None:
    aggregation = _terms().order("my_field", "asc")

    with pytest.raises(InvalidOptionError) as exc_info:
        aggregation.order("my_field", direction)  # type: ignore[arg-type]

    assert str(exc_info.value) == _DIRECTION_ERROR
    assert aggregation.get_option("order") == {"my_field": "asc"}


def test_terms_aggregation_include_partition() -> None:
    aggregation = _terms("my_field").include_partition(0, _PARTITIONS)

    assert aggregation.to_dict() == {
        "my_agg": {"terms": {"field": "my_field", "include": {"partition": 0, "num_partitions": _PARTITIONS}}},
    }


def test_terms_aggregation_include_partition_rejects_invalid_bounds() -> None:
    aggregation = _terms("my_field")

    with pytest.raises(TypeMismatchError, match=_NEGATIVE_PARTITION_MESSAGE) as exc_info:
        aggregation.include_partition(-1, _PARTITIONS)

    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert not aggregation.has_option("include")


def test_terms_aggregation_include_partition_rejects_non_numeric_partition() -> None:
    with pytest.raises(TypeMismatchError, match=r"IncludePartition\.partition, got str"):
        _terms().include_partition("x", _PARTITIONS)


def test_aggregation_script_and_missing() -> None:
    aggregation = AvgAggregation("avg_grade").script("doc.grade.value").missing(10)

    assert aggregation.to_dict() == {
        "avg_grade": {"avg": {"script": {"source": "doc.grade.value"}, "missing": 10}},
    }
    assert AvgAggregation("avg_grade").script(Script(source="x", lang="painless")).to_dict() == {
        "avg_grade": {"avg": {"script": {"source": "x", "lang": "painless"}}},
    }


def test_cardinality_precision_threshold() -> None:
    aggregation = CardinalityAggregation("authors", "author").precision_threshold(_PRECISION)

    assert aggregation.to_dict() == {
        "authors": {"cardinality": {"field": "author", "precision_threshold": _PRECISION}},
    }


def test_sub_aggregations_and_meta() -> None:
    aggregation = (
        _terms("genre")
        .agg(AvgAggregation("avg_price", "price"))
        .aggs([MaxAggregation("max_price", "price"), MinAggregation("min_price", "price")])
        .meta({"color": "blue"})
    )

    assert aggregation.to_dict() == {
        "my_agg": {
            "terms": {"field": "genre"},
            "aggs": {
                "avg_price": {"avg": {"field": "price"}},
                "max_price": {"max": {"field": "price"}},
                "min_price": {"min": {"field": "price"}},
            },
            "meta": {"color": "blue"},
        },
    }


def test_sub_aggregations_are_type_checked_before_adding() -> None:
    aggregation = _terms("genre")

    with pytest.raises(TypeMismatchError):
        aggregation.aggs([AvgAggregation("avg_price", "price"), MatchAllQuery()])

    with pytest.raises(TypeMismatchError):
        aggregation.agg(MatchAllQuery())

    assert aggregation.to_dict() == {"my_agg": {"terms": {"field": "genre"}}}


@pytest.mark.parametrize(
    ("agg_class", "agg_type"),
    [
        (SumBucketAggregation, "sum_bucket"),
        (AvgBucketAggregation, "avg_bucket"),
        (MaxBucketAggregation, "max_bucket"),
        (MinBucketAggregation, "min_bucket"),
    ],
)
def test_pipeline_aggregation_sets_type(agg_class: type, agg_type: str) -> None:
    aggregation = agg_class("sum_monthly_sales", "sales_per_month>sales")

    assert aggregation.to_dict() == {"sum_monthly_sales": {agg_type: {"buckets_path": "sales_per_month>sales"}}}


def test_pipeline_aggregation_options() -> None:
    aggregation = (
        SumBucketAggregation("total")
        .buckets_path("sales_per_month>sales")
        .gap_policy("INSERT_ZEROS")
        .format("0.00")
    )

    assert aggregation.to_dict() == {
        "total": {
            "sum_bucket": {"buckets_path": "sales_per_month>sales", "gap_policy": "insert_zeros", "format": "0.00"},
        },
    }


def test_pipeline_aggregation_gap_policy_is_validated() -> None:
    with pytest.raises(InvalidOptionError, match="'skip', 'insert_zeros' or 'keep_values'"):
        SumBucketAggregation("total").gap_policy("fill")


def test_pipeline_aggregation_rejects_field() -> None:
    with pytest.raises(UnsupportedOperationError, match="'field' is not supported by 'sum_bucket'"):
        SumBucketAggregation("total").field("sales")
