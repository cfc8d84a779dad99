from __future__ import annotations

import pytest

from query_dsl.errors import InvalidOptionError, TypeMismatchError
from query_dsl.queries import (
    ExistsQuery,
    HasChildQuery,
    HasParentQuery,
    MatchAllQuery,
    MatchNoneQuery,
    MatchQuery,
    NestedQuery,
    ParentIdQuery,
    RangeQuery,
    TermQuery,
    TermsQuery,
)

_MIN_CHILDREN = 2
_MAX_CHILDREN = 10


def test_match_all_and_match_none() -> None:
    assert MatchAllQuery().to_dict() == {"match_all": {}}
    assert MatchAllQuery().boost(1.5).to_dict() == {"match_all": {"boost": 1.5}}
    assert MatchNoneQuery().to_dict() == {"match_none": {}}


def test_match_query_is_field_scoped() -> None:
    query = MatchQuery("message", "this is a test").operator("AND").fuzziness("AUTO")

    assert query.field == "message"
    assert query.to_dict() == {
        "match": {"message": {"query": "this is a test", "operator": "and", "fuzziness": "AUTO"}},
    }


def test_match_query_rejects_unknown_operator() -> None:
    with pytest.raises(InvalidOptionError, match="The 'operator' parameter should be one of 'and' or 'or'"):
        MatchQuery("message", "text").operator("xor")


def test_term_and_terms_queries() -> None:
    assert TermQuery("user", "kimchy").boost(2).to_dict() == {"term": {"user": {"value": "kimchy", "boost": 2}}}
    assert TermQuery("user").value("kimchy").to_dict() == {"term": {"user": {"value": "kimchy"}}}

    terms = TermsQuery("user", ["kimchy"]).value("elastic").values(["es"]).boost(1.0)
    assert terms.to_dict() == {"terms": {"user": ["kimchy", "elastic", "es"], "boost": 1.0}}


def test_range_query_bounds() -> None:
    query = RangeQuery("born").gte("01/01/2012").lte("2013").format("dd/MM/yyyy||yyyy").time_zone("+01:00")

    assert query.to_dict() == {
        "range": {"born": {"gte": "01/01/2012", "lte": "2013", "format": "dd/MM/yyyy||yyyy", "time_zone": "+01:00"}},
    }


def test_exists_query() -> None:
    assert ExistsQuery("user").to_dict() == {"exists": {"field": "user"}}
    assert ExistsQuery().field("title").name("has_title").to_dict() == {
        "exists": {"field": "title", "_name": "has_title"},
    }


def test_has_child_query_options() -> None:
    query = (
        HasChildQuery(TermQuery("tag", "something"), "blog_tag")
        .score_mode("MAX")
        .min_children(_MIN_CHILDREN)
        .max_children(_MAX_CHILDREN)
    )

    assert query.to_dict() == {
        "has_child": {
            "query": {"term": {"tag": {"value": "something"}}},
            "child_type": "blog_tag",
            "score_mode": "max",
            "min_children": _MIN_CHILDREN,
            "max_children": _MAX_CHILDREN,
        },
    }


def test_has_child_query_type_is_alias_of_child_type() -> None:
    by_alias = HasChildQuery(MatchAllQuery()).type("comment")
    by_name = HasChildQuery(MatchAllQuery()).child_type("comment")

    assert by_alias.to_dict() == by_name.to_dict()


def test_has_child_query_omits_absent_optional_arguments() -> None:
    assert HasChildQuery().to_dict() == {"has_child": {}}


def test_has_child_query_validates_before_storing() -> None:
    query = HasChildQuery(MatchAllQuery(), "comment").score_mode("sum")

    with pytest.raises(InvalidOptionError, match="The 'score_mode' parameter should be one of"):
        query.score_mode("median")

    with pytest.raises(TypeMismatchError):
        query.query("user:kimchy")

    assert query.get_option("score_mode") == "sum"
    assert query.to_dict()["has_child"]["query"] == {"match_all": {}}


def test_has_parent_query() -> None:
    query = HasParentQuery(TermQuery("tag", "news"), "blog").score(enable=True).ignore_unmapped(enable=True)

    assert query.to_dict() == {
        "has_parent": {
            "query": {"term": {"tag": {"value": "news"}}},
            "parent_type": "blog",
            "score": True,
            "ignore_unmapped": True,
        },
    }
    assert HasParentQuery().type("blog").to_dict() == {"has_parent": {"parent_type": "blog"}}


def test_nested_query_with_inner_hits() -> None:
    query = NestedQuery(MatchQuery("comments.text", "great"), "comments").inner_hits({"size": 3})

    assert query.to_dict() == {
        "nested": {
            "query": {"match": {"comments.text": {"query": "great"}}},
            "path": "comments",
            "inner_hits": {"size": 3},
        },
    }


def test_parent_id_query() -> None:
    assert ParentIdQuery("answer", "1").to_dict() == {"parent_id": {"type": "answer", "id": "1"}}
