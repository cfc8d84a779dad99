"""Query clauses."""

from query_dsl.queries.base import FieldQuery, Query
from query_dsl.queries.compound import (
    BoolQuery,
    BoostingQuery,
    ConstantScoreQuery,
    DisMaxQuery,
    FunctionScoreQuery,
)
from query_dsl.queries.joining import (
    HasChildQuery,
    HasParentQuery,
    JoiningQueryBase,
    NestedQuery,
    ParentIdQuery,
)
from query_dsl.queries.score_functions import (
    DecayScoreFunction,
    FieldValueFactorFunction,
    RandomScoreFunction,
    ScoreFunction,
    ScriptScoreFunction,
    WeightFunction,
)
from query_dsl.queries.term_level import (
    ExistsQuery,
    MatchAllQuery,
    MatchNoneQuery,
    MatchQuery,
    RangeQuery,
    TermQuery,
    TermsQuery,
)

__all__ = [
    "BoolQuery",
    "BoostingQuery",
    "ConstantScoreQuery",
    "DecayScoreFunction",
    "DisMaxQuery",
    "ExistsQuery",
    "FieldQuery",
    "FieldValueFactorFunction",
    "FunctionScoreQuery",
    "HasChildQuery",
    "HasParentQuery",
    "JoiningQueryBase",
    "MatchAllQuery",
    "MatchNoneQuery",
    "MatchQuery",
    "NestedQuery",
    "ParentIdQuery",
    "Query",
    "RandomScoreFunction",
    "RangeQuery",
    "ScoreFunction",
    "ScriptScoreFunction",
    "TermQuery",
    "TermsQuery",
    "WeightFunction",
]
