from __future__ import annotations

import pytest

from query_dsl.domain import GeoPoint, Script
from query_dsl.errors import InvalidOptionError, TypeMismatchError
from query_dsl.queries import (
    DecayScoreFunction,
    FieldValueFactorFunction,
    MatchQuery,
    RandomScoreFunction,
    ScoreFunction,
    ScriptScoreFunction,
    WeightFunction,
)

_FACTOR = 1.2
_SEED = 10


def test_weight_function_is_score_function_alias() -> None:
    assert WeightFunction is ScoreFunction
    assert WeightFunction().weight(2).to_dict() == {"weight": 2}
    assert WeightFunction().to_dict() == {}


def test_score_function_with_filter() -> None:
    function = WeightFunction().filter(MatchQuery("test", "bar")).weight(23)

    assert function.to_dict() == {"filter": {"match": {"test": {"query": "bar"}}}, "weight": 23}


def test_score_function_filter_requires_query() -> None:
    with pytest.raises(TypeMismatchError):
        WeightFunction().filter({"match": {"test": "bar"}})


def test_script_score_function_wraps_plain_source() -> None:
    function = ScriptScoreFunction("_score * doc['my_numeric_field'].value").weight(2)

    assert function.to_dict() == {
        "script_score": {"script": {"source": "_score * doc['my_numeric_field'].value"}},
        "weight": 2,
    }


def test_script_score_function_accepts_script_model() -> None:
    script = Script(source="params.a * _score", lang="painless", params={"a": 5})

    assert ScriptScoreFunction(script).to_dict() == {
        "script_score": {"script": {"source": "params.a * _score", "lang": "painless", "params": {"a": 5}}},
    }


def test_random_score_function() -> None:
    function = RandomScoreFunction().seed(_SEED).field("_seq_no")

    assert function.to_dict() == {"random_score": {"seed": _SEED, "field": "_seq_no"}}


def test_field_value_factor_function() -> None:
    function = FieldValueFactorFunction("likes").factor(_FACTOR).modifier("SQRT").missing(1)

    assert function.to_dict() == {
        "field_value_factor": {"field": "likes", "factor": _FACTOR, "modifier": "sqrt", "missing": 1},
    }


def test_field_value_factor_function_rejects_unknown_modifier() -> None:
    function = FieldValueFactorFunction("likes").modifier("log1p")

    with pytest.raises(InvalidOptionError, match="The 'modifier' parameter should be one of 'none', 'log'"):
        function.modifier("cube")

    assert function.get_option("modifier") == "log1p"


def test_decay_function_renders_field_scoped_parameters() -> None:
    function = (
        DecayScoreFunction("location", "GAUSS")
        .origin(GeoPoint(lat=11, lon=12))
        .scale("2km")
        .offset("0km")
        .decay(0.33)
        .multi_value_mode("avg")
    )

    assert function.clause_type == "gauss"
    assert function.to_dict() == {
        "gauss": {
            "location": {"origin": {"lat": 11.0, "lon": 12.0}, "scale": "2km", "offset": "0km", "decay": 0.33},
            "multi_value_mode": "avg",
        },
    }


def test_decay_function_defaults_to_gauss() -> None:
    assert DecayScoreFunction("date").scale("10d").to_dict() == {"gauss": {"date": {"scale": "10d"}}}


def test_decay_function_requires_a_field_name() -> None:
    with pytest.raises(TypeMismatchError, match="Argument must be an instance of str, got NoneType"):
        DecayScoreFunction(None)


def test_decay_function_field_setter_moves_parameters() -> None:
    function = DecayScoreFunction("created_at").origin("now").field("updated_at")

    assert function.to_dict() == {"gauss": {"updated_at": {"origin": "now"}}}
    assert function.field(None).to_dict() == {"gauss": {"updated_at": {"origin": "now"}}}


def test_decay_function_rejects_unknown_mode() -> None:
    with pytest.raises(InvalidOptionError) as exc_info:
        DecayScoreFunction("date", "quadratic")

    assert str(exc_info.value) == "The 'mode' parameter should be one of 'gauss', 'exp' or 'linear'"
