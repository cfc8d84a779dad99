"""Score functions used by `function_score` queries."""

from __future__ import annotations

from typing import Any, Self

from query_dsl.core import Clause, build_value, check_type, to_document
from query_dsl.domain import DecayMode, FieldValueModifier, MultiValueMode, Script
from query_dsl.queries.base import Query

_WEIGHT = "weight"


class ScoreFunction(Clause):
    """A score function with optional `filter` and `weight`.

    The base class alone is a weight function and renders as
    `{"weight": w, "filter": {...}}`. Subclasses render their options under
    their function type next to `filter` and `weight`.
    """

    reference_url = (
        "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-function-score-query.html"
    )

    def __init__(self, function_type: str = _WEIGHT) -> None:
        """Create a score function of the given type."""
        super().__init__(function_type)
        self._filter: Query | None = None
        self._weight: float | None = None

    def filter(self, query: Query) -> Self:
        """Restrict the function to documents matching a query."""
        check_type(query, Query)
        self._filter = query
        return self

    def weight(self, weight: float) -> Self:
        """Set the multiplier applied to the function score."""
        if weight is not None:
            self._weight = weight
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render the function document.

        Returns:
            dict[str, Any]: Function body with `filter` and `weight` when set.

        """
        document: dict[str, Any] = {}
        if self._clause_type != _WEIGHT:
            document[self._clause_type] = self._document_body()
        if self._filter is not None:
            document["filter"] = self._filter.to_dict()
        if self._weight is not None:
            document["weight"] = self._weight
        return document


WeightFunction = ScoreFunction


class ScriptScoreFunction(ScoreFunction):
    """Compute the score with a script."""

    def __init__(self, script: str | Script | None = None) -> None:
        """Create a `script_score` function."""
        super().__init__("script_score")
        if script is not None:
            self.script(script)

    def script(self, script: str | Script) -> Self:
        """Set the scoring script, plain source strings are wrapped."""
        check_type(script, (str, Script))
        return self.set_option("script", build_value(Script, source=script) if isinstance(script, str) else script)


class RandomScoreFunction(ScoreFunction):
    """Produce uniformly distributed scores."""

    def __init__(self) -> None:
        """Create a `random_score` function."""
        super().__init__("random_score")

    def seed(self, seed: int | str) -> Self:
        """Set the seed for reproducible scores."""
        return self.set_option("seed", seed)

    def field(self, field: str) -> Self:
        """Set the field mixed into the seed."""
        return self.set_option("field", field)


class FieldValueFactorFunction(ScoreFunction):
    """Use a document field to influence the score."""

    def __init__(self, field: str | None = None) -> None:
        """Create a `field_value_factor` function."""
        super().__init__("field_value_factor")
        self.set_option("field", field)

    def field(self, field: str) -> Self:
        """Set the numeric field to read."""
        return self.set_option("field", field)

    def factor(self, factor: float) -> Self:
        """Set the multiplier applied to the field value."""
        return self.set_option("factor", factor)

    def modifier(self, modifier: str) -> Self:
        """Set the function applied to the field value, e.g. `log1p`."""
        return self.set_option("modifier", self._check_enum(modifier, FieldValueModifier, param="modifier"))

    def missing(self, value: float) -> Self:
        """Set the value used for documents without the field."""
        return self.set_option("missing", value)


class DecayScoreFunction(ScoreFunction):
    """Score documents by their distance from an origin.

    The decay curve is the function type and therefore fixed at construction.
    """

    def __init__(self, field: str, mode: str = DecayMode.GAUSS) -> None:
        """Create a decay function.

        Args:
            field (str): Field the distance is computed on.
            mode (str): Decay curve, one of `gauss`, `exp` or `linear`.

        Raises:
            TypeMismatchError: If `field` is not a string.
            InvalidOptionError: If `mode` is not a supported curve.

        """
        check_type(field, str)
        super().__init__(self._check_enum(mode, DecayMode, param="mode"))
        self._field = field
        self._decay_options: dict[str, Any] = {}

    def field(self, field: str) -> Self:
        """Set the field the distance is computed on."""
        if field is None:
            return self
        check_type(field, str)
        self._field = field
        return self

    def origin(self, origin: Any) -> Self:
        """Set the central point, a number, a date or a `GeoPoint`."""
        return self._set_decay_option("origin", origin)

    def scale(self, scale: Any) -> Self:
        """Set the distance at which the score equals `decay`."""
        return self._set_decay_option("scale", scale)

    def offset(self, offset: Any) -> Self:
        """Set the distance within which documents are not decayed."""
        return self._set_decay_option("offset", offset)

    def decay(self, decay: float) -> Self:
        """Set the score at `scale` distance."""
        return self._set_decay_option("decay", decay)

    def multi_value_mode(self, mode: str) -> Self:
        """Set which value of a multi-valued field is used."""
        return self.set_option("multi_value_mode", self._check_enum(mode, MultiValueMode, param="multi_value_mode"))

    def _set_decay_option(self, name: str, value: Any) -> Self:
        if value is not None:
            self._decay_options[name] = value
        return self

    def _document_body(self) -> dict[str, Any]:
        return {self._field: to_document(self._decay_options), **to_document(self._options)}
