"""Base class of every aggregation clause."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from query_dsl.core import Clause, build_value, check_type, to_document
from query_dsl.domain import Script

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class Aggregation(Clause):
    """A named aggregation rendered as `{name: {type: {...}, "aggs": {...}}}`.

    Sub-aggregations are keyed by their own name; adding a second
    sub-aggregation with the same name replaces the first.
    """

    def __init__(self, name: str, agg_type: str) -> None:
        """Create an aggregation.

        Args:
            name (str): Name used to refer to the aggregation results.
            agg_type (str): Aggregation type tag.

        """
        super().__init__(agg_type)
        self._name = name
        self._sub_aggs: dict[str, Aggregation] = {}
        self._meta: dict[str, Any] | None = None

    @property
    def name(self) -> str:
        """Return the aggregation name."""
        return self._name

    def agg(self, aggregation: Aggregation) -> Self:
        """Nest one sub-aggregation.

        Raises:
            TypeMismatchError: If `aggregation` is not an `Aggregation`.

        """
        check_type(aggregation, Aggregation)
        self._sub_aggs[aggregation.name] = aggregation
        return self

    def aggs(self, aggregations: Sequence[Aggregation]) -> Self:
        """Nest several sub-aggregations, all validated before any is added."""
        items = list(aggregations)
        for item in items:
            check_type(item, Aggregation)
        for item in items:
            self._sub_aggs[item.name] = item
        return self

    def meta(self, meta: Mapping[str, Any]) -> Self:
        """Attach metadata returned untouched with the results."""
        if meta is None:
            return self
        self._meta = dict(meta)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render the aggregation document.

        Returns:
            dict[str, Any]: Document keyed by the aggregation name.

        """
        body: dict[str, Any] = {self._clause_type: self._document_body()}
        if self._sub_aggs:
            body["aggs"] = {name: agg.to_dict()[name] for name, agg in self._sub_aggs.items()}
        if self._meta:
            body["meta"] = to_document(self._meta)
        return {self._name: body}


class ValuesSourceAggregation(Aggregation):
    """An aggregation reading its values from a field or a script."""

    def __init__(self, name: str, agg_type: str, field: str | None = None) -> None:
        """Create an aggregation optionally bound to a field."""
        super().__init__(name, agg_type)
        self.set_option("field", field)

    def field(self, field: str) -> Self:
        """Set the field to aggregate on."""
        return self.set_option("field", field)

    def script(self, script: str | Script) -> Self:
        """Compute the aggregated values with a script."""
        check_type(script, (str, Script))
        return self.set_option("script", build_value(Script, source=script) if isinstance(script, str) else script)

    def missing(self, value: Any) -> Self:
        """Set the value used for documents without the field."""
        return self.set_option("missing", value)

    def format(self, fmt: str) -> Self:
        """Set the format of the returned string values."""
        return self.set_option("format", fmt)
