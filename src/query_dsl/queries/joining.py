"""Joining queries across nested objects and parent/child relations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from query_dsl.core import check_type
from query_dsl.domain import JoinScoreMode
from query_dsl.queries.base import Query

if TYPE_CHECKING:
    from collections.abc import Mapping


class JoiningQueryBase(Query):
    """Shared options of queries wrapping an inner query on related documents."""

    def __init__(self, clause_type: str, query: Query | None = None) -> None:
        """Create a joining query.

        Args:
            clause_type (str): Query type tag.
            query (Query | None): Inner query.

        """
        super().__init__(clause_type)
        if query is not None:
            self.query(query)

    def query(self, query: Query) -> Self:
        """Set the inner query run against related documents."""
        check_type(query, Query)
        return self.set_option("query", query)

    def score_mode(self, mode: str) -> Self:
        """Set how scores of matching related documents affect the root document."""
        return self.set_option("score_mode", self._check_enum(mode, JoinScoreMode, param="score_mode"))

    def ignore_unmapped(self, *, enable: bool) -> Self:
        """Match nothing instead of failing when the relation is not mapped."""
        return self.set_option("ignore_unmapped", enable)

    def inner_hits(self, inner_hits: Mapping[str, Any]) -> Self:
        """Return the matching related documents along with each hit."""
        if inner_hits is None:
            return self
        return self.set_option("inner_hits", dict(inner_hits))


class NestedQuery(JoiningQueryBase):
    """Query nested objects as if they were separate documents."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-nested-query.html"

    def __init__(self, query: Query | None = None, path: str | None = None) -> None:
        """Create a `nested` query."""
        super().__init__("nested", query)
        self.set_option("path", path)

    def path(self, path: str) -> Self:
        """Set the path of the nested object."""
        return self.set_option("path", path)


class HasChildQuery(JoiningQueryBase):
    """Match parent documents whose children match a query."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-has-child-query.html"

    def __init__(self, query: Query | None = None, child_type: str | None = None) -> None:
        """Create a `has_child` query.

        Args:
            query (Query | None): Query run against child documents.
            child_type (str | None): Child relation name.

        """
        super().__init__("has_child", query)
        self.set_option("child_type", child_type)

    def type(self, child_type: str) -> Self:
        """Alias of `child_type`."""
        return self.child_type(child_type)

    def child_type(self, child_type: str) -> Self:
        """Set the child relation name to search against."""
        return self.set_option("child_type", child_type)

    def min_children(self, limit: int) -> Self:
        """Set the minimum number of matching children for a parent to match."""
        return self.set_option("min_children", limit)

    def max_children(self, limit: int) -> Self:
        """Set the maximum number of matching children for a parent to match."""
        return self.set_option("max_children", limit)


class HasParentQuery(JoiningQueryBase):
    """Match child documents whose parent matches a query."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-has-parent-query.html"

    def __init__(self, query: Query | None = None, parent_type: str | None = None) -> None:
        """Create a `has_parent` query."""
        super().__init__("has_parent", query)
        self.set_option("parent_type", parent_type)

    def type(self, parent_type: str) -> Self:
        """Alias of `parent_type`."""
        return self.parent_type(parent_type)

    def parent_type(self, parent_type: str) -> Self:
        """Set the parent relation name to search against."""
        return self.set_option("parent_type", parent_type)

    def score(self, *, enable: bool) -> Self:
        """Propagate the parent score to matching children."""
        return self.set_option("score", enable)


class ParentIdQuery(Query):
    """Match child documents joined to a given parent document."""

    reference_url = "https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-parent-id-query.html"

    def __init__(self, child_type: str | None = None, parent_id: str | None = None) -> None:
        """Create a `parent_id` query."""
        super().__init__("parent_id")
        self.set_option("type", child_type)
        self.set_option("id", parent_id)

    def type(self, child_type: str) -> Self:
        """Set the child relation name."""
        return self.set_option("type", child_type)

    def id(self, parent_id: str) -> Self:
        """Set the parent document id."""
        return self.set_option("id", parent_id)

    def ignore_unmapped(self, *, enable: bool) -> Self:
        """Match nothing instead of failing when the relation is not mapped."""
        return self.set_option("ignore_unmapped", enable)
