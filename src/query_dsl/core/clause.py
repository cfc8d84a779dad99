"""Base clause and clause container shared by every query and aggregation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Self

from query_dsl.core.serializer import to_document
from query_dsl.core.validation import check_enum, check_type, invalid_param

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from enum import StrEnum

_logger = logging.getLogger(__name__)


class Clause:
    """A named clause holding an open-ended mapping of options.

    The clause type is fixed at construction and becomes the single top-level
    key of the rendered document. Every setter returns the clause itself so
    calls can be chained.
    """

    reference_url: ClassVar[str | None] = None

    def __init__(self, clause_type: str) -> None:
        """Create a clause of the given type.

        Args:
            clause_type (str): Type tag used as the wrapping key of the document.

        """
        self._clause_type = clause_type
        self._options: dict[str, Any] = {}

    @property
    def clause_type(self) -> str:
        """Return the clause type tag."""
        return self._clause_type

    @property
    def options(self) -> dict[str, Any]:
        """Return a copy of the stored options, list values and groups included."""
        return {name: list(value) if isinstance(value, list) else value for name, value in self._options.items()}

    def set_option(self, name: str, value: Any) -> Self:
        """Store an option value, replacing any previous value.

        `None` leaves the clause untouched so absent optional arguments never
        produce a placeholder key.

        Args:
            name (str): Option name as emitted in the document.
            value (Any): Option value.

        Returns:
            Self: This clause.

        """
        if value is None:
            return self
        self._options[name] = value
        return self

    def get_option(self, name: str, default: Any = None) -> Any:
        """Read back one stored option.

        Args:
            name (str): Option name.
            default (Any): Value returned when the option is not set.

        Returns:
            Any: Stored value or `default`.

        """
        return self._options.get(name, default)

    def has_option(self, name: str) -> bool:
        """Tell whether an option is set."""
        return name in self._options

    def _check_enum(self, value: Any, allowed: Iterable[str] | type[StrEnum], *, param: str) -> str:
        return check_enum(value, allowed, param=param, reference_url=self.reference_url)

    def _document_body(self) -> Any:
        return to_document(self._options)

    def to_dict(self) -> dict[str, Any]:
        """Render the clause document.

        Returns:
            dict[str, Any]: `{clause_type: options}` with nested clauses rendered.

        """
        return {self._clause_type: self._document_body()}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._clause_type!r}, options={self._options!r})"


class ClauseContainer(Clause):
    """A clause holding named groups of child clauses.

    Groups are created lazily on first use. A group holding exactly one clause
    renders as that clause's document, a larger group renders as a list.
    Declared groups render in `group_names` order regardless of call order.
    """

    group_names: ClassVar[tuple[str, ...]] = ()
    member_type: ClassVar[type | tuple[type, ...]] = Clause

    def __init__(self, clause_type: str) -> None:
        """Create an empty container of the given type."""
        super().__init__(clause_type)
        self._group_keys: list[str] = []

    def add_to_group(self, group: str, clauses: Clause | Sequence[Clause]) -> Self:
        """Append one clause or a sequence of clauses to a group.

        Args:
            group (str): Group name.
            clauses (Clause | Sequence[Clause]): Clause or clauses to append.

        Raises:
            InvalidOptionError: If the group is not a declared group.
            TypeMismatchError: If one item is not an instance of `member_type`.

        Returns:
            Self: This container.

        """
        if self.group_names and group not in self.group_names:
            invalid_param("group", self.group_names, group, reference_url=self.reference_url)

        items = list(clauses) if isinstance(clauses, list | tuple) else [clauses]
        for item in items:
            check_type(item, self.member_type)

        if not items:
            return self

        if group not in self._group_keys:
            _logger.debug("Creating group '%s' on '%s' clause", group, self._clause_type)
            self._group_keys.append(group)
            self._options[group] = []
        self._options[group].extend(items)
        return self

    def group(self, name: str) -> list[Clause]:
        """Return a copy of the members of one group."""
        return list(self._options.get(name, [])) if name in self._group_keys else []

    def _ordered_groups(self) -> list[str]:
        if self.group_names:
            return [name for name in self.group_names if name in self._group_keys]
        return list(self._group_keys)

    def _document_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for name in self._ordered_groups():
            members = self._options[name]
            body[name] = to_document(members[0] if len(members) == 1 else members)

        for name, value in self._options.items():
            if name not in self._group_keys:
                body[name] = to_document(value)
        return body
