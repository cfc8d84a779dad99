"""Clause core: validation, serialization and the base clause types."""

from query_dsl.core.clause import Clause, ClauseContainer
from query_dsl.core.rendering import RenderOptions, pretty_print, render_json
from query_dsl.core.serializer import Serializable, to_document
from query_dsl.core.validation import build_value, check_enum, check_type, invalid_param

__all__ = [
    "Clause",
    "ClauseContainer",
    "RenderOptions",
    "Serializable",
    "build_value",
    "check_enum",
    "check_type",
    "invalid_param",
    "pretty_print",
    "render_json",
    "to_document",
]
