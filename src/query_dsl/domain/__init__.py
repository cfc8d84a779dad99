"""Domain value types for query-dsl-builder."""

from query_dsl.domain.enums import (
    BoostMode,
    CollectMode,
    DecayMode,
    FieldValueModifier,
    FunctionScoreMode,
    GapPolicy,
    JoinScoreMode,
    MultiValueMode,
    Operator,
    SortMode,
    SortOrder,
)
from query_dsl.domain.values import GeoPoint, IncludePartition, Script

__all__ = [
    "BoostMode",
    "CollectMode",
    "DecayMode",
    "FieldValueModifier",
    "FunctionScoreMode",
    "GapPolicy",
    "GeoPoint",
    "IncludePartition",
    "JoinScoreMode",
    "MultiValueMode",
    "Operator",
    "Script",
    "SortMode",
    "SortOrder",
]
