"""Typed enumerations for option values with a closed set of choices."""

from __future__ import annotations

from enum import StrEnum


class SortOrder(StrEnum):
    """Represent sort and bucket order directions."""

    ASC = "asc"
    DESC = "desc"


class SortMode(StrEnum):
    """Represent how multi-valued fields are reduced before sorting."""

    MIN = "min"
    MAX = "max"
    SUM = "sum"
    AVG = "avg"
    MEDIAN = "median"


class Operator(StrEnum):
    """Represent boolean operators used by full-text queries."""

    AND = "and"
    OR = "or"


class CollectMode(StrEnum):
    """Represent terms aggregation collection strategies."""

    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"


class GapPolicy(StrEnum):
    """Represent pipeline aggregation policies for missing buckets."""

    SKIP = "skip"
    INSERT_ZEROS = "insert_zeros"
    KEEP_VALUES = "keep_values"


class JoinScoreMode(StrEnum):
    """Represent how joining queries fold child scores into the parent."""

    NONE = "none"
    SUM = "sum"
    AVG = "avg"
    MAX = "max"
    MIN = "min"


class FunctionScoreMode(StrEnum):
    """Represent how function_score combines individual function scores."""

    MULTIPLY = "multiply"
    SUM = "sum"
    AVG = "avg"
    FIRST = "first"
    MAX = "max"
    MIN = "min"


class BoostMode(StrEnum):
    """Represent how function_score combines the query and function scores."""

    MULTIPLY = "multiply"
    REPLACE = "replace"
    SUM = "sum"
    AVG = "avg"
    MAX = "max"
    MIN = "min"


class FieldValueModifier(StrEnum):
    """Represent modifiers applied by field_value_factor score functions."""

    NONE = "none"
    LOG = "log"
    LOG1P = "log1p"
    LOG2P = "log2p"
    LN = "ln"
    LN1P = "ln1p"
    LN2P = "ln2p"
    SQUARE = "square"
    SQRT = "sqrt"
    RECIPROCAL = "reciprocal"


class DecayMode(StrEnum):
    """Represent decay function curves."""

    GAUSS = "gauss"
    EXP = "exp"
    LINEAR = "linear"


class MultiValueMode(StrEnum):
    """Represent how decay functions pick a value from multi-valued fields."""

    MIN = "min"
    MAX = "max"
    AVG = "avg"
    SUM = "sum"
