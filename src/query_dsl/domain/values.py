"""Structured option values embedded verbatim into clause documents."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IncludePartition(BaseModel):
    """Represent a terms aggregation `include` partition filter.

    Args:
        partition: Zero-based partition number to return.
        num_partitions: Total number of partitions.

    """

    model_config = ConfigDict(frozen=True)

    partition: int = Field(ge=0)
    num_partitions: int = Field(ge=1)


class GeoPoint(BaseModel):
    """Represent a latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class Script(BaseModel):
    """Represent an inline script.

    Args:
        source: Script source code.
        lang: Optional script language, engine default when absent.
        params: Optional named script parameters.

    """

    model_config = ConfigDict(frozen=True)

    source: str
    lang: str | None = None
    params: dict[str, Any] | None = None
