"""Governing body document schemas - config index and body JSON."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


def _as_str(v):
    """Numeric ids and periods are kept as their string form."""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


class ConfigEntrySchema(BaseModel):
    """Discovered config file."""

    file: str
    label: str


class ThresholdSchema(BaseModel):
    """Threshold spec. Non-numeric value/offset are kept and read as 0 later."""

    kind: str | None = None
    value: Any = None
    offset: Any = None
    metric: str | None = None


class ConditionSchema(BaseModel):
    """Rule condition (``sum`` or ``countGroups``)."""

    type: str | None = None
    metric: str | None = None
    operator: str | None = None
    threshold: ThresholdSchema | None = None
    value: Any = None

    @field_validator("threshold", mode="before")
    @classmethod
    def _threshold_object(cls, v):
        return v if isinstance(v, dict) else None


class RuleSchema(BaseModel):
    """Named rule."""

    id: str | None = None
    name: str | None = None
    conditions: list[ConditionSchema] = []

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return _as_str(v)

    @field_validator("conditions", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v


class MetricSchema(BaseModel):
    """Metric definition."""

    label: str | None = None
    unit: str | None = None
    total: int | float | None = None
    is_default: bool = Field(alias="isDefault", default=False)

    class Config:
        populate_by_name = True

    @field_validator("total", mode="before")
    @classmethod
    def _numeric_total(cls, v):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        return v


class GroupSchema(BaseModel):
    """Group (party, faction, block)."""

    id: str
    name: str | None = None
    short_name: str | None = Field(alias="shortName", default=None)
    metrics: dict[str, Any] = {}
    metadata: dict[str, Any] = {}

    class Config:
        populate_by_name = True

    @field_validator("metrics", "metadata", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return {} if v is None else v

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return _as_str(v)


class GoverningBodySchema(BaseModel):
    """Governing body document."""

    id: str | None = None
    name: str | None = None
    period: str | None = None
    metadata: dict[str, Any] = {}
    metrics: dict[str, MetricSchema] = {}
    groups: list[GroupSchema] = []
    rules: list[RuleSchema] = []

    @field_validator("id", "period", mode="before")
    @classmethod
    def _stringify(cls, v):
        return _as_str(v)

    @field_validator("metadata", mode="before")
    @classmethod
    def _none_as_empty_dict(cls, v):
        return {} if v is None else v

    @field_validator("metrics", mode="before")
    @classmethod
    def _none_metrics_as_empty(cls, v):
        if isinstance(v, dict):
            return {k: ({} if d is None else d) for k, d in v.items()}
        return {} if v is None else v

    @field_validator("groups", "rules", mode="before")
    @classmethod
    def _none_as_empty_list(cls, v):
        return [] if v is None else v
