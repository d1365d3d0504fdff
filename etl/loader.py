"""Governing body document loading - JSON schema to domain entities."""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from app.models.body import (
    ABSOLUTE,
    COUNT_GROUPS,
    SUM,
    CountGroupsCondition,
    GoverningBody,
    Group,
    MetricDef,
    Rule,
    SumCondition,
    ThresholdSpec,
    UnknownCondition,
)
from body_client.schemas import ConditionSchema, GoverningBodySchema, ThresholdSchema

DEFAULT_OPERATOR = ">="


class BodyDocumentError(ValueError):
    """Document cannot be read as a governing body."""


def _number(value: Any, default: float = 0) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value


def _threshold(schema: ThresholdSchema | None) -> ThresholdSpec:
    if schema is None:
        return ThresholdSpec()
    return ThresholdSpec(
        kind=schema.kind or ABSOLUTE,
        value=_number(schema.value),
        offset=_number(schema.offset),
        metric=schema.metric,
    )


def _condition(schema: ConditionSchema):
    operator = schema.operator or DEFAULT_OPERATOR
    if schema.type == SUM:
        return SumCondition(metric=schema.metric, operator=operator, threshold=_threshold(schema.threshold))
    if schema.type == COUNT_GROUPS:
        return CountGroupsCondition(operator=operator, value=_number(schema.value))
    return UnknownCondition(type=schema.type)


def body_from_schema(schema: GoverningBodySchema) -> GoverningBody:
    """Convert a validated document into a governing body."""
    metadata = dict(schema.metadata)
    if schema.period and "period" not in metadata:
        metadata["period"] = schema.period

    return GoverningBody(
        id=schema.id,
        name=schema.name,
        metadata=metadata,
        metrics={
            metric_id: MetricDef(
                id=metric_id,
                label=m.label,
                unit=m.unit,
                total=m.total,
                is_default=m.is_default,
            )
            for metric_id, m in schema.metrics.items()
        },
        groups=tuple(
            Group(
                id=g.id,
                name=g.name,
                short_name=g.short_name,
                metrics=dict(g.metrics),
                metadata=dict(g.metadata),
            )
            for g in schema.groups
        ),
        rules=tuple(
            Rule(id=r.id, name=r.name, conditions=tuple(_condition(c) for c in r.conditions))
            for r in schema.rules
        ),
    )


def parse_body(doc: Any) -> GoverningBody:
    """Parse a governing body from a decoded JSON document."""
    if not isinstance(doc, dict):
        raise BodyDocumentError(f"Expected JSON object, got {type(doc).__name__}")

    try:
        schema = GoverningBodySchema.model_validate(doc)
    except ValidationError as e:
        raise BodyDocumentError(f"Invalid governing body {doc.get('id')!r}: {e}") from e

    body = body_from_schema(schema)
    logger.debug(
        "Parsed body {}: {} metrics, {} groups, {} rules",
        body.id,
        len(body.metrics),
        len(body.groups),
        len(body.rules),
    )
    return body


def load_body_file(path: Path) -> GoverningBody:
    """Read and parse a governing body JSON file."""
    try:
        doc = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise BodyDocumentError(f"{path} is not valid JSON: {e}") from e
    return parse_body(doc)
