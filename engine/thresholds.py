"""Threshold resolver - turns a threshold spec into a number."""

from collections.abc import Sequence

from loguru import logger

from app.models.body import ABSOLUTE, FRACTION_OF_TOTAL, PERCENTAGE, GoverningBody, Group, ThresholdSpec
from engine.metrics import total


def resolve(
    spec: ThresholdSpec,
    metric_id: str | None,
    body: GoverningBody,
    groups: Sequence[Group] | None = None,
) -> float:
    """Concrete threshold value for ``metric_id``.

    - ``absolute``: value + offset
    - ``percentage``: value + offset, compared as-is (the compared sum must
      itself be a percentage; no normalization happens here)
    - ``fractionOfTotal``: value * total(spec.metric or metric_id) + offset

    Unknown kinds resolve like ``absolute``.
    """
    if spec.kind == FRACTION_OF_TOTAL:
        return spec.value * total(body, spec.metric or metric_id, groups) + spec.offset

    if spec.kind not in (PERCENTAGE, ABSOLUTE):
        logger.warning("Unknown threshold kind {!r}, treating as absolute", spec.kind)

    return spec.value + spec.offset
