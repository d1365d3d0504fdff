"""Shared fixtures."""

import pytest
from loguru import logger

from etl.loader import parse_body

MAJORITY = {
    "id": "absolute_majority",
    "name": "Absolute majority",
    "conditions": [
        {
            "type": "sum",
            "metric": "seats",
            "operator": ">=",
            "threshold": {"kind": "fractionOfTotal", "value": 0.5, "offset": 1},
        }
    ],
}


@pytest.fixture
def make_body():
    """Factory: body with one 'seats' metric and the given group seats."""

    def factory(seats: dict, rules: list | None = None, total=None, **extra):
        doc = {
            "id": extra.pop("id", "test_body"),
            "name": "Test body",
            "metadata": {"period": "2025-2029", "country": "Testland"},
            "metrics": {"seats": {"label": "Seats", "unit": "seats", "total": total, "isDefault": True}},
            "groups": [{"id": gid, "name": gid.upper(), "metrics": {"seats": s}} for gid, s in seats.items()],
            "rules": [MAJORITY] if rules is None else rules,
        }
        doc.update(extra)
        return parse_body(doc)

    return factory


@pytest.fixture
def five_party(make_body):
    """A=30, B=25, C=20, D=15, E=10; majority needs 51."""
    return make_body({"a": 30, "b": 25, "c": 20, "d": 15, "e": 10}, total=100)


@pytest.fixture
def warnings():
    """Messages logged at WARNING or above during the test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
