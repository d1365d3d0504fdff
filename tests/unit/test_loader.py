"""Tests for governing body document loading."""

import json

import pytest

from app.models.body import CountGroupsCondition, SumCondition, ThresholdSpec, UnknownCondition
from engine.metrics import total
from etl.loader import BodyDocumentError, load_body_file, parse_body


class TestParseBody:
    def test_full_document(self, five_party):
        assert five_party.id == "test_body"
        assert five_party.period == "2025-2029"
        assert five_party.country == "Testland"
        assert five_party.metrics["seats"].is_default is True
        assert five_party.metrics["seats"].total == 100
        assert [g.id for g in five_party.groups] == ["a", "b", "c", "d", "e"]

    def test_missing_collections_are_empty(self):
        body = parse_body({"id": "empty"})
        assert body.metrics == {}
        assert body.groups == ()
        assert body.rules == ()
        assert body.metadata == {}

    def test_null_collections_are_empty(self):
        body = parse_body(
            {
                "id": "nulls",
                "metrics": None,
                "groups": [{"id": "a", "metrics": None}],
                "rules": [{"id": "r", "conditions": None}],
                "metadata": None,
            }
        )
        assert body.metrics == {}
        assert body.groups[0].metrics == {}
        assert body.rules[0].conditions == ()

    def test_aliases(self):
        body = parse_body(
            {
                "id": "x",
                "metrics": {"seats": {"label": "Seats", "isDefault": True}},
                "groups": [{"id": "a", "name": "Alpha", "shortName": "A"}],
            }
        )
        assert body.metrics["seats"].is_default
        assert body.groups[0].short_name == "A"
        assert body.groups[0].display_name == "A"

    def test_condition_variants(self):
        body = parse_body(
            {
                "id": "x",
                "rules": [
                    {
                        "id": "r",
                        "conditions": [
                            {"type": "sum", "metric": "seats", "threshold": {"kind": "fractionOfTotal", "value": 0.5}},
                            {"type": "countGroups", "operator": "<=", "value": 3},
                            {"type": "veto"},
                        ],
                    }
                ],
            }
        )
        sum_cond, count_cond, unknown = body.rules[0].conditions

        assert isinstance(sum_cond, SumCondition)
        assert sum_cond.operator == ">="
        assert sum_cond.threshold.kind == "fractionOfTotal"
        assert sum_cond.threshold.offset == 0
        assert isinstance(count_cond, CountGroupsCondition)
        assert count_cond.value == 3
        assert isinstance(unknown, UnknownCondition)
        assert unknown.type == "veto"

    def test_defaults_for_sloppy_values(self):
        body = parse_body(
            {
                "id": "x",
                "period": 2025,
                "metrics": {"seats": {"label": "Seats", "total": "n/a", "isDefault": True}},
                "groups": [{"id": 1, "metrics": {"seats": 7}}, {"id": "b", "metrics": {"seats": 3}}],
                "rules": [
                    {
                        "id": "r",
                        "conditions": [
                            {"type": "sum", "metric": "seats", "threshold": {"value": "half", "offset": None}},
                            {"type": "countGroups"},
                            {"type": "sum", "metric": "seats", "operator": ">", "threshold": 0.5},
                        ],
                    }
                ],
            }
        )
        sum_cond, count_cond, scalar_cond = body.rules[0].conditions

        assert sum_cond.threshold.kind == "absolute"
        assert sum_cond.threshold.value == 0
        assert count_cond.value == 0
        assert count_cond.operator == ">="
        assert scalar_cond.threshold == ThresholdSpec()
        assert scalar_cond.operator == ">"

        assert body.period == "2025"
        assert [g.id for g in body.groups] == ["1", "b"]
        assert body.metrics["seats"].total is None
        assert total(body, "seats") == 10

    def test_non_numeric_metric_kept_verbatim(self):
        body = parse_body({"id": "x", "groups": [{"id": "a", "metrics": {"seats": "n/a"}}]})
        assert body.groups[0].metrics == {"seats": "n/a"}

    def test_top_level_period(self):
        assert parse_body({"id": "x", "period": "2021"}).period == "2021"

    def test_not_an_object(self):
        with pytest.raises(BodyDocumentError):
            parse_body([1, 2, 3])

    def test_group_without_id(self):
        with pytest.raises(BodyDocumentError):
            parse_body({"id": "x", "groups": [{"name": "nameless"}]})


class TestLoadBodyFile:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "body.json"
        path.write_text(json.dumps({"id": "x", "groups": [{"id": "a"}]}), encoding="utf-8")
        assert load_body_file(path).groups[0].id == "a"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "body.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(BodyDocumentError):
            load_body_file(path)
