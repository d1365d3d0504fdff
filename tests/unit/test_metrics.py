"""Tests for metric resolver."""

from app.models.body import GoverningBody, Group, MetricDef
from engine import metrics


def _body(metric_defs: dict, groups=()) -> GoverningBody:
    return GoverningBody(id="b", metrics=metric_defs, groups=tuple(groups))


class TestDefaultMetric:
    def test_flagged_default_wins(self):
        body = _body({"votes": MetricDef("votes"), "seats": MetricDef("seats", is_default=True)})
        assert metrics.default_metric(body) == "seats"

    def test_first_declared_without_flag(self):
        body = _body({"votes": MetricDef("votes"), "seats": MetricDef("seats")})
        assert metrics.default_metric(body) == "votes"

    def test_no_metrics(self):
        assert metrics.default_metric(_body({})) is None


class TestSum:
    def test_sums_numeric_values(self):
        groups = [Group("a", metrics={"seats": 10}), Group("b", metrics={"seats": 2.5})]
        assert metrics.sum_metric(groups, "seats") == 12.5

    def test_missing_and_non_numeric_count_as_zero(self):
        groups = [
            Group("a", metrics={"seats": 10}),
            Group("b", metrics={}),
            Group("c", metrics={"seats": "12"}),
            Group("d", metrics={"seats": None}),
            Group("e", metrics={"seats": True}),
        ]
        assert metrics.sum_metric(groups, "seats") == 10

    def test_absent_metric_is_zero(self):
        assert metrics.sum_metric([Group("a", metrics={"votes": 5})], "seats") == 0

    def test_empty(self):
        assert metrics.sum_metric([], "seats") == 0


class TestTotal:
    def test_declared_total_overrides_sum(self):
        body = _body({"seats": MetricDef("seats", total=100)}, [Group("a", metrics={"seats": 40})])
        assert metrics.total(body, "seats") == 100

    def test_falls_back_to_sum(self):
        body = _body({"seats": MetricDef("seats")}, [Group("a", metrics={"seats": 40}), Group("b", metrics={"seats": 2})])
        assert metrics.total(body, "seats") == 42

    def test_undeclared_metric_sums_groups(self):
        body = _body({}, [Group("a", metrics={"votes": 7})])
        assert metrics.total(body, "votes") == 7
