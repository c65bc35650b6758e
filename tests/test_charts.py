"""Tests for the plotly figures in :mod:`ui.charts`."""

from __future__ import annotations

from analyzers.orchestrator import analyze
from models import TagRecord
from ui.charts import score_gauge, tag_status_bar, tag_status_donut

URL = "https://example.com/"


def test_gauge_shows_delta_against_coverage_score() -> None:
    fig = score_gauge(45, coverage=0)
    indicator = fig.data[0]

    assert indicator.value == 45
    assert "delta" in indicator.mode
    assert indicator.delta.reference == 0
    assert [step.range[1] for step in indicator.gauge.steps] == [50, 75, 90, 100]


def test_gauge_without_coverage_has_no_delta() -> None:
    assert "delta" not in score_gauge(100).data[0].mode


def test_status_bar_has_one_bar_per_category(make_tags) -> None:
    bar = tag_status_bar(analyze(make_tags(canonical=None))).data[0]

    assert len(bar.y) == 6
    assert bar.x[4] == 0
    assert bar.text[0] == "Optimal"


def test_status_donut_counts_categories(make_tags) -> None:
    fig = tag_status_donut(analyze(make_tags(title="short", canonical=None)))
    pie = fig.data[0]

    assert dict(zip(pie.labels, pie.values)) == {
        "Optimal": 3, "Present": 1, "Needs Improvement": 1, "Missing": 1,
    }
    assert "4/6" in fig.layout.annotations[0].text


def test_empty_head_donut_is_all_missing() -> None:
    pie = tag_status_donut(analyze(TagRecord(url=URL))).data[0]
    assert list(pie.labels) == ["Missing"]
    assert list(pie.values) == [6]
