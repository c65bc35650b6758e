"""Tests for the additive dashboard score in :mod:`scoring.scorer`."""

from __future__ import annotations

import pytest

from models import TagRecord
from scoring.scorer import calculate_seo_score, score_color, score_label

URL = "https://example.com/"


def test_empty_record_scores_zero() -> None:
    assert calculate_seo_score(TagRecord(url=URL)) == 0


def test_complete_record_scores_100(make_tags) -> None:
    assert calculate_seo_score(make_tags()) == 100


@pytest.mark.parametrize("length, expected", [
    (5, 15),
    (10, 25),
    (60, 25),
    (61, 20),
    (70, 20),
    (71, 15),
])
def test_title_points(length, expected) -> None:
    assert calculate_seo_score(TagRecord(url=URL, title="x" * length)) == expected


@pytest.mark.parametrize("length, expected", [
    (49, 10),
    (50, 20),
    (160, 20),
    (161, 15),
    (200, 15),
    (201, 10),
])
def test_description_points(length, expected) -> None:
    assert calculate_seo_score(TagRecord(url=URL, description="x" * length)) == expected


def test_social_points_per_essential_tag() -> None:
    tags = TagRecord(
        url=URL,
        og_tags={"title": "a", "image": "b", "site_name": "ignored"},
        twitter_tags={"card": "summary"},
    )
    assert calculate_seo_score(tags) == 2 * 4 + 5


def test_canonical_viewport_robots_five_each() -> None:
    tags = TagRecord(url=URL, canonical="https://example.com/", viewport="w", robots="index")
    assert calculate_seo_score(tags) == 15


def test_empty_strings_earn_nothing() -> None:
    tags = TagRecord(url=URL, title="", description="", canonical="", viewport="", robots="")
    assert calculate_seo_score(tags) == 0


def test_additive_score_differs_from_rule_engine_for_empty_head() -> None:
    from analyzers.orchestrator import analyze

    tags = TagRecord(url=URL)
    assert calculate_seo_score(tags) == 0
    assert analyze(tags).score == 45


@pytest.mark.parametrize("score, label", [
    (100, "Excellent"), (90, "Excellent"), (89, "Good"), (75, "Good"),
    (74, "Needs Work"), (50, "Needs Work"), (49, "Poor"), (0, "Poor"),
])
def test_score_label(score, label) -> None:
    assert score_label(score) == label


def test_score_color_bands() -> None:
    assert score_color(95) == "#00C851"
    assert score_color(10) == "#FF4444"
