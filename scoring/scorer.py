"""
Dashboard score calculator.

Scoring model (additive, independent of the rule engine's subtractive score):
- Title:        15 for presence + 10 for 10–60 chars, or 5 for 61–70 chars
- Description:  10 for presence + 10 for 50–160 chars, or 5 for 161–200 chars
- Open Graph:   4 per essential tag present (title, description, image, url, type)
- Twitter:      5 per essential tag present (card, title, description, image)
- Canonical, viewport, robots: 5 each
The two scores are not expected to agree.
"""
from __future__ import annotations

from models import TagRecord
from config import (
    CANONICAL_POINTS,
    DESCRIPTION_LENGTH_POINTS,
    DESCRIPTION_MAX_CHARS,
    DESCRIPTION_MIN_CHARS,
    DESCRIPTION_NEAR_MAX_CHARS,
    DESCRIPTION_PRESENT_POINTS,
    ESSENTIAL_OG_TAGS,
    ESSENTIAL_TWITTER_TAGS,
    MAX_SCORE,
    OG_POINTS_PER_TAG,
    ROBOTS_POINTS,
    TITLE_LENGTH_POINTS,
    TITLE_MAX_CHARS,
    TITLE_MIN_CHARS,
    TITLE_NEAR_MAX_CHARS,
    TITLE_PRESENT_POINTS,
    TWITTER_POINTS_PER_TAG,
    VIEWPORT_POINTS,
)


def calculate_seo_score(tags: TagRecord) -> int:
    """Returns the additive 0–100 score for `tags`."""
    score = 0

    if tags.title:
        score += TITLE_PRESENT_POINTS
        score += _length_points(
            len(tags.title), TITLE_MIN_CHARS, TITLE_MAX_CHARS, TITLE_NEAR_MAX_CHARS, TITLE_LENGTH_POINTS,
        )

    if tags.description:
        score += DESCRIPTION_PRESENT_POINTS
        score += _length_points(
            len(tags.description), DESCRIPTION_MIN_CHARS, DESCRIPTION_MAX_CHARS,
            DESCRIPTION_NEAR_MAX_CHARS, DESCRIPTION_LENGTH_POINTS,
        )

    og_tags = tags.og_tags or {}
    score += OG_POINTS_PER_TAG * sum(1 for key in ESSENTIAL_OG_TAGS if og_tags.get(key))

    twitter_tags = tags.twitter_tags or {}
    score += TWITTER_POINTS_PER_TAG * sum(1 for key in ESSENTIAL_TWITTER_TAGS if twitter_tags.get(key))

    if tags.canonical:
        score += CANONICAL_POINTS
    if tags.viewport:
        score += VIEWPORT_POINTS
    if tags.robots:
        score += ROBOTS_POINTS

    return max(0, min(MAX_SCORE, score))


def _length_points(length: int, low: int, high: int, near_high: int, full: int) -> int:
    if low <= length <= high:
        return full
    elif high < length <= near_high:
        return full // 2
    return 0


def score_label(score: float) -> str:
    if score >= 90:
        return "Excellent"
    elif score >= 75:
        return "Good"
    elif score >= 50:
        return "Needs Work"
    else:
        return "Poor"


def score_color(score: float) -> str:
    if score >= 90:
        return "#00C851"
    elif score >= 75:
        return "#FFD700"
    elif score >= 50:
        return "#FF8800"
    else:
        return "#FF4444"
