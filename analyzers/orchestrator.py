"""
Runs every category check over a TagRecord and assembles the Analysis.
"""
from __future__ import annotations

import logging

from models import Analysis, Category, Issue, TagRecord, TagSummaryEntry
from errors import InvariantViolation
from config import MAX_SCORE

from analyzers.base import BaseCheck
from analyzers.meta import CanonicalCheck, DescriptionCheck, TitleCheck, ViewportCheck
from analyzers.social import OpenGraphCheck, TwitterCardCheck

logger = logging.getLogger(__name__)


# Evaluation order is also the order of issues, recommendations and tag summary
CHECKS: list[BaseCheck] = [
    TitleCheck(),
    DescriptionCheck(),
    OpenGraphCheck(),
    TwitterCardCheck(),
    CanonicalCheck(),
    ViewportCheck(),
]


def analyze(tags: TagRecord) -> Analysis:
    """
    Evaluate `tags` against every check and return the Analysis.
    Pure: the same TagRecord always yields an equal Analysis.
    """
    score = MAX_SCORE
    issues: list[Issue] = []
    recommendations: list[str] = []
    tag_summary: list[TagSummaryEntry] = []

    for check in CHECKS:
        outcome = check.evaluate(tags)
        tag_summary.append(TagSummaryEntry(name=outcome.category, status=outcome.status))
        if outcome.issue is not None:
            issues.append(outcome.issue)
            recommendations.append(outcome.recommendation)
            score -= outcome.penalty

    _check_invariants(score, issues, recommendations, tag_summary)
    score = max(0, min(MAX_SCORE, score))

    logger.debug("Analysed %s: score=%d issues=%d", tags.url, score, len(issues))

    return Analysis(
        url=tags.url,
        tags=tags,
        score=score,
        issues=tuple(issues),
        recommendations=tuple(recommendations),
        tag_summary=tuple(tag_summary),
    )


def _check_invariants(
    score: int,
    issues: list[Issue],
    recommendations: list[str],
    tag_summary: list[TagSummaryEntry],
) -> None:
    if not 0 <= score <= MAX_SCORE:
        raise InvariantViolation(f"Score {score} outside 0–{MAX_SCORE} before clamping")

    names = [entry.name for entry in tag_summary]
    if names != Category.ALL:
        raise InvariantViolation(f"Tag summary must cover {Category.ALL}, got {names}")

    if len(recommendations) != len(issues):
        raise InvariantViolation(
            f"{len(issues)} issues but {len(recommendations)} recommendations"
        )

    codes = [issue.code for issue in issues]
    if len(set(codes)) != len(codes):
        raise InvariantViolation(f"Duplicate issue codes: {codes}")
