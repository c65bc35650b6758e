"""
Meta tag checks: title, description, canonical URL, viewport.
"""
from __future__ import annotations

from analyzers.base import BaseCheck, Rule
from config import (
    DESCRIPTION_MAX_CHARS,
    DESCRIPTION_MIN_CHARS,
    TITLE_MAX_CHARS,
    TITLE_MIN_CHARS,
)
from models import Category, IssueCode, TagStatus


class TitleCheck(BaseCheck):
    category = Category.TITLE

    def rules(self) -> list[Rule]:
        return [
            self.error(
                lambda t: not t.title,
                TagStatus.MISSING, IssueCode.MISSING_TITLE,
                "Missing title tag",
                "Add a descriptive title tag to your page.",
            ),
            self.warning(
                lambda t: len(t.title) < TITLE_MIN_CHARS,
                TagStatus.PARTIAL, IssueCode.TITLE_TOO_SHORT,
                lambda t: f"Title tag is too short ({len(t.title)} chars)",
                f"Make your title tag more descriptive (at least {TITLE_MIN_CHARS} characters).",
            ),
            self.warning(
                lambda t: len(t.title) > TITLE_MAX_CHARS,
                TagStatus.PARTIAL, IssueCode.TITLE_TOO_LONG,
                lambda t: (
                    f"Title tag length ({len(t.title)} chars) exceeds optimal "
                    f"{TITLE_MAX_CHARS} character limit"
                ),
                f"Shorten your title tag to {TITLE_MAX_CHARS} characters or less "
                "for better display in search results.",
            ),
            self.passing(TagStatus.OPTIMAL),
        ]


class DescriptionCheck(BaseCheck):
    category = Category.DESCRIPTION

    def rules(self) -> list[Rule]:
        return [
            self.error(
                lambda t: not t.description,
                TagStatus.MISSING, IssueCode.MISSING_DESCRIPTION,
                "Missing meta description",
                "Add a meta description to improve click-through rates from search results.",
            ),
            self.warning(
                lambda t: len(t.description) < DESCRIPTION_MIN_CHARS,
                TagStatus.PARTIAL, IssueCode.DESCRIPTION_TOO_SHORT,
                lambda t: f"Meta description is too short ({len(t.description)} chars)",
                f"Make your meta description more descriptive (at least {DESCRIPTION_MIN_CHARS} characters).",
            ),
            self.warning(
                lambda t: len(t.description) > DESCRIPTION_MAX_CHARS,
                TagStatus.PARTIAL, IssueCode.DESCRIPTION_TOO_LONG,
                lambda t: (
                    f"Meta description length ({len(t.description)} chars) exceeds optimal "
                    f"{DESCRIPTION_MAX_CHARS} character limit"
                ),
                f"Shorten your meta description to {DESCRIPTION_MAX_CHARS} characters or less "
                "for better display in search results.",
            ),
            self.passing(TagStatus.OPTIMAL),
        ]


class CanonicalCheck(BaseCheck):
    category = Category.CANONICAL

    def rules(self) -> list[Rule]:
        return [
            self.warning(
                lambda t: not t.canonical,
                TagStatus.MISSING, IssueCode.MISSING_CANONICAL,
                "Missing canonical URL",
                "Add a canonical URL tag to prevent duplicate content issues.",
            ),
            self.passing(TagStatus.PRESENT),
        ]


class ViewportCheck(BaseCheck):
    category = Category.VIEWPORT

    def rules(self) -> list[Rule]:
        return [
            self.warning(
                lambda t: not t.viewport,
                TagStatus.MISSING, IssueCode.MISSING_VIEWPORT,
                "Missing viewport meta tag for responsive design",
                "Add a viewport meta tag for better mobile rendering.",
            ),
            self.passing(TagStatus.PRESENT),
        ]
