"""
Social sharing checks: Open Graph and Twitter Card tags.
"""
from __future__ import annotations

from typing import Mapping, Optional

from analyzers.base import BaseCheck, Rule
from config import ESSENTIAL_OG_TAGS, ESSENTIAL_TWITTER_TAGS
from models import Category, IssueCode, TagStatus


def missing_essentials(found: Optional[Mapping[str, str]], essentials: tuple[str, ...]) -> list[str]:
    """Essential keys absent (or empty) in `found`, in essential-set order."""
    found = found or {}
    return [key for key in essentials if not found.get(key)]


class OpenGraphCheck(BaseCheck):
    category = Category.OPEN_GRAPH

    def rules(self) -> list[Rule]:
        def missing(t) -> list[str]:
            return missing_essentials(t.og_tags, ESSENTIAL_OG_TAGS)

        return [
            self.error(
                lambda t: not t.og_tags,
                TagStatus.MISSING, IssueCode.MISSING_OG_TAGS,
                "Missing Open Graph meta tags for social sharing",
                "Add Open Graph meta tags to improve sharing on social media platforms like Facebook.",
            ),
            self.warning(
                lambda t: bool(missing(t)),
                TagStatus.PARTIAL, IssueCode.INCOMPLETE_OG_TAGS,
                lambda t: f"Missing essential Open Graph tags: {', '.join(missing(t))}",
                lambda t: f"Add missing Open Graph tags: {', '.join(missing(t))}.",
            ),
            self.passing(TagStatus.OPTIMAL),
        ]


class TwitterCardCheck(BaseCheck):
    category = Category.TWITTER

    def rules(self) -> list[Rule]:
        def missing(t) -> list[str]:
            return missing_essentials(t.twitter_tags, ESSENTIAL_TWITTER_TAGS)

        return [
            self.error(
                lambda t: not t.twitter_tags,
                TagStatus.MISSING, IssueCode.MISSING_TWITTER_TAGS,
                "Missing Twitter Card meta tags for social sharing",
                "Add Twitter Card meta tags to improve sharing on Twitter.",
            ),
            self.warning(
                lambda t: bool(missing(t)),
                TagStatus.PARTIAL, IssueCode.INCOMPLETE_TWITTER_TAGS,
                lambda t: f"Missing essential Twitter Card tags: {', '.join(missing(t))}",
                lambda t: f"Add missing Twitter Card tags: {', '.join(missing(t))}.",
            ),
            self.passing(TagStatus.OPTIMAL),
        ]
