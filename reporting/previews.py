"""
Display helpers for the search and social previews and the category overview.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from html import escape
from typing import Optional

from config import (
    DESCRIPTION_MAX_CHARS,
    DESCRIPTION_MIN_CHARS,
    TITLE_MAX_CHARS,
    TITLE_MIN_CHARS,
)
from models import Analysis, Category, TagRecord, TagStatus


def truncate_text(text: Optional[str], max_length: int) -> str:
    if not text:
        return ""
    return text[:max_length] + "..." if len(text) > max_length else text


def format_display_url(url: Optional[str]) -> str:
    """Strip the protocol and a trailing slash."""
    if not url:
        return ""
    return re.sub(r"/$", "", re.sub(r"^https?://", "", url))


def length_status(value: Optional[str], low: int, high: int) -> str:
    if not value:
        return "Missing"
    length = len(value)
    if length < low:
        return f"Too short ({length} characters)"
    if length > high:
        return f"Too long ({length} characters)"
    return f"Good ({length} characters)"


def title_status(tags: TagRecord) -> str:
    return length_status(tags.title, TITLE_MIN_CHARS, TITLE_MAX_CHARS)


def description_status(tags: TagRecord) -> str:
    return length_status(tags.description, DESCRIPTION_MIN_CHARS, DESCRIPTION_MAX_CHARS)


def canonical_status(tags: TagRecord) -> str:
    return "Present" if tags.canonical else "Missing"


# ── Tag HTML snippets ──────────────────────────────────────────────────────────

def title_tag_html(tags: TagRecord) -> str:
    return f"<title>{escape(tags.title, quote=False)}</title>" if tags.title else ""


def description_tag_html(tags: TagRecord) -> str:
    return f'<meta name="description" content="{escape(tags.description)}">' if tags.description else ""


def canonical_tag_html(tags: TagRecord) -> str:
    return f'<link rel="canonical" href="{escape(tags.canonical)}">' if tags.canonical else ""


def og_tags_html(tags: TagRecord) -> list[str]:
    return [
        f'<meta property="og:{key}" content="{escape(value)}">'
        for key, value in (tags.og_tags or {}).items()
    ]


def twitter_tags_html(tags: TagRecord) -> list[str]:
    return [
        f'<meta name="twitter:{key}" content="{escape(value)}">'
        for key, value in (tags.twitter_tags or {}).items()
    ]


def example_twitter_tags_html(tags: TagRecord) -> list[str]:
    """Suggested Twitter Card markup for a page that has none."""
    return [
        '<meta name="twitter:card" content="summary_large_image">',
        f'<meta name="twitter:title" content="{escape(tags.title or "Page Title")}">',
        f'<meta name="twitter:description" content="{escape(tags.description or "Page description")}">',
        '<meta name="twitter:image" content="https://example.com/images/twitter-image.jpg">',
    ]


# ── Social card ────────────────────────────────────────────────────────────────

@dataclass
class SocialCard:
    title: str
    description: str
    image: Optional[str]
    domain: str


def facebook_card(tags: TagRecord) -> SocialCard:
    og = tags.og_tags or {}
    return SocialCard(
        title=og.get("title") or tags.title or "No title available",
        description=og.get("description") or tags.description or "No description available",
        image=og.get("image"),
        domain=format_display_url(tags.url) or "example.com",
    )


def twitter_card(tags: TagRecord) -> SocialCard:
    tw = tags.twitter_tags or {}
    og = tags.og_tags or {}
    return SocialCard(
        title=tw.get("title") or og.get("title") or tags.title or "No title available",
        description=tw.get("description") or og.get("description") or tags.description
        or "No description available",
        image=tw.get("image") or og.get("image"),
        domain=format_display_url(tags.url) or "example.com",
    )


# ── Category overview ──────────────────────────────────────────────────────────

def _present(value) -> str:
    return TagStatus.PRESENT if value else TagStatus.MISSING


def category_groups(analysis: Analysis) -> dict[str, list[tuple[str, str]]]:
    """
    Group tag verdicts into Core / Social / Technical sections for the overview.
    Returns {section title: [(item name, status), ...]}.
    """
    tags = analysis.tags
    og = tags.og_tags or {}

    if og.get("title") and og.get("description"):
        social_text = TagStatus.PRESENT
    elif og.get("title") or og.get("description"):
        social_text = TagStatus.PARTIAL
    else:
        social_text = TagStatus.MISSING

    return {
        "Core SEO Elements": [
            ("Title Tag",        analysis.status_of(Category.TITLE)),
            ("Meta Description", analysis.status_of(Category.DESCRIPTION)),
            ("Canonical URL",    analysis.status_of(Category.CANONICAL)),
            ("Robots Directive", _present(tags.robots)),
        ],
        "Social Media Optimization": [
            ("Open Graph Tags",            analysis.status_of(Category.OPEN_GRAPH)),
            ("Twitter Cards",              analysis.status_of(Category.TWITTER)),
            ("OG Image",                   _present(og.get("image"))),
            ("Social Title & Description", social_text),
        ],
        "Technical SEO": [
            ("Viewport Meta Tag",  TagStatus.OPTIMAL if tags.viewport else TagStatus.MISSING),
            ("Character Encoding", _present(tags.charset)),
            ("Language",           _present(tags.language)),
            ("Author Metadata",    _present(tags.author)),
        ],
    }
