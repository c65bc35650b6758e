"""
HTML parser that turns raw HTML into a TagRecord.

Extraction is tolerant: anything missing or unparsable simply leaves the
corresponding field as None. Nothing here raises on bad markup.
"""
from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from config import CLAIMED_META_NAMES
from models import OtherTag, TagRecord

logger = logging.getLogger(__name__)

_OG_PREFIX = "og:"
_TWITTER_PREFIX = "twitter:"


def extract_tags(html: str, source_url: str) -> TagRecord:
    """
    Parse `html` (fetched from `source_url`) into a TagRecord.
    Canonical and social URLs are kept verbatim, not resolved.
    """
    soup = _make_soup(html or "")

    named = _parse_named_meta(soup)
    og_tags = _parse_prefixed(soup, "property", _OG_PREFIX)
    twitter_tags = _parse_prefixed(soup, "name", _TWITTER_PREFIX)
    other_tags = _parse_other_tags(soup)

    record = TagRecord(
        url=source_url,
        title=_parse_title(soup),
        description=named.get("description"),
        canonical=_parse_canonical(soup),
        viewport=named.get("viewport"),
        robots=named.get("robots"),
        charset=_parse_charset(soup),
        language=named.get("language"),
        author=named.get("author"),
        og_tags=og_tags or None,
        twitter_tags=twitter_tags or None,
        other_tags=tuple(other_tags) or None,
    )

    logger.debug(
        "Extracted tags from %s: title=%r og=%d twitter=%d other=%d",
        source_url, record.title, len(og_tags), len(twitter_tags), len(other_tags),
    )
    return record


def _make_soup(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except Exception:
        logger.debug("lxml parser unavailable or failed, falling back to html.parser")
        return BeautifulSoup(html, "html.parser")


# ── Title / canonical / charset ───────────────────────────────────────────────

def _parse_title(soup: BeautifulSoup) -> Optional[str]:
    title_tag = soup.find("title")
    if not title_tag:
        return None
    text = title_tag.get_text().strip()
    return text or None


def _parse_canonical(soup: BeautifulSoup) -> Optional[str]:
    canonical_tag = soup.find("link", rel=_has_rel("canonical"))
    if canonical_tag is None:
        return None
    href = _attr(canonical_tag, "href")
    return href.strip() if href is not None else None


def _parse_charset(soup: BeautifulSoup) -> Optional[str]:
    meta = soup.find("meta", charset=True)
    if meta is None:
        return None
    return _attr(meta, "charset").strip()


def _has_rel(value: str):
    def match(rel) -> bool:
        if not rel:
            return False
        values = rel if isinstance(rel, list) else str(rel).split()
        return value in (v.lower() for v in values)
    return match


# ── Meta tags ─────────────────────────────────────────────────────────────────

def _parse_named_meta(soup: BeautifulSoup) -> dict[str, Optional[str]]:
    """
    `content` of the first <meta name=...> for each claimed name, stripped.
    A first element without `content` leaves the field absent.
    """
    found: dict[str, Optional[str]] = {}
    for meta in soup.find_all("meta"):
        name = (_attr(meta, "name") or "").strip().lower()
        if name not in CLAIMED_META_NAMES or name in found:
            continue
        content = _attr(meta, "content")
        found[name] = content.strip() if content is not None else None
    return found


def _parse_prefixed(soup: BeautifulSoup, attribute: str, prefix: str) -> dict[str, str]:
    """
    Collect <meta {attribute}="{prefix}X" content=...> as {X: content}.
    First occurrence of a key wins; empty content is skipped.
    """
    out: dict[str, str] = {}
    for meta in soup.find_all("meta"):
        key = (_attr(meta, attribute) or "").strip().lower()
        if not key.startswith(prefix):
            continue
        suffix = key[len(prefix):]
        content = (_attr(meta, "content") or "").strip()
        if not suffix or not content or suffix in out:
            continue
        out[suffix] = content
    return out


def _parse_other_tags(soup: BeautifulSoup) -> list[OtherTag]:
    other: list[OtherTag] = []
    for meta in soup.find_all("meta"):
        content = (_attr(meta, "content") or "").strip()
        if not content:
            continue

        name = (_attr(meta, "name") or "").strip()
        prop = (_attr(meta, "property") or "").strip()

        if name and not _is_claimed_name(name):
            other.append(OtherTag(name=name, content=content))
        elif prop and not prop.lower().startswith(_OG_PREFIX):
            other.append(OtherTag(name=prop, content=content))
    return other


def _is_claimed_name(name: str) -> bool:
    lowered = name.lower()
    return lowered in CLAIMED_META_NAMES or lowered.startswith(_TWITTER_PREFIX)


def _attr(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)
