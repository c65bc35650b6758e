"""Tests for URL handling and :class:`storage.cache.AnalysisCache`."""

from __future__ import annotations

import pytest

from analyzers.orchestrator import analyze
from crawler.parser import extract_tags
from crawler.urls import normalize_url, validate_url
from errors import InputError
from models import TagRecord
from storage.cache import AnalysisCache


@pytest.mark.parametrize("raw, expected", [
    ("https://example.com", "https://example.com/"),
    ("HTTPS://Example.COM/Path", "https://example.com/Path"),
    ("https://example.com:443/a", "https://example.com/a"),
    ("http://example.com:80/a", "http://example.com/a"),
    ("http://example.com:8080/a", "http://example.com:8080/a"),
    ("https://example.com:80/a", "https://example.com:80/a"),
    ("https://example.com/a?q=1#section", "https://example.com/a?q=1"),
    ("https://example.com/a/", "https://example.com/a/"),
])
def test_normalize_url(raw, expected) -> None:
    assert normalize_url(raw) == expected


@pytest.mark.parametrize("bad", [
    "",
    "   ",
    "example.com",
    "ftp://example.com/file",
    "https://",
    "https://exa mple.com",
    "https://example.com:notaport/",
    "javascript:alert(1)",
])
def test_validate_url_rejects_malformed_input(bad) -> None:
    with pytest.raises(InputError):
        validate_url(bad)


def test_validate_url_strips_whitespace() -> None:
    assert validate_url("  https://example.com/x  ") == "https://example.com/x"


def _analysis(url: str):
    return analyze(TagRecord(url=url))


def test_put_then_get_returns_same_analysis() -> None:
    store = AnalysisCache()
    analysis = _analysis("https://example.com/")

    assert store.put("https://example.com/", analysis) is analysis
    assert store.get("https://example.com/") is analysis


def test_equivalent_urls_share_one_entry() -> None:
    store = AnalysisCache()
    analysis = _analysis("https://example.com/")
    store.put("https://example.com", analysis)

    assert store.get("https://EXAMPLE.com:443/") is analysis
    assert store.get("https://example.com/#top") is analysis
    assert "https://example.com" in store
    assert len(store) == 1


def test_get_on_unknown_url_returns_none() -> None:
    assert AnalysisCache().get("https://example.com/") is None


def test_last_write_wins() -> None:
    store = AnalysisCache()
    first = _analysis("https://example.com/")
    second = analyze(TagRecord(url="https://example.com/", title="A newer page title"))

    store.put("https://example.com/", first)
    store.put("https://example.com/", second)

    assert store.get("https://example.com/") is second
    assert len(store) == 1


def test_recent_keeps_insertion_order_and_limit() -> None:
    store = AnalysisCache()
    urls = [f"https://example.com/{i}" for i in range(5)]
    for url in urls:
        store.put(url, _analysis(url))

    assert [a.url for a in store.recent(3)] == urls[:3]
    assert len(store.recent()) == 5

    store.clear()
    assert len(store) == 0


def test_cached_record_cannot_be_mutated() -> None:
    html = "<head>" + "".join(
        f'<meta property="og:{key}" content="{key} value">'
        for key in ("title", "description", "image", "url", "type")
    ) + "</head>"
    store = AnalysisCache()
    analysis = analyze(extract_tags(html, "https://example.com/"))
    store.put("https://example.com/", analysis)

    with pytest.raises(TypeError):
        analysis.tags.og_tags.clear()
    with pytest.raises(TypeError):
        analysis.tags.og_tags["title"] = "changed"

    cached = store.get("https://example.com/")
    assert cached.tags.og_tags["title"] == "title value"
    assert len(cached.tags.og_tags) == 5
    assert hash(cached) == hash(analysis)


def test_record_does_not_share_the_callers_dict() -> None:
    og = {"title": "Original"}
    tags = TagRecord(url="https://example.com/", og_tags=og, twitter_tags={})
    og["title"] = "changed"

    assert tags.og_tags == {"title": "Original"}
    assert tags.twitter_tags is None
