"""Shared fixtures: HTML documents and TagRecords in known states."""

from __future__ import annotations

import pytest

from models import FetchResult, TagRecord

OG_COMPLETE = {
    "title": "Example Domain Home",
    "description": "An example page used in documentation.",
    "image": "https://example.com/og.png",
    "url": "https://example.com/",
    "type": "website",
}

TWITTER_COMPLETE = {
    "card": "summary_large_image",
    "title": "Example Domain Home",
    "description": "An example page used in documentation.",
    "image": "https://example.com/tw.png",
}


@pytest.fixture
def make_tags():
    """Factory for a fully optimal TagRecord; keyword overrides replace fields."""

    def _make(**overrides) -> TagRecord:
        fields = dict(
            url="https://example.com/",
            title="T" * 55,
            description="D" * 120,
            canonical="https://example.com/",
            viewport="width=device-width, initial-scale=1",
            robots="index, follow",
            og_tags=dict(OG_COMPLETE),
            twitter_tags=dict(TWITTER_COMPLETE),
        )
        fields.update(overrides)
        return TagRecord(**fields)

    return _make


@pytest.fixture
def complete_html() -> str:
    og = "\n".join(
        f'<meta property="og:{k}" content="{v}">' for k, v in OG_COMPLETE.items()
    )
    tw = "\n".join(
        f'<meta name="twitter:{k}" content="{v}">' for k, v in TWITTER_COMPLETE.items()
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>  {"T" * 55}  </title>
  <meta name="description" content="{"D" * 120}">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="robots" content="index, follow">
  <meta name="author" content="Jane Doe">
  <meta name="language" content="en">
  <link rel="canonical" href="https://example.com/">
  {og}
  {tw}
  <meta name="generator" content="Hugo 0.120">
</head>
<body><p>Hello</p></body>
</html>"""


@pytest.fixture
def fake_fetch():
    """Factory for a fetch callable that returns a canned FetchResult and records calls."""

    def _make(body: str = "<html><head></head></html>", ok: bool = True,
              status_code: int = 200, status_text: str = "OK", final_url: str = ""):
        calls: list[str] = []

        def fetch(url, session=None):
            calls.append(url)
            return FetchResult(
                url=url,
                status_ok=ok,
                status_code=status_code,
                status_text=status_text,
                body=body if ok else "",
                final_url=final_url or url,
            )

        fetch.calls = calls
        return fetch

    return _make
