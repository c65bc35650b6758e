"""Tests for exports and preview helpers in :mod:`reporting`."""

from __future__ import annotations

import json

from analyzers.orchestrator import analyze
from models import OtherTag, TagRecord, TagStatus
from reporting.exporter import (
    issues_to_df,
    tag_summary_df,
    tags_to_df,
    to_csv_bytes,
    to_json_bytes,
)
from reporting.previews import (
    category_groups,
    description_status,
    example_twitter_tags_html,
    facebook_card,
    format_display_url,
    og_tags_html,
    title_status,
    truncate_text,
    twitter_card,
)

URL = "https://example.com/"


def test_issues_df_pairs_issue_with_recommendation() -> None:
    analysis = analyze(TagRecord(url=URL))
    df = issues_to_df(analysis)

    assert len(df) == 6
    assert df.loc[0, "Code"] == "missing_title"
    assert df.loc[0, "Severity"] == "ERROR"
    assert df.loc[0, "Issue"] == "Missing Title"
    assert df.loc[0, "Recommendation"] == "Add a descriptive title tag to your page."


def test_issues_df_empty_for_perfect_page(make_tags) -> None:
    df = issues_to_df(analyze(make_tags()))
    assert df.empty
    assert "Recommendation" in df.columns


def test_tag_summary_df_has_six_rows(make_tags) -> None:
    df = tag_summary_df(analyze(make_tags(canonical=None)))

    assert df["Category"].tolist()[-2:] == ["Canonical", "Viewport"]
    assert df.loc[4, "Status"] == "Missing"
    assert len(df) == 6


def test_tags_df_flattens_all_groups() -> None:
    tags = TagRecord(
        url=URL,
        title="Hello world title",
        og_tags={"title": "OG"},
        twitter_tags={"card": "summary"},
        other_tags=(OtherTag("keywords", "a, b"),),
    )
    df = tags_to_df(tags)

    assert df["Tag"].tolist() == ["title", "og:title", "twitter:card", "keywords"]
    assert df["Group"].tolist() == ["Basic", "Open Graph", "Twitter", "Other"]


def test_csv_and_json_exports(make_tags) -> None:
    analysis = analyze(make_tags(title=None))

    csv = to_csv_bytes(issues_to_df(analysis)).decode("utf-8")
    assert csv.splitlines()[0] == "Severity,Issue,Code,Message,Recommendation"

    payload = json.loads(to_json_bytes(analysis))
    assert set(payload) == {"url", "metaTags", "score", "issues", "recommendations", "tagSummary"}
    assert payload["issues"][0] == {"type": "error", "message": "Missing title tag", "code": "missing_title"}
    assert "title" not in payload["metaTags"]
    assert payload["metaTags"]["ogTags"]["type"] == "website"
    assert len(payload["tagSummary"]) == 6


def test_truncate_and_display_url() -> None:
    assert truncate_text("abcdef", 3) == "abc..."
    assert truncate_text("abc", 3) == "abc"
    assert truncate_text(None, 3) == ""
    assert format_display_url("https://example.com/") == "example.com"
    assert format_display_url("http://example.com/a") == "example.com/a"


def test_length_status_text() -> None:
    assert title_status(TagRecord(url=URL)) == "Missing"
    assert title_status(TagRecord(url=URL, title="short")) == "Too short (5 characters)"
    assert title_status(TagRecord(url=URL, title="x" * 30)) == "Good (30 characters)"
    assert description_status(TagRecord(url=URL, description="x" * 170)) == "Too long (170 characters)"


def test_social_cards_fall_back_to_basic_tags() -> None:
    tags = TagRecord(url=URL, title="Page title", description="Page description",
                     og_tags={"image": "https://example.com/og.png"})

    fb = facebook_card(tags)
    assert fb.title == "Page title"
    assert fb.image == "https://example.com/og.png"
    assert fb.domain == "example.com"

    tw = twitter_card(tags)
    assert tw.description == "Page description"
    assert tw.image == "https://example.com/og.png"


def test_tag_html_snippets_escape_content() -> None:
    tags = TagRecord(url=URL, title='Say "hi"', og_tags={"title": 'A "quoted" title'})

    assert og_tags_html(tags) == ['<meta property="og:title" content="A &quot;quoted&quot; title">']
    assert 'content="Say &quot;hi&quot;"' in example_twitter_tags_html(tags)[1]


def test_category_groups() -> None:
    tags = TagRecord(url=URL, robots="index", charset="utf-8", og_tags={"title": "OG"})
    groups = category_groups(analyze(tags))

    assert list(groups) == ["Core SEO Elements", "Social Media Optimization", "Technical SEO"]
    core = dict(groups["Core SEO Elements"])
    social = dict(groups["Social Media Optimization"])
    technical = dict(groups["Technical SEO"])

    assert core["Robots Directive"] == TagStatus.PRESENT
    assert core["Title Tag"] == TagStatus.MISSING
    assert social["Open Graph Tags"] == TagStatus.PARTIAL
    assert social["Social Title & Description"] == TagStatus.PARTIAL
    assert social["OG Image"] == TagStatus.MISSING
    assert technical["Character Encoding"] == TagStatus.PRESENT
    assert technical["Viewport Meta Tag"] == TagStatus.MISSING
