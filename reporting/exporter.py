"""
Converts an Analysis to Pandas DataFrames, CSV bytes and JSON for export.
"""
from __future__ import annotations

import io
import json

import pandas as pd

from models import Analysis, TagRecord, TagStatus


# ── Issues DataFrame ───────────────────────────────────────────────────────────

def issues_to_df(analysis: Analysis) -> pd.DataFrame:
    """One row per issue, paired with its recommendation, in evaluation order."""
    if not analysis.issues:
        return pd.DataFrame(columns=["Severity", "Issue", "Code", "Message", "Recommendation"])

    rows = []
    for issue, recommendation in zip(analysis.issues, analysis.recommendations):
        rows.append({
            "Severity":       issue.severity.upper(),
            "Issue":          _humanize(issue.code),
            "Code":           issue.code,
            "Message":        issue.message,
            "Recommendation": recommendation,
        })
    return pd.DataFrame(rows)


# ── Tag summary / extracted tags ───────────────────────────────────────────────

def tag_summary_df(analysis: Analysis) -> pd.DataFrame:
    rows = [
        {
            "Category": entry.name,
            "Status":   TagStatus.LABELS.get(entry.status, entry.status),
            "Rank":     TagStatus.rank(entry.status),
        }
        for entry in analysis.tag_summary
    ]
    return pd.DataFrame(rows, columns=["Category", "Status", "Rank"])


def tags_to_df(tags: TagRecord) -> pd.DataFrame:
    """Flatten every extracted tag into (Group, Tag, Value) rows."""
    rows: list[dict[str, str]] = []

    for label, value in (
        ("title", tags.title),
        ("description", tags.description),
        ("canonical", tags.canonical),
        ("viewport", tags.viewport),
        ("robots", tags.robots),
        ("charset", tags.charset),
        ("language", tags.language),
        ("author", tags.author),
    ):
        if value is not None:
            rows.append({"Group": "Basic", "Tag": label, "Value": value})

    for key, value in (tags.og_tags or {}).items():
        rows.append({"Group": "Open Graph", "Tag": f"og:{key}", "Value": value})

    for key, value in (tags.twitter_tags or {}).items():
        rows.append({"Group": "Twitter", "Tag": f"twitter:{key}", "Value": value})

    for other in tags.other_tags or ():
        rows.append({"Group": "Other", "Tag": other.name, "Value": other.content})

    return pd.DataFrame(rows, columns=["Group", "Tag", "Value"])


# ── CSV / JSON export ──────────────────────────────────────────────────────────

def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def to_json_bytes(analysis: Analysis) -> bytes:
    return json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")


# ── Helpers ────────────────────────────────────────────────────────────────────

def _humanize(snake: str) -> str:
    """Convert snake_case to Title Case for display."""
    return snake.replace("_", " ").title()
