"""
Core data models for the Meta Tag Analyzer.
All modules import from here; nothing else is cross-imported at this level.

NOTE: `from __future__ import annotations` is intentionally omitted here.
Python 3.13.0 has a regression (bpo-121814) where that import causes a crash
in the dataclasses decorator when the module is not yet fully registered in
sys.modules. Python 3.9+ supports generic aliases (list[str], dict[str, Any])
natively, so the future import is unnecessary.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


# ── Severity ──────────────────────────────────────────────────────────────────
class Severity:
    ERROR   = "error"
    WARNING = "warning"
    INFO    = "info"

    ALL = [ERROR, WARNING, INFO]

    COLORS = {
        ERROR:   "#FF4B4B",
        WARNING: "#FFA500",
        INFO:    "#4B9EFF",
    }

    ICONS = {
        ERROR:   "🔴",
        WARNING: "🟡",
        INFO:    "🔵",
    }


# ── Tag status ────────────────────────────────────────────────────────────────
class TagStatus:
    OPTIMAL = "optimal"
    PRESENT = "present"
    PARTIAL = "partial"
    MISSING = "missing"

    ALL = [OPTIMAL, PRESENT, PARTIAL, MISSING]

    RANKS = {
        OPTIMAL: 3,
        PRESENT: 2,
        PARTIAL: 1,
        MISSING: 0,
    }

    LABELS = {
        OPTIMAL: "Optimal",
        PRESENT: "Present",
        PARTIAL: "Needs Improvement",
        MISSING: "Missing",
    }

    COLORS = {
        OPTIMAL: "#00C851",
        PRESENT: "#4B9EFF",
        PARTIAL: "#FFA500",
        MISSING: "#FF4B4B",
    }

    @classmethod
    def rank(cls, status: str) -> int:
        return cls.RANKS[status]


# ── Issue codes ───────────────────────────────────────────────────────────────
class IssueCode:
    MISSING_TITLE           = "missing_title"
    TITLE_TOO_SHORT         = "title_too_short"
    TITLE_TOO_LONG          = "title_too_long"
    MISSING_DESCRIPTION     = "missing_description"
    DESCRIPTION_TOO_SHORT   = "description_too_short"
    DESCRIPTION_TOO_LONG    = "description_too_long"
    MISSING_OG_TAGS         = "missing_og_tags"
    INCOMPLETE_OG_TAGS      = "incomplete_og_tags"
    MISSING_TWITTER_TAGS    = "missing_twitter_tags"
    INCOMPLETE_TWITTER_TAGS = "incomplete_twitter_tags"
    MISSING_CANONICAL       = "missing_canonical"
    MISSING_VIEWPORT        = "missing_viewport"

    ALL = [
        MISSING_TITLE, TITLE_TOO_SHORT, TITLE_TOO_LONG,
        MISSING_DESCRIPTION, DESCRIPTION_TOO_SHORT, DESCRIPTION_TOO_LONG,
        MISSING_OG_TAGS, INCOMPLETE_OG_TAGS,
        MISSING_TWITTER_TAGS, INCOMPLETE_TWITTER_TAGS,
        MISSING_CANONICAL, MISSING_VIEWPORT,
    ]


# ── Tag summary categories (always reported in this order) ────────────────────
class Category:
    TITLE       = "Title"
    DESCRIPTION = "Description"
    OPEN_GRAPH  = "Open Graph"
    TWITTER     = "Twitter Cards"
    CANONICAL   = "Canonical"
    VIEWPORT    = "Viewport"

    ALL = [TITLE, DESCRIPTION, OPEN_GRAPH, TWITTER, CANONICAL, VIEWPORT]


# ── Extracted tags ─────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class OtherTag:
    name: str
    content: str


@dataclass(frozen=True)
class TagRecord:
    """
    Normalized <head> metadata of one page.

    None means the tag was not found; an empty string means it was found
    with empty content. Social mappings are None rather than empty, and are
    stored as read-only views so a cached record cannot be altered.
    """
    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    canonical: Optional[str] = None
    viewport: Optional[str] = None
    robots: Optional[str] = None
    charset: Optional[str] = None
    language: Optional[str] = None
    author: Optional[str] = None
    og_tags: Optional[Mapping[str, str]] = field(default=None, hash=False)
    twitter_tags: Optional[Mapping[str, str]] = field(default=None, hash=False)
    other_tags: Optional[tuple[OtherTag, ...]] = None

    def __post_init__(self):
        for name in ("og_tags", "twitter_tags"):
            value = getattr(self, name)
            object.__setattr__(self, name, MappingProxyType(dict(value)) if value else None)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"url": self.url}
        for key in ("title", "description", "canonical", "viewport",
                    "robots", "charset", "language", "author"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.og_tags:
            out["ogTags"] = dict(self.og_tags)
        if self.twitter_tags:
            out["twitterTags"] = dict(self.twitter_tags)
        if self.other_tags:
            out["otherTags"] = [{"name": t.name, "content": t.content} for t in self.other_tags]
        return out


# ── Issue model ────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Issue:
    severity: str          # Severity.ERROR / WARNING / INFO
    message: str
    code: str              # one of IssueCode.ALL

    def to_dict(self) -> dict[str, str]:
        return {"type": self.severity, "message": self.message, "code": self.code}


@dataclass(frozen=True)
class TagSummaryEntry:
    name: str              # one of Category.ALL
    status: str            # one of TagStatus.ALL

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "status": self.status}


# ── Top-level analysis result ──────────────────────────────────────────────────
@dataclass(frozen=True)
class Analysis:
    url: str
    tags: TagRecord
    score: int
    issues: tuple[Issue, ...] = ()
    recommendations: tuple[str, ...] = ()
    tag_summary: tuple[TagSummaryEntry, ...] = ()

    @property
    def issues_by_severity(self) -> dict[str, list[Issue]]:
        out: dict[str, list[Issue]] = {s: [] for s in Severity.ALL}
        for issue in self.issues:
            out.setdefault(issue.severity, []).append(issue)
        return out

    def status_of(self, category: str) -> str:
        for entry in self.tag_summary:
            if entry.name.lower() == category.lower():
                return entry.status
        return TagStatus.MISSING

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "metaTags": self.tags.to_dict(),
            "score": self.score,
            "issues": [i.to_dict() for i in self.issues],
            "recommendations": list(self.recommendations),
            "tagSummary": [e.to_dict() for e in self.tag_summary],
        }


# ── Transport result ───────────────────────────────────────────────────────────
@dataclass
class FetchResult:
    url: str
    status_ok: bool
    status_code: int = 0
    status_text: str = ""
    body: str = ""
    final_url: str = ""
    response_time_ms: float = 0.0
