"""
Global configuration constants for the Meta Tag Analyzer.
All tunable thresholds live here.
"""
import logging
import os

# ── Title / description thresholds ────────────────────────────────────────────
TITLE_MIN_CHARS = 10
TITLE_MAX_CHARS = 60
DESCRIPTION_MIN_CHARS = 50
DESCRIPTION_MAX_CHARS = 160

# ── Essential social tags (order is the order they are reported in) ───────────
ESSENTIAL_OG_TAGS: tuple[str, ...] = ("title", "description", "image", "url", "type")
ESSENTIAL_TWITTER_TAGS: tuple[str, ...] = ("card", "title", "description", "image")

# Meta names claimed by dedicated TagRecord fields
CLAIMED_META_NAMES: tuple[str, ...] = ("description", "viewport", "robots", "language", "author")

# ── Rule engine penalties (subtracted from 100) ───────────────────────────────
MAX_SCORE = 100

PENALTIES: dict[str, int] = {
    "missing_title":           15,
    "title_too_short":          5,
    "title_too_long":           3,
    "missing_description":     10,
    "description_too_short":    5,
    "description_too_long":     3,
    "missing_og_tags":         10,
    "incomplete_og_tags":       5,
    "missing_twitter_tags":    10,
    "incomplete_twitter_tags":  5,
    "missing_canonical":        5,
    "missing_viewport":         5,
}

# ── Additive (dashboard) score points ─────────────────────────────────────────
TITLE_PRESENT_POINTS = 15
TITLE_LENGTH_POINTS = 10
TITLE_NEAR_MAX_CHARS = 70           # 61–70 chars earns half length credit
DESCRIPTION_PRESENT_POINTS = 10
DESCRIPTION_LENGTH_POINTS = 10
DESCRIPTION_NEAR_MAX_CHARS = 200    # 161–200 chars earns half length credit
OG_POINTS_PER_TAG = 4
TWITTER_POINTS_PER_TAG = 5
CANONICAL_POINTS = 5
VIEWPORT_POINTS = 5
ROBOTS_POINTS = 5

# ── Fetch defaults ────────────────────────────────────────────────────────────
DEFAULT_REQUEST_TIMEOUT = 15            # seconds
DEFAULT_USER_AGENT = "SEO Meta Tag Analyzer Bot"
ALLOWED_URL_SCHEMES = ("http", "https")

# ── Presentation ──────────────────────────────────────────────────────────────
TOP_RECOMMENDATIONS = 3
SEARCH_TITLE_PREVIEW_CHARS = 60
SEARCH_DESCRIPTION_PREVIEW_CHARS = 160

# ── Logging ───────────────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(value: str | None) -> str:
    """Upper-cased level name, or DEFAULT_LOG_LEVEL when `value` is not a known level."""
    name = (value or "").strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(os.environ.get("META_ANALYZER_LOG_LEVEL"))
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
