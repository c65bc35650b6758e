"""
In-memory store of completed analyses, keyed by normalized URL.
Entries live as long as the process; there is no eviction or expiry.
"""
from __future__ import annotations

import logging
from typing import Optional

from crawler.urls import normalize_url
from models import Analysis

logger = logging.getLogger(__name__)


class AnalysisCache:
    """Maps normalize_url(url) -> Analysis. Last write for a key wins."""

    def __init__(self) -> None:
        self._analyses: dict[str, Analysis] = {}

    def get(self, url: str) -> Optional[Analysis]:
        analysis = self._analyses.get(normalize_url(url))
        if analysis is not None:
            logger.debug("Cache hit for %s", url)
        return analysis

    def put(self, url: str, analysis: Analysis) -> Analysis:
        self._analyses[normalize_url(url)] = analysis
        return analysis

    def recent(self, limit: int = 10) -> list[Analysis]:
        """Stored analyses in insertion order, at most `limit` of them."""
        return list(self._analyses.values())[:limit]

    def clear(self) -> None:
        self._analyses.clear()

    def __len__(self) -> int:
        return len(self._analyses)

    def __contains__(self, url: str) -> bool:
        return normalize_url(url) in self._analyses


# Process-wide default instance
cache = AnalysisCache()
