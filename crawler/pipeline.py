"""
Single-page analysis pipeline:
validate -> cache lookup -> fetch -> extract -> analyze -> cache store.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

import requests

from analyzers.orchestrator import analyze
from crawler.fetcher import fetch_html
from crawler.parser import extract_tags
from crawler.urls import validate_url
from errors import TransportError
from models import Analysis, FetchResult
from storage.cache import AnalysisCache, cache as default_cache

logger = logging.getLogger(__name__)

Fetcher = Callable[..., FetchResult]


def analyze_url(
    url: str,
    cache: Optional[AnalysisCache] = None,
    session: Optional[requests.Session] = None,
    fetch: Optional[Fetcher] = None,
) -> Analysis:
    """
    Analyse the page at `url`, reusing a cached Analysis when one exists.

    Raises InputError for a malformed URL (before anything is fetched) and
    TransportError when the page cannot be retrieved.
    """
    url = validate_url(url)
    cache = default_cache if cache is None else cache
    fetch = fetch or fetch_html

    existing = cache.get(url)
    if existing is not None:
        return existing

    result = fetch(url, session=session) if session is not None else fetch(url)
    if not result.status_ok:
        logger.warning("Fetch of %s failed: %s %s", url, result.status_code, result.status_text)
        raise TransportError(url, result.status_text, result.status_code)
    if result.final_url and result.final_url != url:
        logger.info("Followed redirect %s -> %s", url, result.final_url)

    tags = extract_tags(result.body, url)
    analysis = analyze(tags)
    cache.put(url, analysis)

    logger.info("Analysed %s: score %d, %d issue(s)", url, analysis.score, len(analysis.issues))
    return analysis
