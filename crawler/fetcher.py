"""
Low-level HTTP fetcher. Retrieves the HTML of a single URL.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

import requests

from config import DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT
from errors import TransportError
from models import FetchResult

logger = logging.getLogger(__name__)


def fetch_html(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: int = DEFAULT_REQUEST_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FetchResult:
    """
    GET `url` and return a FetchResult with the body and status populated.
    HTML content is stored but NOT parsed here (parser.py does that).

    A non-2xx response is returned with status_ok=False; network failures
    raise TransportError.
    """
    session = session or make_session(user_agent)
    headers = {"User-Agent": user_agent}

    try:
        t0 = time.perf_counter()
        resp = session.get(url, headers=headers, timeout=timeout, allow_redirects=True)
        elapsed_ms = (time.perf_counter() - t0) * 1000
    except requests.exceptions.SSLError as exc:
        raise TransportError(url, f"SSL Error: {exc}") from exc
    except requests.exceptions.Timeout as exc:
        raise TransportError(url, "Request timed out") from exc
    except requests.exceptions.TooManyRedirects as exc:
        raise TransportError(url, "Too many redirects") from exc
    except requests.exceptions.ConnectionError as exc:
        raise TransportError(url, f"Connection Error: {exc}") from exc
    except requests.exceptions.RequestException as exc:
        raise TransportError(url, f"Request failed: {exc}") from exc

    result = FetchResult(
        url=url,
        status_ok=resp.ok,
        status_code=resp.status_code,
        status_text=resp.reason or "",
        final_url=resp.url or url,
        response_time_ms=elapsed_ms,
    )
    if resp.ok:
        result.body = resp.text

    logger.info(
        "Fetched %s -> %s %s in %.0f ms",
        url, result.status_code, result.status_text, result.response_time_ms,
    )
    return result


def make_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    session = requests.Session()
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
        "Accept-Encoding": "gzip, deflate",
    })
    return session
