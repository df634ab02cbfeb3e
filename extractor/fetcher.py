"""
Low-level HTTP fetcher. Retrieves the root document of one URL and records the
timing / size metadata that the page speed analyzer consumes.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

import requests

from config import DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT
from models import FetchedPage

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The target page could not be retrieved, so no analysis was run."""

    def __init__(self, url: str, message: str, status_code: int = 0):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def fetch_page(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: int = DEFAULT_REQUEST_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FetchedPage:
    """
    Fetch a URL and return a FetchedPage with HTTP metadata populated.
    Never raises for transport problems; they are stored in page.error.
    """
    page = FetchedPage(url=url)
    http = session or requests.Session()
    headers = {"User-Agent": user_agent}

    try:
        t0 = time.perf_counter()
        resp = http.get(url, headers=headers, timeout=timeout, allow_redirects=True)
        page.load_time_ms = round((time.perf_counter() - t0) * 1000)

        page.status_code = resp.status_code
        page.reason = resp.reason or ""
        page.html = resp.text
        page.resource_size_kb = _resource_size_kb(resp)

        if not 200 <= resp.status_code < 300:
            page.error = f"Failed to fetch URL: {resp.status_code} {page.reason}".strip()

    except requests.exceptions.SSLError as exc:
        page.error = f"SSL Error: {exc}"
    except requests.exceptions.ConnectionError as exc:
        page.error = f"Connection Error: {exc}"
    except requests.exceptions.Timeout:
        page.error = "Request timed out"
    except requests.exceptions.TooManyRedirects:
        page.error = "Too many redirects"
    except requests.exceptions.RequestException as exc:
        page.error = f"Request failed: {exc}"
    finally:
        if session is None:
            http.close()

    if page.error:
        logger.warning("Fetch failed for %s: %s", url, page.error)
    return page


def _resource_size_kb(resp: requests.Response) -> float:
    """content-length header when it is usable, else the body length."""
    header = resp.headers.get("content-length", "")
    try:
        size_bytes = int(header)
    except (TypeError, ValueError):
        size_bytes = len(resp.content)
    return round(size_bytes / 1024, 1)
