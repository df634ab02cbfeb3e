"""
Page speed analyzer: grades the root document's load time.

Only the single fetch of the HTML document is measured; sub-resources are not
requested, so the request count is always 1.
"""
from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Optional

from analyzers.base import BaseAnalyzer
from config import (
    ACCEPTABLE_LOAD_TIME_MS,
    DEFAULT_LOAD_TIME_MS,
    DEFAULT_REQUEST_COUNT,
    DEFAULT_RESOURCE_SIZE_KB,
    SLOW_LOAD_TIME_MS,
)
from models import ExtractedDocument, PageSpeedMetadata, PageSpeedVerdict, Status

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SPEED = PageSpeedMetadata(
    load_time_ms=DEFAULT_LOAD_TIME_MS,
    resource_size_kb=DEFAULT_RESOURCE_SIZE_KB,
    request_count=DEFAULT_REQUEST_COUNT,
)


def resolve_page_speed(raw: Any) -> PageSpeedMetadata:
    """
    Normalise whatever the fetch side handed over.

    Accepts a PageSpeedMetadata, a mapping with loadTimeMs / resourceSizeKB /
    requestCount keys, or None. Anything without a usable load time is
    replaced by DEFAULT_PAGE_SPEED.
    """
    if isinstance(raw, PageSpeedMetadata):
        load, size, count = raw.load_time_ms, raw.resource_size_kb, raw.request_count
    elif isinstance(raw, dict):
        load = raw.get("loadTimeMs", raw.get("loadTime"))
        size = raw.get("resourceSizeKB", raw.get("resourceSize"))
        count = raw.get("requestCount")
    elif raw is None:
        logger.warning("No page speed data supplied; using defaults")
        return DEFAULT_PAGE_SPEED
    else:
        logger.warning("Unusable page speed data %r; using defaults", raw)
        return DEFAULT_PAGE_SPEED

    if not _is_non_negative_number(load):
        logger.warning("Invalid load time %r; using default page speed data", load)
        return DEFAULT_PAGE_SPEED

    return PageSpeedMetadata(
        load_time_ms=load,
        resource_size_kb=size if _is_non_negative_number(size) else DEFAULT_RESOURCE_SIZE_KB,
        request_count=count if _is_non_negative_number(count) else DEFAULT_REQUEST_COUNT,
    )


def _is_non_negative_number(value: Any) -> bool:
    return (
        isinstance(value, Real) and not isinstance(value, bool)
        and math.isfinite(value) and value >= 0
    )


class PageSpeedAnalyzer(BaseAnalyzer):
    def analyze(
        self,
        doc: ExtractedDocument,
        page_speed: Optional[PageSpeedMetadata] = None,
    ) -> PageSpeedVerdict:
        timing = resolve_page_speed(page_speed)
        load = timing.load_time_ms

        if load > SLOW_LOAD_TIME_MS:
            status = Status.ERROR
            feedback = f"Your page took {load:.0f} ms to load, which is slow. Consider optimizing."
        elif load > ACCEPTABLE_LOAD_TIME_MS:
            status = Status.WARNING
            feedback = f"Your page load time of {load:.0f} ms is acceptable but could improve."
        else:
            status = Status.GOOD
            feedback = f"Great! Your page loads quickly ({load:.0f} ms)."

        return PageSpeedVerdict(
            load_time=load,
            status=status,
            feedback=feedback,
            resource_size=timing.resource_size_kb,
            request_count=timing.request_count,
        )
