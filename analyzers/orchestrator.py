"""
Runs all analyzers over one document and assembles the AnalysisResult.
"""
from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import urlparse

import requests

from analyzers.meta import DescriptionAnalyzer, TitleAnalyzer, build_meta_tag_rows
from analyzers.mobile import MobileFriendlinessAnalyzer
from analyzers.performance import PageSpeedAnalyzer
from analyzers.recommendations import generate_recommendations
from analyzers.social import OpenGraphAnalyzer, TwitterCardAnalyzer
from extractor.document import HtmlDocument
from extractor.extract import extract_document
from extractor.fetcher import FetchError, fetch_page
from models import AnalysisConfig, AnalysisResult, ExtractedDocument, Status, VerdictSet
from scoring.scorer import compute_score
from storage import AnalysisStore

logger = logging.getLogger(__name__)

# Stateless, safe to share between concurrent analyses
_TITLE = TitleAnalyzer()
_DESCRIPTION = DescriptionAnalyzer()
_OPEN_GRAPH = OpenGraphAnalyzer()
_TWITTER = TwitterCardAnalyzer()
_PAGE_SPEED = PageSpeedAnalyzer()
_MOBILE = MobileFriendlinessAnalyzer()


def run_all_analyzers(doc: ExtractedDocument, page_speed: Any = None) -> VerdictSet:
    return VerdictSet(
        doc=doc,
        title=_TITLE.analyze(doc),
        description=_DESCRIPTION.analyze(doc),
        open_graph=_OPEN_GRAPH.analyze(doc),
        twitter=_TWITTER.analyze(doc),
        page_speed=_PAGE_SPEED.analyze(doc, page_speed),
        mobile=_MOBILE.analyze(doc),
    )


def analyze(url: str, document, page_speed: Any = None) -> AnalysisResult:
    """
    Score one parsed document.

    `document` is either an ExtractedDocument or any accessor that
    extract_document() understands. `page_speed` may be None, in which case
    the fixed fallback timing is used. Pure: same inputs, same result.
    """
    doc = document if isinstance(document, ExtractedDocument) else extract_document(document)
    verdicts = run_all_analyzers(doc, page_speed)
    meta_tags = build_meta_tag_rows(doc, verdicts.title, verdicts.description)

    return AnalysisResult(
        url=url,
        title=verdicts.title.content or "",
        description=verdicts.description.content or "",
        tag_count=doc.meta_tag_count,
        score=compute_score(verdicts),
        title_tag=verdicts.title,
        description_tag=verdicts.description,
        og_tags=verdicts.open_graph,
        twitter_tags=verdicts.twitter,
        page_speed=verdicts.page_speed,
        mobile_friendliness=verdicts.mobile,
        meta_tags=meta_tags,
        recommendations=generate_recommendations(verdicts),
    )


def verdicts_from_result(result: AnalysisResult) -> VerdictSet:
    """
    Rebuild the verdict bundle from a stored result, for the derived scoring
    views (breakdown, category scores). Only the raw values those views read
    are restored.
    """
    rows = {row.type: row for row in result.meta_tags}

    def present(row_type: str) -> Optional[str]:
        row = rows.get(row_type)
        if row is None or row.status == Status.ERROR:
            return None
        if row_type == "Robots Meta" and row.status != Status.GOOD:
            # the row shows a display default when the tag is missing
            return None
        return row.content

    doc = ExtractedDocument(
        title=result.title,
        meta_description=result.description,
        keywords=present("Meta Keywords"),
        canonical_url=present("Canonical URL"),
        robots=present("Robots Meta"),
        viewport=present("Viewport"),
        meta_tag_count=result.tag_count,
    )
    return VerdictSet(
        doc=doc,
        title=result.title_tag,
        description=result.description_tag,
        open_graph=result.og_tags,
        twitter=result.twitter_tags,
        page_speed=result.page_speed,
        mobile=result.mobile_friendliness,
    )


def analyze_html(url: str, html: str, page_speed: Any = None) -> AnalysisResult:
    return analyze(url, HtmlDocument(html), page_speed)


def analyze_url(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[int] = None,
    user_agent: Optional[str] = None,
) -> AnalysisResult:
    """Fetch `url` and analyze it. Raises FetchError if the page can't be retrieved."""
    kwargs: dict[str, Any] = {}
    if timeout is not None:
        kwargs["timeout"] = timeout
    if user_agent is not None:
        kwargs["user_agent"] = user_agent

    logger.info("Starting SEO analysis for %s", url)
    page = fetch_page(url, session=session, **kwargs)
    if not page.ok:
        raise FetchError(url, page.error or f"Failed to fetch URL: {page.status_code}", page.status_code)

    result = analyze_html(url, page.html, page.page_speed)
    logger.info("SEO analysis completed for %s. Score: %d/100", url, result.score)
    return result


def run_analysis(
    config: AnalysisConfig,
    store: AnalysisStore,
    session: Optional[requests.Session] = None,
) -> AnalysisResult:
    """
    Cached-first analysis: reuse the stored result for the URL unless
    config.force is set, otherwise fetch, analyze and store.
    """
    url = normalize_url(config.url)

    if not config.force:
        cached = store.get(url)
        if cached is not None:
            logger.debug("Cache hit for %s", url)
            return cached

    result = analyze_url(
        url,
        session=session,
        timeout=config.request_timeout,
        user_agent=config.user_agent,
    )
    return store.save(result)


def normalize_url(url: str) -> str:
    url = (url or "").strip()
    if url and "://" not in url:
        url = "https://" + url

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Invalid URL provided")
    return url
