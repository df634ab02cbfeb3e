"""
Meta tag analyzers: title, description, and the six-row meta tag table.
"""
from __future__ import annotations

from typing import Optional

from analyzers.base import LengthAnalyzer
from config import (
    DEFAULT_ROBOTS_DISPLAY,
    DESCRIPTION_MAX_CHARS,
    DESCRIPTION_MIN_CHARS,
    DESCRIPTION_RECOMMENDED_BAND,
    TITLE_MAX_CHARS,
    TITLE_MIN_CHARS,
    TITLE_RECOMMENDED_BAND,
)
from models import ExtractedDocument, FieldVerdict, MetaTagRow, PageSpeedMetadata, Status


class TitleAnalyzer(LengthAnalyzer):
    label = "title"
    min_chars = TITLE_MIN_CHARS
    max_chars = TITLE_MAX_CHARS
    band = TITLE_RECOMMENDED_BAND

    missing_feedback = "Missing title tag. Search engines use this as the main headline."
    good_feedback = "Great! Your title is an optimal length."

    def text_of(self, doc: ExtractedDocument) -> str:
        return doc.title.strip()

    def analyze(
        self,
        doc: ExtractedDocument,
        page_speed: Optional[PageSpeedMetadata] = None,
    ) -> FieldVerdict:
        title = self.text_of(doc)
        status, feedback = self.classify(title)
        return FieldVerdict(status=status, feedback=feedback, content=title)


class DescriptionAnalyzer(LengthAnalyzer):
    label = "description"
    min_chars = DESCRIPTION_MIN_CHARS
    max_chars = DESCRIPTION_MAX_CHARS
    band = DESCRIPTION_RECOMMENDED_BAND

    missing_feedback = "Missing meta description. This is important for search result snippets."
    good_feedback = "Great! Your description is an optimal length."

    def text_of(self, doc: ExtractedDocument) -> str:
        return doc.meta_description or ""

    def analyze(
        self,
        doc: ExtractedDocument,
        page_speed: Optional[PageSpeedMetadata] = None,
    ) -> FieldVerdict:
        description = self.text_of(doc)
        status, feedback = self.classify(description)
        return FieldVerdict(status=status, feedback=feedback, content=description)


# ── Meta tag table ─────────────────────────────────────────────────────────────

META_TAG_ROW_TYPES = (
    "Title",
    "Meta Description",
    "Meta Keywords",
    "Canonical URL",
    "Robots Meta",
    "Viewport",
)

_NO_CHANGE = "No change needed"


def build_meta_tag_rows(
    doc: ExtractedDocument,
    title: FieldVerdict,
    description: FieldVerdict,
) -> tuple[MetaTagRow, ...]:
    """
    One row per tag kind, always in META_TAG_ROW_TYPES order.

    Title and description rows mirror their verdicts; the other four are
    judged on presence alone.
    """
    rows = [
        MetaTagRow(
            type="Title",
            content=title.content,
            status=title.status,
            recommendation=title.feedback,
        ),
        MetaTagRow(
            type="Meta Description",
            content=description.content,
            status=description.status,
            recommendation=description.feedback,
        ),
        MetaTagRow(
            type="Meta Keywords",
            content=doc.keywords,
            status=Status.WARNING if doc.keywords else Status.ERROR,
            recommendation="Not critical for rankings but can be added",
        ),
        MetaTagRow(
            type="Canonical URL",
            content=doc.canonical_url,
            status=Status.GOOD if doc.canonical_url else Status.ERROR,
            recommendation=_NO_CHANGE if doc.canonical_url
            else "Add a canonical URL to prevent duplicate content issues",
        ),
        MetaTagRow(
            type="Robots Meta",
            # display default only; status still reflects the missing tag
            content=doc.robots or DEFAULT_ROBOTS_DISPLAY,
            status=Status.GOOD if doc.robots else Status.WARNING,
            recommendation=_NO_CHANGE if doc.robots
            else "Consider adding robots meta tag for explicit crawl instructions",
        ),
        MetaTagRow(
            type="Viewport",
            content=doc.viewport,
            status=Status.GOOD if doc.viewport else Status.ERROR,
            recommendation=_NO_CHANGE if doc.viewport
            else "Add viewport meta tag for mobile responsiveness",
        ),
    ]
    return tuple(rows)
