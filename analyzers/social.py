"""
Social sharing analyzers: Open Graph and Twitter Card tags.
"""
from __future__ import annotations

from typing import Optional

from analyzers.base import BaseAnalyzer
from models import (
    ExtractedDocument,
    OpenGraphVerdict,
    PageSpeedMetadata,
    Status,
    TwitterCardVerdict,
)


def _presence_status(values: list[Optional[str]]) -> str:
    """error if every value is missing, warning if some are, good otherwise."""
    present = [bool(v) for v in values]
    if not any(present):
        return Status.ERROR
    if not all(present):
        return Status.WARNING
    return Status.GOOD


class OpenGraphAnalyzer(BaseAnalyzer):
    """
    Only og:title, og:description and og:image decide the status.
    og:url and og:type are reported but never graded.
    """

    FEEDBACK = {
        Status.GOOD:    "All essential Open Graph tags are present.",
        Status.WARNING: "Some Open Graph tags are missing. Complete the set for better social sharing.",
        Status.ERROR:   "No Open Graph tags found. Adding these tags improves how your content "
                        "appears when shared on social media.",
    }

    def analyze(
        self,
        doc: ExtractedDocument,
        page_speed: Optional[PageSpeedMetadata] = None,
    ) -> OpenGraphVerdict:
        status = _presence_status([doc.og_title, doc.og_description, doc.og_image])
        return OpenGraphVerdict(
            status=status,
            feedback=self.FEEDBACK[status],
            title=doc.og_title,
            description=doc.og_description,
            image=doc.og_image,
            url=doc.og_url,
            type=doc.og_type,
        )


class TwitterCardAnalyzer(BaseAnalyzer):
    FEEDBACK = {
        Status.GOOD:    "All essential Twitter Card tags are present.",
        Status.WARNING: "Some Twitter Card tags are missing. Complete the set for better Twitter sharing.",
        Status.ERROR:   "No Twitter Card tags found. These tags control how your content "
                        "appears when shared on Twitter.",
    }

    def analyze(
        self,
        doc: ExtractedDocument,
        page_speed: Optional[PageSpeedMetadata] = None,
    ) -> TwitterCardVerdict:
        status = _presence_status([
            doc.twitter_card,
            doc.twitter_title,
            doc.twitter_description,
            doc.twitter_image,
        ])
        return TwitterCardVerdict(
            status=status,
            feedback=self.FEEDBACK[status],
            card=doc.twitter_card,
            title=doc.twitter_title,
            description=doc.twitter_description,
            image=doc.twitter_image,
        )
