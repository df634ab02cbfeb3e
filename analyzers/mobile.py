"""
Mobile-friendliness analyzer: weighted sum of five heuristic signals.
"""
from __future__ import annotations

from typing import Optional

from analyzers.base import BaseAnalyzer
from config import (
    MOBILE_EXCELLENT_SCORE,
    MOBILE_GOOD_SCORE,
    MOBILE_WARNING_SCORE,
    MOBILE_WEIGHTS,
)
from extractor.heuristics import detect_mobile_signals
from models import (
    ExtractedDocument,
    MobileFriendlinessVerdict,
    MobileSignals,
    PageSpeedMetadata,
    Status,
)


def mobile_score(signals: MobileSignals) -> int:
    score = sum(
        weight for name, weight in MOBILE_WEIGHTS.items()
        if getattr(signals, name)
    )
    return max(0, min(100, score))


def mobile_status(score: int) -> str:
    if score >= MOBILE_GOOD_SCORE:
        return Status.GOOD
    elif score >= MOBILE_WARNING_SCORE:
        return Status.WARNING
    else:
        return Status.ERROR


def mobile_feedback(score: int) -> str:
    if score >= MOBILE_EXCELLENT_SCORE:
        return "Excellent! Your page is well optimized for mobile devices."
    elif score >= MOBILE_GOOD_SCORE:
        return "Good mobile-friendliness. A few small improvements are possible."
    elif score >= MOBILE_WARNING_SCORE:
        return "Needs improvement. Several mobile optimizations are missing."
    else:
        return "Major improvements needed. Your page is not optimized for mobile devices."


class MobileFriendlinessAnalyzer(BaseAnalyzer):
    def analyze(
        self,
        doc: ExtractedDocument,
        page_speed: Optional[PageSpeedMetadata] = None,
    ) -> MobileFriendlinessVerdict:
        signals = detect_mobile_signals(doc)
        score = mobile_score(signals)
        return MobileFriendlinessVerdict(
            score=score,
            status=mobile_status(score),
            viewport=signals.viewport,
            responsive_design=signals.responsive_design,
            touch_elements=signals.touch_elements,
            font_readability=signals.font_readability,
            media_queries=signals.media_queries,
            feedback=mobile_feedback(score),
        )
