from __future__ import annotations

import pytest

from analyzers.mobile import MobileFriendlinessAnalyzer, mobile_feedback, mobile_score, mobile_status
from extractor.heuristics import (
    detect_mobile_signals,
    has_media_queries,
    has_readable_fonts,
    is_touch_friendly,
)
from models import ExtractedDocument, MobileSignals, Status


def test_no_signals_scores_zero():
    verdict = MobileFriendlinessAnalyzer().analyze(ExtractedDocument())
    assert verdict.score == 0
    assert verdict.status == Status.ERROR
    assert verdict.feedback.startswith("Major improvements needed")
    assert not any([
        verdict.viewport, verdict.responsive_design, verdict.touch_elements,
        verdict.font_readability, verdict.media_queries,
    ])


def test_all_signals_score_100(complete_doc):
    verdict = MobileFriendlinessAnalyzer().analyze(complete_doc)
    assert verdict.score == 100
    assert verdict.status == Status.GOOD
    assert verdict.feedback.startswith("Excellent")


@pytest.mark.parametrize("signals, expected", [
    (MobileSignals(viewport=True), 40),
    (MobileSignals(responsive_design=True), 25),
    (MobileSignals(touch_elements=True), 15),
    (MobileSignals(font_readability=True), 10),
    (MobileSignals(media_queries=True), 10),
    (MobileSignals(viewport=True, font_readability=True), 50),
    (MobileSignals(viewport=True, responsive_design=True, touch_elements=True), 80),
    (MobileSignals(viewport=True, responsive_design=True, touch_elements=True, font_readability=True), 90),
])
def test_score_is_sum_of_weights(signals, expected):
    assert mobile_score(signals) == expected


@pytest.mark.parametrize("score, expected", [
    (0, Status.ERROR),
    (49, Status.ERROR),
    (50, Status.WARNING),
    (79, Status.WARNING),
    (80, Status.GOOD),
    (100, Status.GOOD),
])
def test_status_bands_inclusive_lower_bound(score, expected):
    assert mobile_status(score) == expected


@pytest.mark.parametrize("score, prefix", [
    (95, "Excellent"),
    (90, "Excellent"),
    (85, "Good"),
    (80, "Good"),
    (65, "Needs improvement"),
    (50, "Needs improvement"),
    (40, "Major improvements needed"),
])
def test_feedback_bands(score, prefix):
    assert mobile_feedback(score).startswith(prefix)


def test_style_block_heuristics_are_substring_matches():
    assert has_media_queries(["@media screen { }"])
    assert not has_media_queries(["body { color: red }"])

    assert is_touch_friendly(["a { touch-action: manipulation }"])
    assert is_touch_friendly(["a { user-select: none }"])
    assert not is_touch_friendly(["a { color: red }"])

    assert has_readable_fonts(["p { font-size: 2vw }"])
    # any "em" counts, even inside an unrelated word
    assert has_readable_fonts([".item { color: red }"])
    assert not has_readable_fonts(["p { color: red }"])


def test_media_queries_alone_make_design_responsive():
    doc = ExtractedDocument(style_blocks=("@media print { a { color: black } }",))
    signals = detect_mobile_signals(doc)
    assert signals.media_queries
    assert signals.responsive_design


@pytest.mark.parametrize("flag", ["uses_flexbox", "uses_grid", "has_responsive_images"])
def test_layout_flags_make_design_responsive(flag):
    signals = detect_mobile_signals(ExtractedDocument(**{flag: True}))
    assert signals.responsive_design
    assert not signals.media_queries


def test_viewport_needs_content():
    assert not detect_mobile_signals(ExtractedDocument(viewport="")).viewport
    assert detect_mobile_signals(ExtractedDocument(viewport="width=device-width")).viewport


def test_verdict_signals_roundtrip(complete_doc):
    verdict = MobileFriendlinessAnalyzer().analyze(complete_doc)
    assert verdict.signals == detect_mobile_signals(complete_doc)
