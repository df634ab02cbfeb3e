from __future__ import annotations

import pytest

from analyzers.base import LengthAnalyzer
from analyzers.meta import (
    META_TAG_ROW_TYPES,
    DescriptionAnalyzer,
    TitleAnalyzer,
    build_meta_tag_rows,
)
from models import ExtractedDocument, Status


@pytest.mark.parametrize("length, expected", [
    (0, Status.ERROR),
    (1, Status.WARNING),
    (29, Status.WARNING),
    (30, Status.GOOD),
    (60, Status.GOOD),
    (61, Status.WARNING),
    (200, Status.WARNING),
])
def test_title_length_bands(length, expected):
    verdict = TitleAnalyzer().analyze(ExtractedDocument(title="t" * length))
    assert verdict.status == expected


@pytest.mark.parametrize("length, expected", [
    (0, Status.ERROR),
    (1, Status.WARNING),
    (119, Status.WARNING),
    (120, Status.GOOD),
    (160, Status.GOOD),
    (161, Status.WARNING),
])
def test_description_length_bands(length, expected):
    verdict = DescriptionAnalyzer().analyze(ExtractedDocument(meta_description="d" * length))
    assert verdict.status == expected


def test_title_feedback_mentions_length_and_band():
    short = TitleAnalyzer().analyze(ExtractedDocument(title="Home"))
    assert "4 characters" in short.feedback
    assert "50-60" in short.feedback
    assert "too short" in short.feedback

    long = TitleAnalyzer().analyze(ExtractedDocument(title="x" * 75))
    assert "75 characters" in long.feedback
    assert "too long" in long.feedback


def test_missing_title_feedback():
    verdict = TitleAnalyzer().analyze(ExtractedDocument(title=""))
    assert verdict.feedback.startswith("Missing title tag")
    assert verdict.content == ""


def test_title_is_trimmed_before_measuring():
    verdict = TitleAnalyzer().analyze(ExtractedDocument(title="   " + "a" * 30 + "   "))
    assert verdict.status == Status.GOOD
    assert verdict.content == "a" * 30


def test_description_feedback_uses_its_own_band():
    verdict = DescriptionAnalyzer().analyze(ExtractedDocument(meta_description="Short one"))
    assert "120-160" in verdict.feedback
    assert "9 characters" in verdict.feedback


def test_meta_tag_rows_fixed_order(complete_doc):
    title = TitleAnalyzer().analyze(complete_doc)
    description = DescriptionAnalyzer().analyze(complete_doc)
    rows = build_meta_tag_rows(complete_doc, title, description)

    assert [r.type for r in rows] == list(META_TAG_ROW_TYPES)
    assert len(rows) == 6


def test_meta_tag_rows_all_present(complete_doc):
    title = TitleAnalyzer().analyze(complete_doc)
    description = DescriptionAnalyzer().analyze(complete_doc)
    rows = {r.type: r for r in build_meta_tag_rows(complete_doc, title, description)}

    assert rows["Title"].status == title.status
    assert rows["Title"].recommendation == title.feedback
    assert rows["Meta Description"].recommendation == description.feedback
    # keywords are never better than a warning
    assert rows["Meta Keywords"].status == Status.WARNING
    assert rows["Canonical URL"].status == Status.GOOD
    assert rows["Robots Meta"].status == Status.GOOD
    assert rows["Viewport"].status == Status.GOOD
    assert rows["Canonical URL"].recommendation == "No change needed"


def test_meta_tag_rows_all_missing():
    doc = ExtractedDocument()
    title = TitleAnalyzer().analyze(doc)
    description = DescriptionAnalyzer().analyze(doc)
    rows = {r.type: r for r in build_meta_tag_rows(doc, title, description)}

    assert rows["Title"].status == Status.ERROR
    assert rows["Meta Description"].status == Status.ERROR
    assert rows["Meta Keywords"].status == Status.ERROR
    assert rows["Canonical URL"].status == Status.ERROR
    assert rows["Viewport"].status == Status.ERROR

    robots = rows["Robots Meta"]
    assert robots.status == Status.WARNING
    assert robots.content == "index, follow"


def test_empty_attribute_counts_as_missing(make_doc):
    doc = make_doc(canonical_url="", keywords="")
    title = TitleAnalyzer().analyze(doc)
    description = DescriptionAnalyzer().analyze(doc)
    rows = {r.type: r for r in build_meta_tag_rows(doc, title, description)}

    assert rows["Canonical URL"].status == Status.ERROR
    assert rows["Meta Keywords"].status == Status.ERROR


def test_length_analyzer_requires_text_of():
    class NoText(LengthAnalyzer):
        def analyze(self, doc, page_speed=None):
            return None

    with pytest.raises(TypeError):
        NoText()
