from __future__ import annotations

import pytest

from analyzers.social import OpenGraphAnalyzer, TwitterCardAnalyzer
from models import ExtractedDocument, Status


def _og(title=None, description=None, image=None, url=None, type=None):
    return OpenGraphAnalyzer().analyze(ExtractedDocument(
        og_title=title, og_description=description, og_image=image, og_url=url, og_type=type,
    ))


def _tw(card=None, title=None, description=None, image=None):
    return TwitterCardAnalyzer().analyze(ExtractedDocument(
        twitter_card=card, twitter_title=title, twitter_description=description, twitter_image=image,
    ))


def test_open_graph_all_missing_is_error():
    verdict = _og()
    assert verdict.status == Status.ERROR
    assert verdict.feedback.startswith("No Open Graph tags found")


@pytest.mark.parametrize("fields", [
    {"title": "T"},
    {"title": "T", "description": "D"},
    {"image": "I"},
    {"description": "D", "image": "I"},
])
def test_open_graph_partial_is_warning(fields):
    assert _og(**fields).status == Status.WARNING


def test_open_graph_complete_is_good():
    verdict = _og(title="T", description="D", image="I")
    assert verdict.status == Status.GOOD
    assert verdict.feedback == "All essential Open Graph tags are present."


def test_open_graph_url_and_type_are_not_graded():
    # url/type present but nothing else
    assert _og(url="https://example.com", type="website").status == Status.ERROR
    # url/type missing with the graded three present
    assert _og(title="T", description="D", image="I").status == Status.GOOD


def test_open_graph_verdict_carries_raw_values():
    verdict = _og(title="T", description="D", image="I", url="U", type="article")
    assert (verdict.title, verdict.description, verdict.image, verdict.url, verdict.type) == (
        "T", "D", "I", "U", "article",
    )


def test_twitter_all_missing_is_error():
    assert _tw().status == Status.ERROR


@pytest.mark.parametrize("missing", ["card", "title", "description", "image"])
def test_twitter_any_one_missing_is_warning(missing):
    fields = {"card": "summary", "title": "T", "description": "D", "image": "I"}
    fields[missing] = None
    assert _tw(**fields).status == Status.WARNING


def test_twitter_card_alone_is_warning():
    assert _tw(card="summary").status == Status.WARNING


def test_twitter_complete_is_good():
    verdict = _tw(card="summary", title="T", description="D", image="I")
    assert verdict.status == Status.GOOD
    assert verdict.card == "summary"


def test_empty_strings_count_as_missing():
    assert _og(title="", description="", image="").status == Status.ERROR
    assert _tw(card="", title="", description="", image="").status == Status.ERROR
