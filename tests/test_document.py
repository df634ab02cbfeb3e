from __future__ import annotations

from extractor.document import HtmlDocument
from extractor.extract import extract_document


def test_title_text_is_trimmed():
    doc = HtmlDocument("<html><head><title>\n  Hello World  \n</title></head></html>")
    assert doc.get_title_text() == "Hello World"


def test_missing_title_is_empty_string():
    assert HtmlDocument("<html></html>").get_title_text() == ""


def test_get_attr_first_match_and_missing():
    doc = HtmlDocument(
        '<meta name="robots" content="noindex">'
        '<meta name="robots" content="index">'
    )
    assert doc.get_attr('meta[name="robots"]') == "noindex"
    assert doc.get_attr('meta[name="viewport"]') is None
    assert doc.get_attr('meta[name="robots"]', "data-missing") is None


def test_get_attr_joins_multi_valued_attributes():
    doc = HtmlDocument('<link rel="canonical alternate" href="/x">')
    assert doc.get_attr("link", "rel") == "canonical alternate"


def test_count_and_style_blocks():
    doc = HtmlDocument(
        "<head><meta charset='utf-8'><meta name='a' content='b'>"
        "<style>a { color: red }</style><style>@media print {}</style></head>"
    )
    assert doc.count_elements("meta") == 2
    assert doc.get_style_block_texts() == ["a { color: red }", "@media print {}"]


def test_responsive_image_markup():
    assert HtmlDocument('<img src="a.jpg" srcset="a2.jpg 2x">').has_responsive_image_markup()
    assert HtmlDocument('<picture><source srcset="a.webp"><img src="a.jpg"></picture>').has_responsive_image_markup()
    assert not HtmlDocument('<img src="a.jpg">').has_responsive_image_markup()


def test_inline_style_lookup():
    doc = HtmlDocument('<div style="display: grid"></div><p>flex</p>')
    assert doc.has_inline_style_containing("grid")
    # text content is not a style attribute
    assert not doc.has_inline_style_containing("flex")


def test_extract_full_document(full_html, complete_doc):
    extracted = extract_document(HtmlDocument(full_html))

    assert extracted.title == complete_doc.title
    assert extracted.meta_description == complete_doc.meta_description
    assert extracted.og_type == "website"
    assert extracted.twitter_card == "summary_large_image"
    assert extracted.canonical_url == "https://example.com/widgets"
    assert extracted.meta_tag_count == 13
    assert extracted.uses_flexbox
    assert not extracted.uses_grid
    assert extracted.has_responsive_images
    assert extracted.style_blocks == complete_doc.style_blocks


def test_extract_empty_document(empty_html):
    extracted = extract_document(HtmlDocument(empty_html))

    assert extracted.title == ""
    assert extracted.meta_description == ""
    assert extracted.og_title is None
    assert extracted.canonical_url is None
    assert extracted.meta_tag_count == 0
    assert extracted.style_blocks == ()


def test_empty_attribute_is_kept_as_empty_string():
    extracted = extract_document(HtmlDocument('<link rel="canonical" href=""><meta name="viewport" content="">'))
    assert extracted.canonical_url == ""
    assert extracted.viewport == ""


def test_social_tags_are_keyed_by_property_and_name():
    # og uses property=, twitter uses name=
    extracted = extract_document(HtmlDocument(
        '<meta name="og:title" content="wrong">'
        '<meta property="twitter:card" content="wrong">'
    ))
    assert extracted.og_title is None
    assert extracted.twitter_card is None


class _StubDocument:
    """Minimal accessor: proves extraction only needs the six query methods."""

    def __init__(self, attrs):
        self.attrs = attrs

    def get_title_text(self):
        return "  Stub title  "

    def get_attr(self, selector, attribute="content"):
        return self.attrs.get((selector, attribute))

    def count_elements(self, selector):
        return 3

    def get_style_block_texts(self):
        return ["@media screen {}"]

    def has_responsive_image_markup(self):
        return False

    def has_inline_style_containing(self, pattern):
        return pattern == "grid"


def test_extract_from_any_accessor():
    stub = _StubDocument({
        ('meta[name="description"]', "content"): "Stub description",
        ('link[rel="canonical"]', "href"): "https://stub.test/",
    })
    extracted = extract_document(stub)

    assert extracted.title == "Stub title"
    assert extracted.meta_description == "Stub description"
    assert extracted.canonical_url == "https://stub.test/"
    assert extracted.meta_tag_count == 3
    assert extracted.uses_grid
    assert not extracted.uses_flexbox
