from __future__ import annotations

import dataclasses

import pytest

from models import ExtractedDocument, PageSpeedMetadata

TITLE = "Acme Widgets - Durable tools for every workshop"          # 47 chars
DESCRIPTION = ("Durable widgets for workshops. " * 4).strip()          # 123 chars
STYLE = "@media (max-width: 600px) { button { min-height: 44px; font-size: 1rem; } }"

FULL_HTML = f"""<!DOCTYPE html>
<html>
<head>
  <title>{TITLE}</title>
  <meta name="description" content="{DESCRIPTION}">
  <meta name="keywords" content="widgets, tools">
  <meta name="robots" content="index, follow">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="canonical" href="https://example.com/widgets">
  <meta property="og:title" content="Acme Widgets">
  <meta property="og:description" content="Durable widgets">
  <meta property="og:image" content="https://example.com/og.jpg">
  <meta property="og:url" content="https://example.com/widgets">
  <meta property="og:type" content="website">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="Acme Widgets">
  <meta name="twitter:description" content="Durable widgets">
  <meta name="twitter:image" content="https://example.com/tw.jpg">
  <style>{STYLE}</style>
</head>
<body>
  <div style="display: flex">
    <img src="/a.jpg" srcset="/a-2x.jpg 2x" alt="Widget">
  </div>
</body>
</html>
"""

EMPTY_HTML = "<html><head></head><body></body></html>"


@pytest.fixture
def full_html() -> str:
    return FULL_HTML


@pytest.fixture
def empty_html() -> str:
    return EMPTY_HTML


@pytest.fixture
def fast() -> PageSpeedMetadata:
    return PageSpeedMetadata(load_time_ms=500, resource_size_kb=42.0, request_count=1)


@pytest.fixture
def complete_doc() -> ExtractedDocument:
    """An ExtractedDocument that passes every check."""
    return ExtractedDocument(
        title=TITLE,
        meta_description=DESCRIPTION,
        og_title="Acme Widgets",
        og_description="Durable widgets",
        og_image="https://example.com/og.jpg",
        og_url="https://example.com/widgets",
        og_type="website",
        twitter_card="summary_large_image",
        twitter_title="Acme Widgets",
        twitter_description="Durable widgets",
        twitter_image="https://example.com/tw.jpg",
        keywords="widgets, tools",
        canonical_url="https://example.com/widgets",
        robots="index, follow",
        viewport="width=device-width, initial-scale=1",
        meta_tag_count=13,
        style_blocks=(STYLE,),
        uses_flexbox=True,
        has_responsive_images=True,
    )


@pytest.fixture
def make_doc(complete_doc):
    """Factory: complete_doc with selected fields overridden."""
    def _make(**overrides) -> ExtractedDocument:
        return dataclasses.replace(complete_doc, **overrides)
    return _make
