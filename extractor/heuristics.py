"""
Substring heuristics standing in for real CSS / layout analysis.

These are deliberately crude: `"em"` in a style block counts as relative font
sizing even when it is part of an unrelated word. Every such check lives here
so the analyzers only ever see booleans.
"""
from __future__ import annotations

from typing import Iterable

from config import (
    FLEX_MARKERS,
    FONT_READABILITY_MARKERS,
    GRID_MARKERS,
    MEDIA_QUERY_MARKERS,
    TOUCH_FRIENDLY_MARKERS,
)
from models import ExtractedDocument, MobileSignals


# ── Element-level checks (need the document accessor) ─────────────────────────

def uses_flexbox(document) -> bool:
    return any(document.has_inline_style_containing(m) for m in FLEX_MARKERS)


def uses_grid(document) -> bool:
    return any(document.has_inline_style_containing(m) for m in GRID_MARKERS)


def has_responsive_images(document) -> bool:
    return document.has_responsive_image_markup()


# ── Style-block checks ─────────────────────────────────────────────────────────

def has_media_queries(style_blocks: Iterable[str]) -> bool:
    return _any_block_contains(style_blocks, MEDIA_QUERY_MARKERS)


def is_touch_friendly(style_blocks: Iterable[str]) -> bool:
    return _any_block_contains(style_blocks, TOUCH_FRIENDLY_MARKERS)


def has_readable_fonts(style_blocks: Iterable[str]) -> bool:
    return _any_block_contains(style_blocks, FONT_READABILITY_MARKERS)


def detect_mobile_signals(doc: ExtractedDocument) -> MobileSignals:
    media_queries = has_media_queries(doc.style_blocks)
    responsive = (
        doc.uses_flexbox
        or doc.uses_grid
        or doc.has_responsive_images
        or media_queries
    )
    return MobileSignals(
        viewport=bool(doc.viewport),
        responsive_design=responsive,
        touch_elements=is_touch_friendly(doc.style_blocks),
        font_readability=has_readable_fonts(doc.style_blocks),
        media_queries=media_queries,
    )


def _any_block_contains(style_blocks: Iterable[str], markers: Iterable[str]) -> bool:
    markers = tuple(markers)
    return any(marker in block for block in style_blocks for marker in markers)
