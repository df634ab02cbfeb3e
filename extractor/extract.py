"""
Turns a document accessor into an ExtractedDocument.
"""
from __future__ import annotations

from extractor import heuristics
from models import ExtractedDocument


def extract_document(document) -> ExtractedDocument:
    """
    Pull every raw value the analyzers need out of `document`.

    `document` only has to provide get_title_text, get_attr, count_elements,
    get_style_block_texts, has_responsive_image_markup and
    has_inline_style_containing (see extractor.document.HtmlDocument).
    """
    get = document.get_attr

    return ExtractedDocument(
        title=(document.get_title_text() or "").strip(),
        meta_description=get('meta[name="description"]') or "",

        og_title=get('meta[property="og:title"]'),
        og_description=get('meta[property="og:description"]'),
        og_image=get('meta[property="og:image"]'),
        og_url=get('meta[property="og:url"]'),
        og_type=get('meta[property="og:type"]'),

        twitter_card=get('meta[name="twitter:card"]'),
        twitter_title=get('meta[name="twitter:title"]'),
        twitter_description=get('meta[name="twitter:description"]'),
        twitter_image=get('meta[name="twitter:image"]'),

        keywords=get('meta[name="keywords"]'),
        canonical_url=get('link[rel="canonical"]', "href"),
        robots=get('meta[name="robots"]'),
        viewport=get('meta[name="viewport"]'),
        meta_tag_count=document.count_elements("meta"),

        style_blocks=tuple(document.get_style_block_texts()),
        uses_flexbox=heuristics.uses_flexbox(document),
        uses_grid=heuristics.uses_grid(document),
        has_responsive_images=heuristics.has_responsive_images(document),
    )
