"""
BeautifulSoup-backed document accessor.

Anything that exposes the same six query methods can be handed to
`extract_document()`; this is the implementation used for fetched HTML.
"""
from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup


class HtmlDocument:
    """Read-only query surface over one parsed HTML document."""

    def __init__(self, html: str):
        self.html = html or ""
        try:
            self.soup = BeautifulSoup(self.html, "lxml")
        except Exception:
            self.soup = BeautifulSoup(self.html, "html.parser")

    def get_title_text(self) -> str:
        title_tag = self.soup.find("title")
        if title_tag is None:
            return ""
        return title_tag.get_text().strip()

    def get_attr(self, selector: str, attribute: str = "content") -> Optional[str]:
        """Attribute value of the first element matching `selector`, or None."""
        tag = self.soup.select_one(selector)
        if tag is None:
            return None
        value = tag.get(attribute)
        if isinstance(value, list):
            # multi-valued attributes (class, rel) come back as lists
            value = " ".join(value)
        return value

    def count_elements(self, selector: str) -> int:
        return len(self.soup.select(selector))

    def get_style_block_texts(self) -> list[str]:
        return [style.get_text() for style in self.soup.find_all("style")]

    def has_responsive_image_markup(self) -> bool:
        return self.soup.select_one("img[srcset], picture source") is not None

    def has_inline_style_containing(self, pattern: str) -> bool:
        for tag in self.soup.find_all(style=True):
            if pattern in (tag.get("style") or ""):
                return True
        return False
