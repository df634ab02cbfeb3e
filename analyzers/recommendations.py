"""
Recommendation generator.

Rules run in a fixed order and each one is gated independently, so the output
order is generation order (social, canonical, description, mobile, speed),
not severity order. Example snippets are static templates.
"""
from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from config import DESCRIPTION_MIN_CHARS
from models import Recommendation, Status, VerdictSet


OPEN_GRAPH_EXAMPLE = """<meta property="og:title" content="Your Page Title" />
<meta property="og:description" content="Your page description..." />
<meta property="og:image" content="https://yourdomain.com/image.jpg" />
<meta property="og:url" content="https://yourdomain.com/page" />
<meta property="og:type" content="website" />"""

TWITTER_EXAMPLE = """<meta name="twitter:card" content="summary_large_image" />
<meta name="twitter:title" content="Your Page Title" />
<meta name="twitter:description" content="Your page description..." />
<meta name="twitter:image" content="https://yourdomain.com/image.jpg" />"""

CANONICAL_EXAMPLE = '<link rel="canonical" href="https://yourdomain.com/page" />'

VIEWPORT_EXAMPLE = '<meta name="viewport" content="width=device-width, initial-scale=1.0" />'

RESPONSIVE_EXAMPLE = """.container {
  display: flex;
  flex-wrap: wrap;
}

@media (max-width: 768px) {
  .container {
    flex-direction: column;
  }
}"""

TOUCH_EXAMPLE = """button, a, input {
  min-height: 44px;
  min-width: 44px;
  touch-action: manipulation;
}"""

FONT_EXAMPLE = """html {
  font-size: 16px;
}

body {
  font-size: 1rem;
  line-height: 1.5;
}"""

CACHING_EXAMPLE = """# Cache static assets for one year
Cache-Control: public, max-age=31536000, immutable

# Revalidate HTML on every request
Cache-Control: no-cache"""


class RecommendationRule(NamedTuple):
    name: str
    applies: Callable[[VerdictSet], bool]
    build: Callable[[VerdictSet], Recommendation]


def _fixed(title: str, description: str, status: str, example: Optional[str] = None):
    rec = Recommendation(title=title, description=description, status=status, example_code=example)
    return lambda verdicts: rec


def _description_too_short(v: VerdictSet) -> bool:
    # a too-long description is a warning too, but has no recommendation
    return (
        v.description.status == Status.WARNING
        and len(v.description.content or "") < DESCRIPTION_MIN_CHARS
    )


def _page_speed_recommendation(v: VerdictSet) -> Recommendation:
    return Recommendation(
        title="Improve Page Speed",
        description=(
            "Your page takes too long to load. Enable compression, cache static "
            "assets with long-lived headers, and reduce the size of the HTML document."
        ),
        status=v.page_speed.status,
        example_code=CACHING_EXAMPLE,
    )


RECOMMENDATION_RULES: list[RecommendationRule] = [
    RecommendationRule(
        "open_graph",
        lambda v: v.open_graph.status != Status.GOOD,
        _fixed(
            "Add Open Graph Tags",
            "Open Graph metadata improves the way your content appears when shared on "
            "social platforms like Facebook, LinkedIn, and others.",
            Status.WARNING,
            OPEN_GRAPH_EXAMPLE,
        ),
    ),
    RecommendationRule(
        "twitter",
        lambda v: v.twitter.status != Status.GOOD,
        _fixed(
            "Add Twitter Card Tags",
            "Twitter Card tags ensure your content looks great when shared on Twitter "
            "with rich images and properly formatted text.",
            Status.WARNING,
            TWITTER_EXAMPLE,
        ),
    ),
    RecommendationRule(
        "canonical",
        lambda v: not v.has_canonical,
        _fixed(
            "Add Canonical URL",
            "A canonical URL helps prevent duplicate content issues by specifying the "
            "preferred version of a page.",
            Status.WARNING,
            CANONICAL_EXAMPLE,
        ),
    ),
    RecommendationRule(
        "description_length",
        _description_too_short,
        _fixed(
            "Meta Description Length",
            "Consider extending your meta description to between 120-160 characters to "
            "maximize visibility in search results.",
            Status.WARNING,
        ),
    ),
    RecommendationRule(
        "viewport",
        lambda v: not v.has_viewport,
        _fixed(
            "Add Viewport Meta Tag",
            "Without a viewport meta tag, mobile browsers render the page at desktop "
            "width and scale it down, making it hard to read.",
            Status.ERROR,
            VIEWPORT_EXAMPLE,
        ),
    ),
    RecommendationRule(
        "responsive_design",
        lambda v: not v.mobile.responsive_design,
        _fixed(
            "Implement Responsive Design",
            "Use flexible layouts (flexbox or grid), responsive images and media "
            "queries so the page adapts to different screen sizes.",
            Status.WARNING,
            RESPONSIVE_EXAMPLE,
        ),
    ),
    RecommendationRule(
        "touch_elements",
        lambda v: not v.mobile.touch_elements,
        _fixed(
            "Optimize for Touch Devices",
            "Make buttons and links large enough to tap comfortably, at least 44x44 "
            "pixels, with enough spacing between them.",
            Status.WARNING,
            TOUCH_EXAMPLE,
        ),
    ),
    RecommendationRule(
        "font_readability",
        lambda v: not v.mobile.font_readability,
        _fixed(
            "Improve Font Readability",
            "Use relative font units (rem, em) and a base font size of at least 16px "
            "so text is readable on small screens without zooming.",
            Status.WARNING,
            FONT_EXAMPLE,
        ),
    ),
    RecommendationRule(
        "page_speed",
        lambda v: v.page_speed.status != Status.GOOD,
        _page_speed_recommendation,
    ),
]


def generate_recommendations(verdicts: VerdictSet) -> tuple[Recommendation, ...]:
    recs: list[Recommendation] = []
    seen: set[str] = set()

    for rule in RECOMMENDATION_RULES:
        if not rule.applies(verdicts):
            continue
        rec = rule.build(verdicts)
        if rec.title in seen:
            continue
        seen.add(rec.title)
        recs.append(rec)

    return tuple(recs)
