"""
Core data models for the SEO Meta Tag Analyzer.
All modules import from here; nothing else is cross-imported at this level.

Everything produced by an analysis is a frozen dataclass: a result is built
once and never mutated afterwards. `AnalysisResult.to_dict()` is the JSON wire
shape that gets persisted and served, so its camelCase keys must stay stable.

NOTE: `from __future__ import annotations` is intentionally omitted here.
Python 3.13.0 has a regression (bpo-121814) where that import causes a crash
in the dataclasses decorator when the module is not yet fully registered in
sys.modules. Python 3.9+ supports generic aliases (list[str], dict[str, Any])
natively, so the future import is unnecessary.
"""

from dataclasses import dataclass
from typing import Any, Optional

from config import DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT


# ── Status ────────────────────────────────────────────────────────────────────
class Status:
    GOOD    = "good"
    WARNING = "warning"
    ERROR   = "error"

    ALL = [GOOD, WARNING, ERROR]

    # good > warning > error
    RANK = {
        GOOD:    2,
        WARNING: 1,
        ERROR:   0,
    }

    COLORS = {
        GOOD:    "#00C851",
        WARNING: "#FFA500",
        ERROR:   "#FF4B4B",
    }

    ICONS = {
        GOOD:    "🟢",
        WARNING: "🟡",
        ERROR:   "🔴",
    }

    @classmethod
    def validate(cls, value: str) -> str:
        if value not in cls.RANK:
            raise ValueError(f"Unknown status: {value!r}")
        return value


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


# ── Extraction ─────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ExtractedDocument:
    """Raw values pulled out of one parsed HTML document."""

    title: str = ""
    meta_description: str = ""

    # Open Graph
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    og_url: Optional[str] = None
    og_type: Optional[str] = None

    # Twitter Card
    twitter_card: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image: Optional[str] = None

    # Misc meta
    keywords: Optional[str] = None
    canonical_url: Optional[str] = None
    robots: Optional[str] = None
    viewport: Optional[str] = None
    meta_tag_count: int = 0

    # Mobile heuristic inputs
    style_blocks: tuple[str, ...] = ()
    uses_flexbox: bool = False
    uses_grid: bool = False
    has_responsive_images: bool = False


@dataclass(frozen=True)
class MobileSignals:
    viewport: bool = False
    responsive_design: bool = False
    touch_elements: bool = False
    font_readability: bool = False
    media_queries: bool = False


@dataclass(frozen=True)
class PageSpeedMetadata:
    load_time_ms: float
    resource_size_kb: Optional[float] = None
    request_count: Optional[int] = None


# ── Verdicts ───────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class FieldVerdict:
    status: str
    feedback: str
    content: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "content":  self.content,
            "status":   self.status,
            "feedback": self.feedback,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FieldVerdict":
        return cls(
            status=Status.validate(data["status"]),
            feedback=data["feedback"],
            content=data.get("content"),
        )


@dataclass(frozen=True)
class OpenGraphVerdict:
    status: str
    feedback: str
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None
    type: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "title":       self.title,
            "description": self.description,
            "image":       self.image,
            "url":         self.url,
            "type":        self.type,
            "status":      self.status,
            "feedback":    self.feedback,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OpenGraphVerdict":
        return cls(
            status=Status.validate(data["status"]),
            feedback=data["feedback"],
            title=data.get("title"),
            description=data.get("description"),
            image=data.get("image"),
            url=data.get("url"),
            type=data.get("type"),
        )


@dataclass(frozen=True)
class TwitterCardVerdict:
    status: str
    feedback: str
    card: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "card":        self.card,
            "title":       self.title,
            "description": self.description,
            "image":       self.image,
            "status":      self.status,
            "feedback":    self.feedback,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TwitterCardVerdict":
        return cls(
            status=Status.validate(data["status"]),
            feedback=data["feedback"],
            card=data.get("card"),
            title=data.get("title"),
            description=data.get("description"),
            image=data.get("image"),
        )


@dataclass(frozen=True)
class PageSpeedVerdict:
    load_time: float
    status: str
    feedback: str
    resource_size: Optional[float] = None   # KB
    request_count: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "loadTime":     self.load_time,
            "resourceSize": self.resource_size,
            "requestCount": self.request_count,
            "status":       self.status,
            "feedback":     self.feedback,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageSpeedVerdict":
        return cls(
            load_time=data["loadTime"],
            status=Status.validate(data["status"]),
            feedback=data["feedback"],
            resource_size=data.get("resourceSize"),
            request_count=data.get("requestCount"),
        )


@dataclass(frozen=True)
class MobileFriendlinessVerdict:
    score: int
    status: str
    viewport: bool
    responsive_design: bool
    touch_elements: bool
    font_readability: bool
    media_queries: bool
    feedback: str

    @property
    def signals(self) -> MobileSignals:
        return MobileSignals(
            viewport=self.viewport,
            responsive_design=self.responsive_design,
            touch_elements=self.touch_elements,
            font_readability=self.font_readability,
            media_queries=self.media_queries,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "score":            self.score,
            "status":           self.status,
            "viewport":         self.viewport,
            "responsiveDesign": self.responsive_design,
            "touchElements":    self.touch_elements,
            "fontReadability":  self.font_readability,
            "mediaQueries":     self.media_queries,
            "feedback":         self.feedback,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MobileFriendlinessVerdict":
        return cls(
            score=int(data["score"]),
            status=Status.validate(data["status"]),
            viewport=bool(data["viewport"]),
            responsive_design=bool(data["responsiveDesign"]),
            touch_elements=bool(data["touchElements"]),
            font_readability=bool(data["fontReadability"]),
            media_queries=bool(data["mediaQueries"]),
            feedback=data["feedback"],
        )


# ── Table rows & recommendations ───────────────────────────────────────────────
@dataclass(frozen=True)
class MetaTagRow:
    type: str
    status: str
    recommendation: str
    content: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "type":           self.type,
            "content":        self.content,
            "status":         self.status,
            "recommendation": self.recommendation,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MetaTagRow":
        return cls(
            type=data["type"],
            status=Status.validate(data["status"]),
            recommendation=data["recommendation"],
            content=data.get("content"),
        )


@dataclass(frozen=True)
class Recommendation:
    title: str
    description: str
    status: str
    example_code: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "title":       self.title,
            "description": self.description,
            "status":      self.status,
            "exampleCode": self.example_code,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recommendation":
        return cls(
            title=data["title"],
            description=data["description"],
            status=Status.validate(data["status"]),
            example_code=data.get("exampleCode"),
        )


# ── Analyzer output bundle ─────────────────────────────────────────────────────
@dataclass(frozen=True)
class VerdictSet:
    """Everything the score aggregator and recommendation generator read."""

    doc: ExtractedDocument
    title: FieldVerdict
    description: FieldVerdict
    open_graph: OpenGraphVerdict
    twitter: TwitterCardVerdict
    page_speed: PageSpeedVerdict
    mobile: MobileFriendlinessVerdict

    @property
    def has_canonical(self) -> bool:
        return bool(self.doc.canonical_url)

    @property
    def has_viewport(self) -> bool:
        return bool(self.doc.viewport)


# ── Scoring views ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Deduction:
    rule: str
    points: int


@dataclass(frozen=True)
class CategoryScore:
    name: str
    score: int
    status: str


# ── Fetching ───────────────────────────────────────────────────────────────────
@dataclass
class FetchedPage:
    url: str
    status_code: int = 0
    reason: str = ""
    html: str = ""
    load_time_ms: float = 0.0
    resource_size_kb: Optional[float] = None
    request_count: int = 1
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and 200 <= self.status_code < 300

    @property
    def page_speed(self) -> PageSpeedMetadata:
        return PageSpeedMetadata(
            load_time_ms=self.load_time_ms,
            resource_size_kb=self.resource_size_kb,
            request_count=self.request_count,
        )


# ── Analysis configuration ─────────────────────────────────────────────────────
@dataclass
class AnalysisConfig:
    url: str
    force: bool = False
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


# ── Top-level analysis result ──────────────────────────────────────────────────
@dataclass(frozen=True)
class AnalysisResult:
    url: str
    title: str
    description: str
    tag_count: int
    score: int
    title_tag: FieldVerdict
    description_tag: FieldVerdict
    og_tags: OpenGraphVerdict
    twitter_tags: TwitterCardVerdict
    page_speed: PageSpeedVerdict
    mobile_friendliness: MobileFriendlinessVerdict
    meta_tags: tuple[MetaTagRow, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()

    @property
    def recommendations_by_status(self) -> dict[str, list[Recommendation]]:
        out: dict[str, list[Recommendation]] = {s: [] for s in Status.ALL}
        for rec in self.recommendations:
            out.setdefault(rec.status, []).append(rec)
        return out

    def to_dict(self) -> dict[str, Any]:
        return {
            "url":                self.url,
            "title":              self.title,
            "description":        self.description,
            "tagCount":           self.tag_count,
            "score":              self.score,
            "titleTag":           self.title_tag.to_dict(),
            "descriptionTag":     self.description_tag.to_dict(),
            "ogTags":             self.og_tags.to_dict(),
            "twitterTags":        self.twitter_tags.to_dict(),
            "pageSpeed":          self.page_speed.to_dict(),
            "mobileFriendliness": self.mobile_friendliness.to_dict(),
            "metaTags":           [row.to_dict() for row in self.meta_tags],
            "recommendations":    [rec.to_dict() for rec in self.recommendations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisResult":
        return cls(
            url=data["url"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            tag_count=int(data["tagCount"]),
            score=int(data["score"]),
            title_tag=FieldVerdict.from_dict(data["titleTag"]),
            description_tag=FieldVerdict.from_dict(data["descriptionTag"]),
            og_tags=OpenGraphVerdict.from_dict(data["ogTags"]),
            twitter_tags=TwitterCardVerdict.from_dict(data["twitterTags"]),
            page_speed=PageSpeedVerdict.from_dict(data["pageSpeed"]),
            mobile_friendliness=MobileFriendlinessVerdict.from_dict(data["mobileFriendliness"]),
            meta_tags=tuple(MetaTagRow.from_dict(r) for r in data.get("metaTags", [])),
            recommendations=tuple(Recommendation.from_dict(r) for r in data.get("recommendations", [])),
        )
