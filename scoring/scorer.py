"""
Overall score calculator.

Scoring model:
- Start at 100 and walk DEDUCTION_RULES in order. Every rule whose predicate
  holds subtracts its penalty; rules are independent and stack.
- The result is clamped to [0, 100].
- Category scores are a derived view for reporting and never feed back into
  the overall score.
"""
from __future__ import annotations

import math
from typing import Callable, NamedTuple

from config import (
    CATEGORY_GOOD_SCORE,
    CATEGORY_WARNING_SCORE,
    DESCRIPTION_DEDUCTIONS,
    MAX_SCORE,
    MIN_SCORE,
    MISSING_CANONICAL_DEDUCTION,
    MISSING_VIEWPORT_DEDUCTION,
    MOBILE_FAIR_DEDUCTION,
    MOBILE_GOOD_SCORE,
    MOBILE_POOR_DEDUCTION,
    MOBILE_WARNING_SCORE,
    OPEN_GRAPH_DEDUCTIONS,
    PAGE_SPEED_SCORE_FAST_MS,
    PAGE_SPEED_SCORE_SLOW_MS,
    STATUS_POINTS,
    TITLE_DEDUCTIONS,
    TWITTER_DEDUCTIONS,
)
from models import CategoryScore, Deduction, MetaTagRow, Status, VerdictSet


class DeductionRule(NamedTuple):
    name: str
    applies: Callable[[VerdictSet], bool]
    penalty: int


def _status_rule(name: str, pick: Callable[[VerdictSet], str], status: str, table: dict[str, int]) -> DeductionRule:
    return DeductionRule(name, lambda v: pick(v).status == status, table[status])


DEDUCTION_RULES: list[DeductionRule] = [
    _status_rule("title_warning",       lambda v: v.title,       Status.WARNING, TITLE_DEDUCTIONS),
    _status_rule("title_error",         lambda v: v.title,       Status.ERROR,   TITLE_DEDUCTIONS),
    _status_rule("description_warning", lambda v: v.description, Status.WARNING, DESCRIPTION_DEDUCTIONS),
    _status_rule("description_error",   lambda v: v.description, Status.ERROR,   DESCRIPTION_DEDUCTIONS),
    _status_rule("open_graph_warning",  lambda v: v.open_graph,  Status.WARNING, OPEN_GRAPH_DEDUCTIONS),
    _status_rule("open_graph_error",    lambda v: v.open_graph,  Status.ERROR,   OPEN_GRAPH_DEDUCTIONS),
    _status_rule("twitter_warning",     lambda v: v.twitter,     Status.WARNING, TWITTER_DEDUCTIONS),
    _status_rule("twitter_error",       lambda v: v.twitter,     Status.ERROR,   TWITTER_DEDUCTIONS),
    DeductionRule("missing_canonical", lambda v: not v.has_canonical, MISSING_CANONICAL_DEDUCTION),
    DeductionRule("missing_viewport",  lambda v: not v.has_viewport,  MISSING_VIEWPORT_DEDUCTION),
    DeductionRule(
        "mobile_poor",
        lambda v: v.mobile.score < MOBILE_WARNING_SCORE,
        MOBILE_POOR_DEDUCTION,
    ),
    DeductionRule(
        "mobile_fair",
        lambda v: MOBILE_WARNING_SCORE <= v.mobile.score < MOBILE_GOOD_SCORE,
        MOBILE_FAIR_DEDUCTION,
    ),
]


def score_breakdown(verdicts: VerdictSet) -> list[Deduction]:
    """Every deduction that fired, in rule order."""
    return [
        Deduction(rule=rule.name, points=rule.penalty)
        for rule in DEDUCTION_RULES
        if rule.applies(verdicts)
    ]


def compute_score(verdicts: VerdictSet) -> int:
    total = MAX_SCORE - sum(d.points for d in score_breakdown(verdicts))
    return int(max(MIN_SCORE, min(MAX_SCORE, total)))


# ── Category view ──────────────────────────────────────────────────────────────

def status_points(status: str) -> int:
    return STATUS_POINTS.get(status, 0)


def status_from_score(score: float) -> str:
    if score >= CATEGORY_GOOD_SCORE:
        return Status.GOOD
    elif score >= CATEGORY_WARNING_SCORE:
        return Status.WARNING
    else:
        return Status.ERROR


def page_speed_score(load_time_ms: float) -> int:
    """100 at or below the fast mark, 0 at or above the slow mark, linear between."""
    if load_time_ms <= PAGE_SPEED_SCORE_FAST_MS:
        return 100
    if load_time_ms >= PAGE_SPEED_SCORE_SLOW_MS:
        return 0
    span = PAGE_SPEED_SCORE_SLOW_MS - PAGE_SPEED_SCORE_FAST_MS
    return _round_half_up(100 - (load_time_ms - PAGE_SPEED_SCORE_FAST_MS) / span * 100)


def _mean_points(statuses: list[str]) -> int:
    if not statuses:
        return 0
    return _round_half_up(sum(status_points(s) for s in statuses) / len(statuses))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def category_scores(verdicts: VerdictSet, meta_tags: tuple[MetaTagRow, ...]) -> list[CategoryScore]:
    basic = _mean_points([verdicts.title.status, verdicts.description.status])
    social = _mean_points([verdicts.open_graph.status, verdicts.twitter.status])
    meta = _mean_points([row.status for row in meta_tags])

    return [
        CategoryScore("Basic SEO",    basic,  status_from_score(basic)),
        CategoryScore("Social Media", social, status_from_score(social)),
        CategoryScore("Mobile",       verdicts.mobile.score, verdicts.mobile.status),
        CategoryScore("Page Speed",   page_speed_score(verdicts.page_speed.load_time), verdicts.page_speed.status),
        CategoryScore("Meta Tags",    meta,   status_from_score(meta)),
    ]


def score_label(score: float) -> str:
    if score >= 90:
        return "Excellent"
    elif score >= 75:
        return "Good"
    elif score >= 50:
        return "Needs Work"
    else:
        return "Poor"


def score_color(score: float) -> str:
    if score >= 90:
        return "#00C851"
    elif score >= 75:
        return "#FFD700"
    elif score >= 50:
        return "#FF8800"
    else:
        return "#FF4444"
