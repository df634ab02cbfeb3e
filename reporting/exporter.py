"""
Converts AnalysisResult data to Pandas DataFrames, CSV bytes and JSON for export.
"""
from __future__ import annotations

import io
import json

import pandas as pd

from models import AnalysisResult, CategoryScore, Status


# ── Meta tag table ─────────────────────────────────────────────────────────────

def meta_tags_to_df(result: AnalysisResult) -> pd.DataFrame:
    rows = []
    for row in result.meta_tags:
        rows.append({
            "Tag":            row.type,
            "Content":        row.content or "",
            "Status":         row.status.upper(),
            "Recommendation": row.recommendation,
        })
    return pd.DataFrame(rows, columns=["Tag", "Content", "Status", "Recommendation"])


# ── Recommendations ────────────────────────────────────────────────────────────

def recommendations_to_df(result: AnalysisResult) -> pd.DataFrame:
    if not result.recommendations:
        return pd.DataFrame(columns=["#", "Status", "Recommendation", "Description", "Example"])

    rows = []
    for idx, rec in enumerate(result.recommendations, start=1):
        rows.append({
            "#":              idx,
            "Status":         rec.status.upper(),
            "Recommendation": rec.title,
            "Description":    rec.description,
            "Example":        rec.example_code or "",
        })
    # generation order is meaningful; do not sort
    return pd.DataFrame(rows)


# ── Category scores ────────────────────────────────────────────────────────────

def category_scores_to_df(scores: list[CategoryScore]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Category": s.name, "Score": s.score, "Status": s.status.upper()} for s in scores],
        columns=["Category", "Score", "Status"],
    )


# ── History ────────────────────────────────────────────────────────────────────

def history_to_df(results: list[AnalysisResult]) -> pd.DataFrame:
    if not results:
        return pd.DataFrame()

    rows = []
    for r in results:
        by_status = r.recommendations_by_status
        rows.append({
            "URL":             r.url,
            "Score":           r.score,
            "Title":           r.title,
            "Meta Tags":       r.tag_count,
            "Mobile":          r.mobile_friendliness.score,
            "Load (ms)":       round(r.page_speed.load_time, 0),
            "Errors":          len(by_status.get(Status.ERROR, [])),
            "Warnings":        len(by_status.get(Status.WARNING, [])),
        })
    return pd.DataFrame(rows)


# ── Export ─────────────────────────────────────────────────────────────────────

def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def to_json_bytes(result: AnalysisResult) -> bytes:
    """Deterministic: identical results give identical bytes."""
    return json.dumps(result.to_dict(), indent=2, sort_keys=True, ensure_ascii=False).encode("utf-8")
