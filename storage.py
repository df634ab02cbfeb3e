"""
In-memory store of analysis results, keyed by URL.
"""
from __future__ import annotations

import json
import logging
import threading
from collections import OrderedDict
from typing import Optional

from config import DEFAULT_RECENT_LIMIT
from models import AnalysisResult

logger = logging.getLogger(__name__)


class AnalysisStore:
    """
    Latest result per URL. Saving a URL again replaces its entry and makes it
    the most recent one.
    """

    def __init__(self):
        self._results: "OrderedDict[str, AnalysisResult]" = OrderedDict()
        self._lock = threading.Lock()

    def save(self, result: AnalysisResult) -> AnalysisResult:
        with self._lock:
            self._results.pop(result.url, None)
            self._results[result.url] = result
        logger.debug("Stored analysis for %s (%d total)", result.url, len(self))
        return result

    def get(self, url: str) -> Optional[AnalysisResult]:
        with self._lock:
            return self._results.get(url)

    def recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[AnalysisResult]:
        """Latest first."""
        if limit <= 0:
            return []
        with self._lock:
            items = list(self._results.values())
        return list(reversed(items))[:limit]

    def clear(self) -> None:
        with self._lock:
            self._results.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def __contains__(self, url: str) -> bool:
        with self._lock:
            return url in self._results

    # ── Serialisation ─────────────────────────────────────────────────────────

    def export_json(self) -> str:
        """Oldest first, so load_json() restores the same recency order."""
        with self._lock:
            blobs = [r.to_dict() for r in self._results.values()]
        return json.dumps(blobs, indent=2, sort_keys=True)

    def load_json(self, text: str) -> int:
        blobs = json.loads(text)
        if not isinstance(blobs, list):
            raise ValueError("Expected a JSON list of analyses")

        results = [AnalysisResult.from_dict(blob) for blob in blobs]
        for result in results:
            self.save(result)
        logger.info("Loaded %d stored analyses", len(results))
        return len(results)
