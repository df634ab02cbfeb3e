"""
Base class for all field analyzers.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from models import ExtractedDocument, PageSpeedMetadata, Status


class BaseAnalyzer(ABC):
    """All analyzers inherit from this class. Analyzers hold no state."""

    @abstractmethod
    def analyze(
        self,
        doc: ExtractedDocument,
        page_speed: Optional[PageSpeedMetadata] = None,
    ) -> Any:
        """Analyze one extracted document and return a verdict."""
        ...


class LengthAnalyzer(BaseAnalyzer):
    """
    Shared rule for text fields judged purely on character length:
    empty is an error, outside [min_chars, max_chars] is a warning.
    """

    label: str = "text"
    min_chars: int = 0
    max_chars: int = 0
    band: str = ""

    missing_feedback: str = ""
    good_feedback: str = ""

    @abstractmethod
    def text_of(self, doc: ExtractedDocument) -> str:
        """The raw text this analyzer measures."""
        ...

    def classify(self, text: str) -> tuple[str, str]:
        """Return (status, feedback) for `text`."""
        length = len(text)

        if length == 0:
            return Status.ERROR, self.missing_feedback
        if length < self.min_chars:
            return Status.WARNING, (
                f"Your {self.label} is too short at {length} characters "
                f"(recommended {self.band} characters)."
            )
        if length > self.max_chars:
            return Status.WARNING, (
                f"Your {self.label} is too long at {length} characters "
                f"(recommended {self.band} characters)."
            )
        return Status.GOOD, self.good_feedback
