"""
Module: core.models.document

Purpose:
    Output of a compositor call: the final markup plus traceability data.

Key Classes:
    - PageRange: Which rendered questions landed on which page
    - GeneratedDocument: Final document(s), streams and totals
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple


@dataclass(frozen=True)
class PageRange:
    """
    Questions placed on one page (immutable).

    Attributes:
        page_number: 1-based page number
        start: Index of the first question in the rendered sequence
        stop: One past the last question index (slice semantics)
        question_ids: Ids of the questions on this page
    """
    page_number: int
    start: int
    stop: int
    question_ids: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {self.page_number}")
        if not 0 <= self.start <= self.stop:
            raise ValueError(f"Invalid range [{self.start}, {self.stop})")

    @property
    def count(self) -> int:
        return self.stop - self.start


@dataclass(frozen=True)
class GeneratedDocument:
    """
    Composed exam document (immutable).

    Attributes:
        document: Final markup with placeholders substituted
        answer_sheet: Parallel answer-sheet document, if an answer-sheet
            template was supplied
        body: Question body stream inserted at {CONTENT}
        answer_sheet_body: Answer entries inserted at {ANSWER_SHEET_CONTENT}
        layout: Layout stream inserted at {LAYOUT_ELEMENTS}
        total_points: Sum of points over the rendered questions
        page_count: Number of logical pages
        page_ranges: Per-page question ranges
    """
    document: str
    body: str
    answer_sheet_body: str
    layout: str
    total_points: Decimal
    page_count: int
    page_ranges: Tuple[PageRange, ...] = field(default_factory=tuple)
    answer_sheet: Optional[str] = None

    @property
    def question_count(self) -> int:
        return sum(r.count for r in self.page_ranges)
