"""
Module: builder.layout.models

Purpose:
    Immutable dataclasses describing page plans for multi-page layout.

Key Classes:
    - PagePlan: Questions assigned to one page

Dependencies:
    - dataclasses (std)
    - core.models: Question, PageRange
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from examtex.core.models import PageRange, Question


@dataclass(frozen=True)
class PagePlan:
    """
    Layout plan for a single page (immutable).

    Attributes:
        page_number: 1-based page number
        start: Index of the first question in the flattened list
        questions: Questions on this page, in order
    """
    page_number: int
    start: int
    questions: Tuple[Question, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError(f"page_number must be >= 1: {self.page_number}")
        if self.start < 0:
            raise ValueError(f"start must be non-negative: {self.start}")

    @property
    def stop(self) -> int:
        return self.start + len(self.questions)

    @property
    def is_empty(self) -> bool:
        return not self.questions

    def to_range(self) -> PageRange:
        return PageRange(
            page_number=self.page_number,
            start=self.start,
            stop=self.stop,
            question_ids=tuple(q.id for q in self.questions),
        )
