"""
Module: builder.layout.config

Purpose:
    Configuration for the multi-page layout engine.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Used By:
    - builder.layout.paginator
    - builder.compositor
"""

from __future__ import annotations

from dataclasses import dataclass

from examtex.core.models import DEFAULT_EXAM_TIME

DEFAULT_QUESTIONS_PER_PAGE = 5
PAGE_BREAK = r"\newpage"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Attributes:
        questions_per_page: Page capacity in questions for multi-page mode
        exam_time: Default exam duration in minutes for {EXAM_TIME}
        page_break: Marker inserted between pages

    Example:
        >>> LayoutConfig(questions_per_page=3).questions_per_page
        3
    """
    questions_per_page: int = DEFAULT_QUESTIONS_PER_PAGE
    exam_time: int = DEFAULT_EXAM_TIME
    page_break: str = PAGE_BREAK

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.questions_per_page < 1:
            raise ValueError(f"questions_per_page must be >= 1: {self.questions_per_page}")
        if self.exam_time < 0:
            raise ValueError(f"exam_time must be non-negative: {self.exam_time}")
        if not self.page_break.strip():
            raise ValueError("page_break must not be blank")
