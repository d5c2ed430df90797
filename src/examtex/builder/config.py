"""
Module: builder.config

Purpose:
    Per-call generation options. Immutable with validation on construction.

Key Classes:
    - GenerationOptions: How questions are selected and laid out

Used By:
    - builder.controller: ExamPaperGenerator
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from examtex.core.models import DEFAULT_EXAM_TIME

from .layout.config import DEFAULT_QUESTIONS_PER_PAGE, LayoutConfig


@dataclass(frozen=True)
class GenerationOptions:
    """
    Options for generating an exam paper (immutable).

    Attributes:
        title: Overrides the template name as the exam title
        question_count: Upper bound on questions (None = no bound)
        random_questions: Select randomly instead of in section order
        seed: Random seed for reproducible selection
        difficulty_distribution: Random mode: count per difficulty
        category_distribution: Random mode: count per category
        paginate: Multi-page mode instead of single-page
        questions_per_page: Page capacity in multi-page mode
        exam_time: Exam duration in minutes
        include_answer_sheet: Also produce the answer-sheet document

    Example:
        >>> options = GenerationOptions(random_questions=True, question_count=10, seed=1)
    """

    title: str = ""
    question_count: Optional[int] = None
    random_questions: bool = False
    seed: Optional[int] = None
    difficulty_distribution: Dict[str, int] = field(default_factory=dict)
    category_distribution: Dict[str, int] = field(default_factory=dict)
    paginate: bool = False
    questions_per_page: int = DEFAULT_QUESTIONS_PER_PAGE
    exam_time: int = DEFAULT_EXAM_TIME
    include_answer_sheet: bool = False

    def __post_init__(self) -> None:
        """Validate options on construction."""
        if self.question_count is not None and self.question_count < 0:
            raise ValueError(f"question_count must be non-negative: {self.question_count}")
        if self.questions_per_page < 1:
            raise ValueError(f"questions_per_page must be >= 1: {self.questions_per_page}")
        if self.exam_time < 0:
            raise ValueError(f"exam_time must be non-negative: {self.exam_time}")
        for name in ("difficulty_distribution", "category_distribution"):
            counts = getattr(self, name)
            if any(n < 0 for n in counts.values()):
                raise ValueError(f"{name} counts must be non-negative: {counts}")
        if self.difficulty_distribution and self.category_distribution:
            raise ValueError("Use either difficulty_distribution or category_distribution, not both")
        if (self.difficulty_distribution or self.category_distribution) and not self.random_questions:
            raise ValueError("Distributions require random_questions=True")

    @property
    def layout(self) -> LayoutConfig:
        """Layout configuration for the compositor."""
        return LayoutConfig(questions_per_page=self.questions_per_page, exam_time=self.exam_time)
