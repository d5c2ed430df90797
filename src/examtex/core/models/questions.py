"""
Module: core.models.questions

Purpose:
    Question, option and question-bank dataclasses. Immutable, validated
    on construction, with dict serialization.

Key Classes:
    - QuestionType: Closed set of renderable question kinds
    - QuestionOption: One labelled answer option
    - Question: A single exam question
    - QuestionBank: Named collection of questions

Dependencies:
    - dataclasses (std)
    - decimal (std)
    - core.utils.formatting

Used By:
    - builder.content.questions: Rendering
    - builder.selection.processor: Validation and selection
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from functools import cached_property
from typing import Any, Dict, Optional, Tuple

from ..utils.formatting import to_decimal


class QuestionType(Enum):
    """Question kinds with a dedicated rendering rule."""

    MULTIPLE_CHOICE = "multiple_choice"
    FILL_IN_BLANK = "fill_in_blank"
    ESSAY = "essay"
    TRUE_FALSE = "true_false"
    GENERIC = "generic"

    @classmethod
    def parse(cls, label: Optional[str]) -> "QuestionType":
        """
        Map a free-form type label to a QuestionType.

        Unrecognised labels map to GENERIC rather than raising.
        """
        if isinstance(label, QuestionType):
            return label
        key = (label or "").strip().lower().replace(" ", "_")
        return _TYPE_ALIASES.get(key, cls.GENERIC)


_TYPE_ALIASES: Dict[str, QuestionType] = {
    "multiple_choice": QuestionType.MULTIPLE_CHOICE,
    "multiple-choice": QuestionType.MULTIPLE_CHOICE,
    "choice": QuestionType.MULTIPLE_CHOICE,
    "fill_in_blank": QuestionType.FILL_IN_BLANK,
    "fill-in-blank": QuestionType.FILL_IN_BLANK,
    "fill_in_the_blank": QuestionType.FILL_IN_BLANK,
    "blank": QuestionType.FILL_IN_BLANK,
    "essay": QuestionType.ESSAY,
    "short_answer": QuestionType.ESSAY,
    "true_false": QuestionType.TRUE_FALSE,
    "true-false": QuestionType.TRUE_FALSE,
    "judgement": QuestionType.TRUE_FALSE,
    "generic": QuestionType.GENERIC,
}

# Types whose rendering and validation require an option list.
OPTION_TYPES = frozenset({QuestionType.MULTIPLE_CHOICE, QuestionType.TRUE_FALSE})


@dataclass(frozen=True)
class QuestionOption:
    """
    Answer option (immutable).

    Attributes:
        key: Option label like "A" (may be empty)
        value: Option text
        is_correct: Whether this option is a correct answer
    """
    key: str
    value: str
    is_correct: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "value": self.value, "is_correct": self.is_correct}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionOption":
        return cls(
            key=str(data.get("key", "")),
            value=str(data.get("value", "")),
            is_correct=bool(data.get("is_correct", False)),
        )


@dataclass(frozen=True)
class Question:
    """
    Exam question (immutable).

    Attributes:
        id: Opaque identifier, unique within a bank (may be empty before
            processing assigns one)
        type: Rendering kind
        content: Question text (raw, escaped at render time)
        points: Non-negative score as Decimal
        difficulty: Free-form difficulty tag like "Easy"
        category: Free-form category tag like "Algebra"
        options: Answer options in display order
        correct_answer: Correct key(s), comma separated
        type_label: Original type label, kept so unknown types round-trip

    Example:
        >>> q = Question(
        ...     id="q1",
        ...     type=QuestionType.MULTIPLE_CHOICE,
        ...     content="Capital of France?",
        ...     points=5,
        ...     options=(QuestionOption("A", "Paris", True), QuestionOption("B", "Lyon")),
        ...     correct_answer="A",
        ... )
        >>> q.points
        Decimal('5')
    """
    id: str
    type: QuestionType
    content: str
    points: Decimal = Decimal(0)
    difficulty: str = ""
    category: str = ""
    options: Tuple[QuestionOption, ...] = field(default_factory=tuple)
    correct_answer: str = ""
    type_label: str = ""

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValueError("Question id must not be None")
        if not isinstance(self.type, QuestionType):
            object.__setattr__(self, "type_label", self.type_label or str(self.type or ""))
            object.__setattr__(self, "type", QuestionType.parse(self.type))
        if not self.type_label:
            object.__setattr__(self, "type_label", self.type.value)
        object.__setattr__(self, "content", self.content or "")
        object.__setattr__(self, "points", to_decimal(self.points))
        if self.points < 0:
            raise ValueError(f"Question {self.id!r} has negative points: {self.points}")
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options or ()))

    @property
    def has_options(self) -> bool:
        return bool(self.options)

    @cached_property
    def correct_keys(self) -> Tuple[str, ...]:
        """Correct option keys, from correct_answer or flagged options."""
        keys = tuple(k.strip() for k in self.correct_answer.split(",") if k.strip())
        if keys:
            return keys
        return tuple(o.key for o in self.options if o.is_correct)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type_label,
            "content": self.content,
            "points": str(self.points),
            "difficulty": self.difficulty,
            "category": self.category,
            "options": [o.to_dict() for o in self.options],
            "correct_answer": self.correct_answer,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        label = str(data.get("type", ""))
        return cls(
            id=str(data.get("id", "")),
            type=QuestionType.parse(label),
            content=str(data.get("content", "")),
            points=data.get("points", 0),
            difficulty=str(data.get("difficulty", "")),
            category=str(data.get("category", "")),
            options=tuple(QuestionOption.from_dict(o) for o in data.get("options", [])),
            correct_answer=str(data.get("correct_answer", "")),
            type_label=label,
        )


@dataclass(frozen=True)
class QuestionBank:
    """
    Named collection of questions (immutable).

    Attributes:
        id: Bank identifier
        name: Display name
        description: Free text
        questions: Questions in bank order
    """
    id: str
    name: str
    questions: Tuple[Question, ...] = field(default_factory=tuple)
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))

    @cached_property
    def _index(self) -> Dict[str, Question]:
        return {q.id: q for q in self.questions if q.id}

    def get(self, question_id: str) -> Optional[Question]:
        return self._index.get(question_id)

    @property
    def total_points(self) -> Decimal:
        return sum((q.points for q in self.questions), Decimal(0))

    def __len__(self) -> int:
        return len(self.questions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "questions": [q.to_dict() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionBank":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            questions=tuple(Question.from_dict(q) for q in data.get("questions", [])),
        )
