import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import examtex
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from examtex.core.models import (  # noqa: E402
    ExamTemplate,
    Question,
    QuestionBank,
    QuestionOption,
    QuestionType,
    TemplateSection,
)

RAW_TEMPLATE = (
    "TITLE={EXAM_TITLE}\n"
    "SUBJECT={SUBJECT}\n"
    "TIME={EXAM_TIME}\n"
    "POINTS={TOTAL_POINTS}\n"
    "LAYOUT>>{LAYOUT_ELEMENTS}<<\n"
    "BODY>>{CONTENT}<<\n"
    "ANSWERS>>{ANSWER_SHEET_CONTENT}<<\n"
)


# Common test fixtures
@pytest.fixture
def raw_template() -> str:
    """Minimal raw template exposing every stream."""
    return RAW_TEMPLATE


@pytest.fixture
def make_question():
    """Factory for questions with sensible defaults."""
    def _create(
        qid: str = "q1",
        qtype: QuestionType = QuestionType.ESSAY,
        content: str = "Explain.",
        points=5,
        options=(),
        correct_answer: str = "",
        difficulty: str = "",
        category: str = "",
    ) -> Question:
        return Question(
            id=qid,
            type=qtype,
            content=content,
            points=points,
            options=tuple(options),
            correct_answer=correct_answer,
            difficulty=difficulty,
            category=category,
        )
    return _create


@pytest.fixture
def choice_question(make_question) -> Question:
    return make_question(
        qid="mc1",
        qtype=QuestionType.MULTIPLE_CHOICE,
        content="Capital of France?",
        points=5,
        options=(QuestionOption("A", "Paris", True), QuestionOption("B", "Lyon")),
        correct_answer="A",
    )


@pytest.fixture
def make_template():
    """Factory for templates with one section per id tuple."""
    def _create(*section_ids, **kwargs) -> ExamTemplate:
        sections = tuple(
            TemplateSection(title=f"Part {i}", question_ids=tuple(ids))
            for i, ids in enumerate(section_ids, start=1)
        )
        kwargs.setdefault("id", "t1")
        kwargs.setdefault("name", "Midterm")
        kwargs.setdefault("description", "Mathematics")
        return ExamTemplate(sections=sections, **kwargs)
    return _create


@pytest.fixture
def make_bank(make_question):
    """Factory for a bank of n essay questions q1..qn worth 2 points each."""
    def _create(n: int = 4, bank_id: str = "bank1") -> QuestionBank:
        questions = tuple(make_question(qid=f"q{i}", points=2) for i in range(1, n + 1))
        return QuestionBank(id=bank_id, name="Bank", questions=questions)
    return _create
