"""
Serialization Utilities

To/from JSON helpers for question banks and exam templates.

- ``serialize_*`` / ``deserialize_*`` convert between models and dicts
- Deserialization validates input before building models
- ``load_*`` / ``save_*`` read and write JSON files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from examtex.errors import SchemaValidationError

from ..models.questions import QuestionBank
from ..models.templates import ExamTemplate
from ..schemas.validator import validate_exam_template, validate_question_bank


# ─────────────────────────────────────────────────────────────────────────────
# Question Bank Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question_bank(bank: QuestionBank) -> dict[str, Any]:
    return bank.to_dict()


def deserialize_question_bank(data: dict[str, Any], *, strict: bool = False) -> QuestionBank:
    """
    Build a QuestionBank from a dictionary.

    Args:
        data: Question bank dictionary
        strict: Run full JSON schema validation first

    Raises:
        SchemaValidationError: If the data is invalid
    """
    validate_question_bank(data, strict=strict)
    try:
        return QuestionBank.from_dict(data)
    except ValueError as e:
        raise SchemaValidationError(f"Invalid question bank: {e}") from e


# ─────────────────────────────────────────────────────────────────────────────
# Exam Template Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_exam_template(template: ExamTemplate) -> dict[str, Any]:
    return template.to_dict()


def deserialize_exam_template(data: dict[str, Any], *, strict: bool = False) -> ExamTemplate:
    """
    Build an ExamTemplate from a dictionary.

    Raises:
        SchemaValidationError: If the data is invalid
    """
    validate_exam_template(data, strict=strict)
    try:
        return ExamTemplate.from_dict(data)
    except ValueError as e:
        raise SchemaValidationError(f"Invalid exam template: {e}") from e


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def _read_json(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaValidationError(f"Invalid JSON in {path}: {e}", path=str(path)) from e


def _write_json(data: dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_question_bank(path: Path, *, strict: bool = False) -> QuestionBank:
    return deserialize_question_bank(_read_json(Path(path)), strict=strict)


def save_question_bank(bank: QuestionBank, path: Path) -> None:
    _write_json(serialize_question_bank(bank), Path(path))


def load_exam_template(path: Path, *, strict: bool = False) -> ExamTemplate:
    return deserialize_exam_template(_read_json(Path(path)), strict=strict)


def save_exam_template(template: ExamTemplate, path: Path) -> None:
    _write_json(serialize_exam_template(template), Path(path))
