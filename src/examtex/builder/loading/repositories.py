"""
Module: builder.loading.repositories

Purpose:
    Lookup of exam templates and question banks by id. The generator only
    depends on the two protocols; in-memory and JSON-directory
    implementations are provided.

Key Classes:
    - TemplateRepository, QuestionBankRepository: Lookup protocols
    - InMemoryTemplateRepository, InMemoryQuestionBankRepository
    - JsonTemplateRepository, JsonQuestionBankRepository: <id>.json files
    - LoaderError: File could not be loaded

Dependencies:
    - core.utils.serialization: JSON loading with validation

Used By:
    - builder.controller: ExamPaperGenerator
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

from examtex.core.models import ExamTemplate, QuestionBank
from examtex.core.utils.serialization import load_exam_template, load_question_bank
from examtex.errors import ExamTexError, SchemaValidationError

logger = logging.getLogger(__name__)


class LoaderError(ExamTexError):
    """Error loading a repository file."""
    pass


class TemplateRepository(Protocol):
    def get_by_id(self, template_id: str) -> Optional[ExamTemplate]:
        ...


class QuestionBankRepository(Protocol):
    def get_by_id(self, question_bank_id: str) -> Optional[QuestionBank]:
        ...


# ─────────────────────────────────────────────────────────────────────────────
# In-memory
# ─────────────────────────────────────────────────────────────────────────────

class InMemoryTemplateRepository:
    """Templates held in a dict keyed by id."""

    def __init__(self, templates: Iterable[ExamTemplate] = ()):
        self._templates: Dict[str, ExamTemplate] = {t.id: t for t in templates}

    def get_by_id(self, template_id: str) -> Optional[ExamTemplate]:
        return self._templates.get(template_id)

    def ids(self) -> List[str]:
        return list(self._templates)


class InMemoryQuestionBankRepository:
    """Question banks held in a dict keyed by id."""

    def __init__(self, banks: Iterable[QuestionBank] = ()):
        self._banks: Dict[str, QuestionBank] = {b.id: b for b in banks}

    def get_by_id(self, question_bank_id: str) -> Optional[QuestionBank]:
        return self._banks.get(question_bank_id)

    def ids(self) -> List[str]:
        return list(self._banks)


# ─────────────────────────────────────────────────────────────────────────────
# JSON directories
# ─────────────────────────────────────────────────────────────────────────────

class _JsonDirectory:
    def __init__(self, root: Path, *, strict: bool = False):
        self.root = Path(root)
        self.strict = strict
        if not self.root.is_dir():
            raise LoaderError(f"Repository directory does not exist: {self.root}")

    def _path(self, identifier: str) -> Optional[Path]:
        path = self.root / f"{identifier}.json"
        # Identifiers never address files outside the root.
        if path.resolve().parent != self.root.resolve() or not path.is_file():
            return None
        return path

    def ids(self) -> List[str]:
        return sorted(p.stem for p in self.root.glob("*.json"))


class JsonTemplateRepository(_JsonDirectory):
    """Templates stored as ``<root>/<id>.json``."""

    def get_by_id(self, template_id: str) -> Optional[ExamTemplate]:
        path = self._path(template_id)
        if path is None:
            logger.debug(f"Template file not found: {template_id}.json in {self.root}")
            return None
        try:
            return load_exam_template(path, strict=self.strict)
        except (OSError, SchemaValidationError) as e:
            raise LoaderError(f"Failed to load template {path}: {e}") from e


class JsonQuestionBankRepository(_JsonDirectory):
    """Question banks stored as ``<root>/<id>.json``."""

    def get_by_id(self, question_bank_id: str) -> Optional[QuestionBank]:
        path = self._path(question_bank_id)
        if path is None:
            logger.debug(f"Question bank file not found: {question_bank_id}.json in {self.root}")
            return None
        try:
            return load_question_bank(path, strict=self.strict)
        except (OSError, SchemaValidationError) as e:
            raise LoaderError(f"Failed to load question bank {path}: {e}") from e
