"""
Module: core.models.templates

Purpose:
    Exam template structure: ordered sections with question references
    plus page decorations (header/footer text, seal line, paper size).

Key Classes:
    - TemplateStyle: Raw template family (basic / advanced / custom)
    - SealLinePosition: Page edge carrying the seal line
    - PaperSize: A4 or A3
    - TemplateSection: Titled group of question references
    - ExamTemplate: Complete template

Used By:
    - builder.compositor
    - builder.selection.processor: organize_sections
    - builder.templates.registry: Style lookup
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from ..utils.formatting import to_decimal
from .header import HeaderConfig


class TemplateStyle(Enum):
    BASIC = "basic"
    ADVANCED = "advanced"
    CUSTOM = "custom"


class SealLinePosition(Enum):
    LEFT = "left"
    RIGHT = "right"
    # Left on odd pages, right on even pages (duplex printing).
    ALTERNATE = "alternate"
    NONE = "none"


class PaperSize(Enum):
    A4 = "a4"
    A3 = "a3"

    @property
    def latex_option(self) -> str:
        return f"{self.value}paper"


@dataclass(frozen=True)
class TemplateSection:
    """
    Template section (immutable).

    Attributes:
        title: Section heading
        instructions: Optional instruction text shown under the heading
        question_ids: Question references, in display order
        question_count: Number of questions this section should hold when
            questions are organised into it (0 = unspecified)
        total_points: Nominal section points (informational)
    """
    title: str
    instructions: str = ""
    question_ids: Tuple[str, ...] = field(default_factory=tuple)
    question_count: int = 0
    total_points: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        if not isinstance(self.question_ids, tuple):
            object.__setattr__(self, "question_ids", tuple(self.question_ids))
        if self.question_count < 0:
            raise ValueError(f"question_count must be non-negative, got {self.question_count}")
        object.__setattr__(self, "total_points", to_decimal(self.total_points))

    def with_question_ids(self, question_ids: Iterable[str]) -> "TemplateSection":
        return replace(self, question_ids=tuple(question_ids))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "instructions": self.instructions,
            "question_ids": list(self.question_ids),
            "question_count": self.question_count,
            "total_points": str(self.total_points),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TemplateSection":
        return cls(
            title=str(data.get("title", "")),
            instructions=str(data.get("instructions", "")),
            question_ids=tuple(str(i) for i in data.get("question_ids", [])),
            question_count=int(data.get("question_count", 0)),
            total_points=data.get("total_points", 0),
        )


@dataclass(frozen=True)
class ExamTemplate:
    """
    Exam template (immutable).

    Attributes:
        id: Template identifier
        name: Exam name (default exam title)
        description: Free text, used as the default subject
        sections: Ordered sections
        header_content: Running header text (plain, escaped on output)
        footer_content: Running footer text (plain, escaped on output)
        style: Raw template family
        seal_line: Seal line edge
        paper_size: Paper size
        header_config: Optional title header configuration

    Example:
        >>> template = ExamTemplate(
        ...     id="t1",
        ...     name="Midterm",
        ...     sections=(TemplateSection("Part A", question_ids=("q1", "q2")),),
        ... )
    """
    id: str
    name: str
    sections: Tuple[TemplateSection, ...] = field(default_factory=tuple)
    description: str = ""
    header_content: str = ""
    footer_content: str = ""
    style: TemplateStyle = TemplateStyle.BASIC
    seal_line: SealLinePosition = SealLinePosition.NONE
    paper_size: PaperSize = PaperSize.A4
    header_config: Optional[HeaderConfig] = None

    def __post_init__(self) -> None:
        if not isinstance(self.sections, tuple):
            object.__setattr__(self, "sections", tuple(self.sections))

    @property
    def question_ids(self) -> Tuple[str, ...]:
        """All referenced question ids in section order (duplicates removed)."""
        seen: Dict[str, None] = {}
        for section in self.sections:
            for qid in section.question_ids:
                seen.setdefault(qid, None)
        return tuple(seen)

    def with_sections(self, sections: Iterable[TemplateSection]) -> "ExamTemplate":
        return replace(self, sections=tuple(sections))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "sections": [s.to_dict() for s in self.sections],
            "header_content": self.header_content,
            "footer_content": self.footer_content,
            "style": self.style.value,
            "seal_line": self.seal_line.value,
            "paper_size": self.paper_size.value,
            "header_config": self.header_config.to_dict() if self.header_config else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExamTemplate":
        header_data = data.get("header_config")
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            sections=tuple(TemplateSection.from_dict(s) for s in data.get("sections", [])),
            header_content=str(data.get("header_content", "")),
            footer_content=str(data.get("footer_content", "")),
            style=TemplateStyle(data.get("style", TemplateStyle.BASIC.value)),
            seal_line=SealLinePosition(data.get("seal_line", SealLinePosition.NONE.value)),
            paper_size=PaperSize(data.get("paper_size", PaperSize.A4.value)),
            header_config=HeaderConfig.from_dict(header_data) if header_data else None,
        )
