"""
Module: core.models.header

Purpose:
    Header and student-information configuration consumed by the layout
    generators. Immutable; resolving blanks against a template returns a
    new instance.

Key Classes:
    - HeaderStyle, HeaderAlignment, HeaderFontSize: Title block look
    - StudentInfoLayout, StudentInfoConfig: Student identification block
    - PageNumberFormat, PageNumberPosition: Running footer page label
    - HeaderConfig: Complete header configuration

Used By:
    - builder.layout.header
    - builder.layout.header_footer
    - builder.layout.seal_line
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from ..utils.formatting import Number, to_decimal

if TYPE_CHECKING:
    from .templates import ExamTemplate


DEFAULT_EXAM_TIME = 120


class HeaderStyle(Enum):
    STANDARD = "standard"
    SIMPLE = "simple"
    DETAILED = "detailed"
    CUSTOM = "custom"


class HeaderAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class HeaderFontSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"


class StudentInfoLayout(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    GRID = "grid"
    SINGLE_COLUMN = "single_column"
    TWO_COLUMN = "two_column"


class PageNumberFormat(Enum):
    """Footer page label: 'Page 2 of 5', '2/5' or 'Page 2 / 5 pages'."""
    ENGLISH = "english"
    NUMERIC = "numeric"
    VERBOSE = "verbose"


class PageNumberPosition(Enum):
    """Maps onto fancyhdr field selectors."""
    LEFT = "L"
    CENTER = "C"
    RIGHT = "R"
    OUTSIDE = "O"
    INSIDE = "I"


@dataclass(frozen=True)
class StudentInfoConfig:
    """
    Which identification fields the student fills in (immutable).

    Attributes:
        layout: Arrangement of the fields
        show_*: Per-field toggles
        *_label: Per-field labels
        underline_length: Blank width in centimetres (> 0)
    """
    layout: StudentInfoLayout = StudentInfoLayout.SINGLE_COLUMN
    show_name: bool = True
    show_student_id: bool = True
    show_class: bool = True
    show_date: bool = True
    show_school: bool = False
    show_subject: bool = False
    show_custom1: bool = False
    show_custom2: bool = False
    name_label: str = "Name:"
    student_id_label: str = "Student ID:"
    class_label: str = "Class:"
    date_label: str = "Date:"
    school_label: str = "School:"
    subject_label: str = "Subject:"
    custom1_label: str = ""
    custom2_label: str = ""
    underline_length: Decimal = Decimal("3.0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "underline_length", to_decimal(self.underline_length))
        if self.underline_length <= 0:
            raise ValueError(f"underline_length must be positive, got {self.underline_length}")

    def enabled_fields(self) -> List[Tuple[str, str]]:
        """Return (label, key) pairs for every enabled field, in display order."""
        candidates = [
            (self.show_name, self.name_label, "name"),
            (self.show_student_id, self.student_id_label, "student_id"),
            (self.show_class, self.class_label, "class"),
            (self.show_date, self.date_label, "date"),
            (self.show_school, self.school_label, "school"),
            (self.show_subject, self.subject_label, "subject"),
            (self.show_custom1 and bool(self.custom1_label), self.custom1_label, "custom1"),
            (self.show_custom2 and bool(self.custom2_label), self.custom2_label, "custom2"),
        ]
        return [(label, key) for enabled, label, key in candidates if enabled]

    def to_dict(self) -> Dict[str, Any]:
        data = {k: getattr(self, k) for k in self.__dataclass_fields__}
        data["layout"] = self.layout.value
        data["underline_length"] = str(self.underline_length)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StudentInfoConfig":
        kwargs = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "layout" in kwargs:
            kwargs["layout"] = StudentInfoLayout(kwargs["layout"])
        return cls(**kwargs)


@dataclass(frozen=True)
class HeaderConfig:
    """
    Title header and running header/footer configuration (immutable).

    ``total_points`` of 0 and blank title/subject mean "fill from the
    template and selected questions"; see ``resolved_for``.

    Example:
        >>> config = HeaderConfig(style=HeaderStyle.DETAILED, school_name="Hill School")
        >>> config.resolved_for(template, total_points=Decimal(40)).total_points
        Decimal('40')
    """
    style: HeaderStyle = HeaderStyle.STANDARD

    # Exam metadata
    exam_title: str = ""
    subject: str = ""
    exam_time: int = DEFAULT_EXAM_TIME
    total_points: Decimal = Decimal(0)
    exam_date: str = ""
    school_name: str = ""
    exam_location: str = ""
    department: str = ""
    major: str = ""
    class_name: str = ""
    semester: str = ""
    exam_type: str = ""

    # Toggles
    show_header: bool = True
    show_seal_line: bool = True
    show_student_info: bool = True
    show_on_first_page_only: bool = True
    title_bold: bool = True

    # Appearance
    student_info: StudentInfoConfig = field(default_factory=StudentInfoConfig)
    custom_template: str = ""
    alignment: HeaderAlignment = HeaderAlignment.CENTER
    title_font_size: HeaderFontSize = HeaderFontSize.LARGE
    spacing_after: Decimal = Decimal("1.0")

    # Running header/footer
    show_footer: bool = True
    show_page_number_in_header: bool = False
    show_page_number_in_footer: bool = True
    page_number_format: PageNumberFormat = PageNumberFormat.ENGLISH
    page_number_position: PageNumberPosition = PageNumberPosition.CENTER
    enable_odd_even_header_footer: bool = False
    odd_page_header: str = ""
    even_page_header: str = ""
    odd_page_footer: str = ""
    even_page_footer: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_points", to_decimal(self.total_points))
        object.__setattr__(self, "spacing_after", to_decimal(self.spacing_after))
        if self.exam_time < 0:
            raise ValueError(f"exam_time must be non-negative, got {self.exam_time}")
        if self.total_points < 0:
            raise ValueError(f"total_points must be non-negative, got {self.total_points}")
        if self.spacing_after < 0:
            raise ValueError(f"spacing_after must be non-negative, got {self.spacing_after}")

    def resolved_for(
        self,
        template: "ExamTemplate",
        total_points: Optional[Number] = None,
        exam_time: Optional[int] = None,
    ) -> "HeaderConfig":
        """Return a copy with blank metadata filled from the template and question set."""
        changes: Dict[str, Any] = {}
        if not self.exam_title.strip():
            changes["exam_title"] = template.name
        if not self.subject.strip():
            changes["subject"] = template.description
        if total_points is not None and self.total_points == 0:
            changes["total_points"] = to_decimal(total_points)
        if exam_time is not None and self.exam_time == DEFAULT_EXAM_TIME:
            changes["exam_time"] = exam_time
        return replace(self, **changes) if changes else self

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, Decimal):
                value = str(value)
            elif isinstance(value, StudentInfoConfig):
                value = value.to_dict()
            data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HeaderConfig":
        kwargs = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        enum_fields = {
            "style": HeaderStyle,
            "alignment": HeaderAlignment,
            "title_font_size": HeaderFontSize,
            "page_number_format": PageNumberFormat,
            "page_number_position": PageNumberPosition,
        }
        for name, enum_cls in enum_fields.items():
            if name in kwargs:
                kwargs[name] = enum_cls(kwargs[name])
        if "student_info" in kwargs:
            kwargs["student_info"] = StudentInfoConfig.from_dict(kwargs["student_info"])
        return cls(**kwargs)
