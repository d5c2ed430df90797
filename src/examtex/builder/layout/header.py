"""
Module: builder.layout.header

Purpose:
    Title header block for the first page: exam title, metadata table and
    the student identification block, in one of four styles.

Key Functions:
    - render_header(): Title block for a page
    - render_student_info(): Student identification table

Styles:
    - STANDARD: Title, rule, subject / time / points / date
    - SIMPLE: Title, thin rule, one metadata line
    - DETAILED: Larger title, double rule, three-column table including
      date, school and location (missing values become blanks)
    - CUSTOM: User markup with its own tokens; student info is ignored

Dependencies:
    - core.models: HeaderConfig and enums
    - core.utils: escape_latex, format_decimal, format_length

Used By:
    - builder.compositor
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

from examtex.core.models import (
    HeaderAlignment,
    HeaderConfig,
    HeaderFontSize,
    HeaderStyle,
    StudentInfoConfig,
    StudentInfoLayout,
)
from examtex.core.utils import escape_latex, format_decimal, format_length
from examtex.errors import InvalidArgumentError, PageOutOfRangeError

FONT_SIZE_COMMANDS: Dict[HeaderFontSize, str] = {
    HeaderFontSize.SMALL: r"\normalsize",
    HeaderFontSize.MEDIUM: r"\large",
    HeaderFontSize.LARGE: r"\Large",
    HeaderFontSize.EXTRA_LARGE: r"\LARGE",
}

ALIGNMENT_ENVIRONMENTS: Dict[HeaderAlignment, str] = {
    HeaderAlignment.LEFT: "flushleft",
    HeaderAlignment.CENTER: "center",
    HeaderAlignment.RIGHT: "flushright",
}

MISSING_VALUE_BLANK = r"\underline{\hspace{3cm}}"

CUSTOM_TOKEN_PATTERN = re.compile(
    r"\{(EXAM_TITLE|SUBJECT|EXAM_TIME|TOTAL_POINTS|EXAM_LOCATION|SCHOOL_NAME|EXAM_DATE)\}"
)


def _value_or_blank(value: str) -> str:
    return escape_latex(value) or MISSING_VALUE_BLANK


def _title(config: HeaderConfig, size: str) -> str:
    title = escape_latex(config.exam_title)
    if config.title_bold:
        title = rf"\textbf{{{title}}}"
    return rf"{{{size} {title}}}"


def _metadata(config: HeaderConfig) -> Dict[str, str]:
    return {
        "subject": _value_or_blank(config.subject),
        "time": f"{config.exam_time} minutes",
        "points": format_decimal(config.total_points),
        "date": _value_or_blank(config.exam_date),
        "school": _value_or_blank(config.school_name),
        "location": _value_or_blank(config.exam_location),
        "department": _value_or_blank(config.department),
        "major": _value_or_blank(config.major),
        "class": _value_or_blank(config.class_name),
        "semester": _value_or_blank(config.semester),
        "exam_type": _value_or_blank(config.exam_type),
    }


# ─────────────────────────────────────────────────────────────────────────────
# Styles
# ─────────────────────────────────────────────────────────────────────────────

def _standard(config: HeaderConfig) -> List[str]:
    meta = _metadata(config)
    size = FONT_SIZE_COMMANDS[config.title_font_size]
    return [
        _title(config, size),
        "",
        r"\rule{\textwidth}{0.4pt}",
        "",
        r"\begin{tabular}{ll}",
        rf"Subject: {meta['subject']} & Time: {meta['time']} \\",
        rf"Total points: {meta['points']} & Date: {meta['date']} \\",
        r"\end{tabular}",
    ]


def _simple(config: HeaderConfig) -> List[str]:
    meta = _metadata(config)
    size = FONT_SIZE_COMMANDS[config.title_font_size]
    return [
        _title(config, size),
        "",
        r"\rule{\textwidth}{0.2pt}",
        "",
        rf"Subject: {meta['subject']} \quad Time: {meta['time']} \quad Total points: {meta['points']}",
    ]


def _detailed(config: HeaderConfig) -> List[str]:
    meta = _metadata(config)
    # One step larger than the configured size, capped at \LARGE.
    sizes = list(HeaderFontSize)
    larger = sizes[min(sizes.index(config.title_font_size) + 1, len(sizes) - 1)]
    return [
        _title(config, FONT_SIZE_COMMANDS[larger]),
        "",
        r"\rule{\textwidth}{0.8pt}\\[-0.8em]",
        r"\rule{\textwidth}{0.4pt}",
        "",
        r"\begin{tabular}{lll}",
        rf"Subject: {meta['subject']} & Time: {meta['time']} & Total points: {meta['points']} \\",
        rf"Date: {meta['date']} & School: {meta['school']} & Location: {meta['location']} \\",
        rf"Department: {meta['department']} & Major: {meta['major']} & Class: {meta['class']} \\",
        rf"Semester: {meta['semester']} & Exam type: {meta['exam_type']} & \\",
        r"\end{tabular}",
    ]


def _custom(config: HeaderConfig) -> str:
    values = {
        "EXAM_TITLE": escape_latex(config.exam_title),
        "SUBJECT": escape_latex(config.subject),
        "EXAM_TIME": str(config.exam_time),
        "TOTAL_POINTS": format_decimal(config.total_points),
        "EXAM_LOCATION": escape_latex(config.exam_location),
        "SCHOOL_NAME": escape_latex(config.school_name),
        "EXAM_DATE": escape_latex(config.exam_date),
    }
    return CUSTOM_TOKEN_PATTERN.sub(lambda m: values[m.group(1)], config.custom_template)


# ─────────────────────────────────────────────────────────────────────────────
# Student info
# ─────────────────────────────────────────────────────────────────────────────

def _cells(info: StudentInfoConfig) -> List[str]:
    blank = rf"\underline{{\hspace{{{format_length(info.underline_length)}}}}}"
    return [f"{escape_latex(label)}{blank}" for label, _key in info.enabled_fields()]


def _rows(cells: List[str], per_row: int) -> List[Tuple[str, ...]]:
    rows = []
    for start in range(0, len(cells), per_row):
        row = cells[start:start + per_row]
        row.extend([""] * (per_row - len(row)))
        rows.append(tuple(row))
    return rows


def render_student_info(info: StudentInfoConfig) -> str:
    """
    Render the student identification block for ``info.layout``.

    Returns "" when no field is enabled.
    """
    if info is None:
        raise InvalidArgumentError("student info config must not be None")
    cells = _cells(info)
    if not cells:
        return ""

    if info.layout is StudentInfoLayout.HORIZONTAL:
        return r"\noindent " + r" \quad ".join(cells) + "\n"

    if info.layout is StudentInfoLayout.GRID:
        lines = [r"\begin{tabular}{|l|l|l|l|}", r"\hline"]
        for row in _rows(cells, 4):
            lines.append(" & ".join(row) + r" \\ \hline")
        lines.append(r"\end{tabular}")
        return "\n".join(lines) + "\n"

    if info.layout is StudentInfoLayout.TWO_COLUMN:
        lines = [r"\begin{tabular}{ll}"]
        lines.extend(" & ".join(row) + r" \\" for row in _rows(cells, 2))
        lines.append(r"\end{tabular}")
        return "\n".join(lines) + "\n"

    # VERTICAL and SINGLE_COLUMN: one field per row
    lines = [r"\begin{tabular}{l}"]
    lines.extend(f"{cell} \\\\" for cell in cells)
    lines.append(r"\end{tabular}")
    return "\n".join(lines) + "\n"


# ─────────────────────────────────────────────────────────────────────────────
# Entry point
# ─────────────────────────────────────────────────────────────────────────────

_STYLE_RENDERERS = {
    HeaderStyle.STANDARD: _standard,
    HeaderStyle.SIMPLE: _simple,
    HeaderStyle.DETAILED: _detailed,
}


def render_header(config: HeaderConfig, page_number: int = 1) -> str:
    """
    Render the title header block.

    The generator is stateless; callers invoke it for the first page only.
    With ``show_on_first_page_only`` a later page yields "".

    Args:
        config: Header configuration (metadata already resolved)
        page_number: 1-based page the block is rendered for

    Returns:
        Header markup, possibly empty

    Raises:
        InvalidArgumentError: If config is None
        PageOutOfRangeError: If page_number < 1
    """
    if config is None:
        raise InvalidArgumentError("header config must not be None")
    if page_number < 1:
        raise PageOutOfRangeError(page_number, max(page_number, 1))
    if page_number > 1 and config.show_on_first_page_only:
        return ""

    if config.style is HeaderStyle.CUSTOM and config.custom_template.strip():
        if not config.show_header:
            return ""
        return _custom(config) + "\n"

    lines: List[str] = []
    if config.show_header:
        renderer = _STYLE_RENDERERS.get(config.style, _standard)
        env = ALIGNMENT_ENVIRONMENTS[config.alignment]
        lines.append(rf"\begin{{{env}}}")
        lines.extend(renderer(config))
        lines.append(rf"\end{{{env}}}")
    if config.show_student_info:
        student_info = render_student_info(config.student_info)
        if student_info:
            lines.append(student_info.rstrip("\n"))
    if not lines:
        return ""
    lines.append(rf"\vspace{{{format_length(config.spacing_after)}}}")
    return "\n".join(lines) + "\n"
