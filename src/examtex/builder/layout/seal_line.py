"""
Module: builder.layout.seal_line

Purpose:
    Seal line: a dashed line along the binding edge behind which students
    write identifying details, concealed before grading.

Key Functions:
    - render_seal_line_definition(): Document-level \\sealline command
    - render_seal_line(): Per-page placement

Algorithm:
    The definition is emitted once per document and takes the edge
    ("left"/"right") and the identification table as arguments, so each
    page placement only chooses an edge. ALTERNATE puts the line on the
    left of odd pages and the right of even pages for duplex printing.

Dependencies:
    - core.models: ExamTemplate, HeaderConfig, SealLinePosition
    - builder.layout.validation: Page range checks

Used By:
    - builder.compositor
"""

from __future__ import annotations

from typing import Optional

from examtex.core.models import ExamTemplate, HeaderConfig, SealLinePosition
from examtex.errors import InvalidArgumentError

from .validation import check_page_range

SEAL_LINE_FIELDS = ("Name", "Student ID", "Class", "Date")
SEAL_LINE_BLANK = "3cm"

_SEAL_LINE_DEFINITION = r"""% Seal line: #1 = left|right, #2 = identification content
\providecommand{\sealline}[2]{%
  \begin{tikzpicture}[remember picture,overlay]
    \ifthenelse{\equal{#1}{left}}{%
      \draw[dashed] ([xshift=1.5cm]current page.north west) -- ([xshift=1.5cm]current page.south west);
      \node[rotate=90,anchor=south] at ([xshift=1.0cm]current page.west) {#2};
    }{%
      \draw[dashed] ([xshift=-1.5cm]current page.north east) -- ([xshift=-1.5cm]current page.south east);
      \node[rotate=-90,anchor=south] at ([xshift=-1.0cm]current page.east) {#2};
    }%
  \end{tikzpicture}%
}
"""


def render_seal_line_definition() -> str:
    """
    Return the \\sealline command definition.

    Pure and identical on every call. Uses \\providecommand, so including
    it twice in one document is harmless; callers still emit it once.
    """
    return _SEAL_LINE_DEFINITION


def seal_line_side(position: SealLinePosition, page_number: int) -> Optional[str]:
    """Edge for ``page_number``, or None when no seal line is drawn."""
    if position is SealLinePosition.LEFT:
        return "left"
    if position is SealLinePosition.RIGHT:
        return "right"
    if position is SealLinePosition.ALTERNATE:
        return "left" if page_number % 2 == 1 else "right"
    return None


def _identification_table() -> str:
    cells = [rf"{label}: \underline{{\hspace{{{SEAL_LINE_BLANK}}}}}" for label in SEAL_LINE_FIELDS]
    return r"\begin{tabular}{llll}" + " & ".join(cells) + r"\end{tabular}"


def render_seal_line(
    template: ExamTemplate,
    page_number: int,
    total_pages: int,
    header_config: Optional[HeaderConfig] = None,
) -> str:
    """
    Render the seal line placement for one page.

    Args:
        template: Template providing the seal line position
        page_number: 1-based page number
        total_pages: Total page count
        header_config: Optional header configuration; ``show_seal_line``
            False suppresses the placement

    Returns:
        Placement markup, or "" when no seal line applies

    Raises:
        InvalidArgumentError: If template is None
        PageOutOfRangeError: If the page arguments are out of range
    """
    if template is None:
        raise InvalidArgumentError("template must not be None")
    check_page_range(page_number, total_pages)

    if header_config is not None and not header_config.show_seal_line:
        return ""
    side = seal_line_side(template.seal_line, page_number)
    if side is None:
        return ""
    return (
        f"% Seal line: page {page_number} of {total_pages}\n"
        rf"\sealline{{{side}}}{{{_identification_table()}}}" "\n"
    )
