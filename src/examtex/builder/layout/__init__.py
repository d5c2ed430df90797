"""
Module: builder.layout

Purpose:
    Page layout elements and pagination: seal line, title header,
    running header/footer and the fixed-capacity paginator.

Key Functions:
    - render_seal_line_definition(), render_seal_line()
    - render_header(), render_student_info()
    - render_header_footer_setup(), render_header_footer()
    - paginate(), page_count()

Used By:
    - builder.compositor
"""

from .config import DEFAULT_QUESTIONS_PER_PAGE, PAGE_BREAK, LayoutConfig
from .header import render_header, render_student_info
from .header_footer import format_page_label, render_header_footer, render_header_footer_setup
from .models import PagePlan
from .paginator import page_count, paginate
from .seal_line import render_seal_line, render_seal_line_definition

__all__ = [
    # Config
    "DEFAULT_QUESTIONS_PER_PAGE",
    "LayoutConfig",
    "PAGE_BREAK",
    # Models
    "PagePlan",
    # Functions
    "format_page_label",
    "page_count",
    "paginate",
    "render_header",
    "render_header_footer",
    "render_header_footer_setup",
    "render_seal_line",
    "render_seal_line_definition",
    "render_student_info",
]
