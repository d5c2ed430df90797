"""
Module: builder.layout.header_footer

Purpose:
    Running page header and footer via fancyhdr.

Key Functions:
    - render_header_footer_setup(): Page style setup, once per document
    - render_header_footer(): Header/footer for one page
    - format_page_label(): Footer page label like "Page 2 of 5"

Dependencies:
    - core.models: ExamTemplate, HeaderConfig, PageNumberFormat
    - core.utils: escape_latex

Used By:
    - builder.compositor
"""

from __future__ import annotations

from typing import List, Optional

from examtex.core.models import ExamTemplate, HeaderConfig, PageNumberFormat
from examtex.core.utils import escape_latex
from examtex.errors import InvalidArgumentError

from .validation import check_page_range

_SETUP = r"""% Running header/footer
\pagestyle{fancy}
\fancyhf{}
\renewcommand{\headrulewidth}{0.4pt}
\renewcommand{\footrulewidth}{0.4pt}
\providecommand{\headerfontsize}{\small}
\providecommand{\footerfontsize}{\small}
"""

_DEFAULT_HEADER_CONFIG = HeaderConfig()


def render_header_footer_setup() -> str:
    return _SETUP


def format_page_label(page_number: int, total_pages: int, fmt: PageNumberFormat) -> str:
    check_page_range(page_number, total_pages)
    if fmt is PageNumberFormat.NUMERIC:
        return f"{page_number}/{total_pages}"
    if fmt is PageNumberFormat.VERBOSE:
        return f"Page {page_number} / {total_pages} pages"
    return f"Page {page_number} of {total_pages}"


def _join(*parts: str) -> str:
    return r" \quad ".join(p for p in parts if p)


def _header_text(template: ExamTemplate) -> str:
    if template.header_content.strip():
        return escape_latex(template.header_content)
    return _join(escape_latex(template.name), escape_latex(template.description))


def render_header_footer(
    template: ExamTemplate,
    page_number: int,
    total_pages: int,
    header_config: Optional[HeaderConfig] = None,
) -> str:
    """
    Render the running header and footer for one page.

    The header carries the template's header text, or the exam name and
    subject when none is set. The footer carries the footer text and the
    page label.

    Raises:
        InvalidArgumentError: If template is None
        PageOutOfRangeError: If the page arguments are out of range
    """
    if template is None:
        raise InvalidArgumentError("template must not be None")
    check_page_range(page_number, total_pages)
    config = header_config or _DEFAULT_HEADER_CONFIG

    page_label = format_page_label(page_number, total_pages, config.page_number_format)
    position = config.page_number_position.value
    header = _header_text(template)
    footer = escape_latex(template.footer_content)

    footer_page_label = config.show_footer and config.show_page_number_in_footer
    # A centred page label shares the centre footer field with the footer text.
    merge_label = footer_page_label and position == "C" and not config.enable_odd_even_header_footer

    lines: List[str] = [f"% Header/footer: page {page_number} of {total_pages}"]
    if config.enable_odd_even_header_footer:
        odd_header = escape_latex(config.odd_page_header) or header
        even_header = escape_latex(config.even_page_header) or header
        odd_footer = escape_latex(config.odd_page_footer) or footer
        even_footer = escape_latex(config.even_page_footer) or footer
        lines.append(rf"\fancyhead[CO]{{\headerfontsize {odd_header}}}")
        lines.append(rf"\fancyhead[CE]{{\headerfontsize {even_header}}}")
        if config.show_footer:
            lines.append(rf"\fancyfoot[CO]{{\footerfontsize {odd_footer}}}")
            lines.append(rf"\fancyfoot[CE]{{\footerfontsize {even_footer}}}")
    else:
        lines.append(rf"\fancyhead[C]{{\headerfontsize {header}}}")
        centre_footer = _join(footer, page_label) if merge_label else footer
        if config.show_footer and centre_footer:
            lines.append(rf"\fancyfoot[C]{{\footerfontsize {centre_footer}}}")

    if config.show_page_number_in_header:
        lines.append(rf"\fancyhead[{position}]{{\headerfontsize {page_label}}}")
    if footer_page_label and not merge_label:
        lines.append(rf"\fancyfoot[{position}]{{\footerfontsize {page_label}}}")
    return "\n".join(lines) + "\n"
