"""
Unit tests for the running header and footer.
"""

import pytest

from examtex.builder.layout import (
    format_page_label,
    render_header_footer,
    render_header_footer_setup,
)
from examtex.core.models import HeaderConfig, PageNumberFormat, PageNumberPosition
from examtex.errors import InvalidArgumentError, PageOutOfRangeError


class TestPageLabel:

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (PageNumberFormat.ENGLISH, "Page 2 of 5"),
            (PageNumberFormat.NUMERIC, "2/5"),
            (PageNumberFormat.VERBOSE, "Page 2 / 5 pages"),
        ],
    )
    def test_label_when_format_then_text(self, fmt, expected):
        assert format_page_label(2, 5, fmt) == expected


class TestHeaderFooter:

    def test_setup_when_rendered_then_fancy_pagestyle(self):
        assert r"\pagestyle{fancy}" in render_header_footer_setup()

    def test_header_when_no_header_content_then_name_and_subject(self, make_template):
        out = render_header_footer(make_template(), 1, 2)
        assert r"\fancyhead[C]{\headerfontsize Midterm \quad Mathematics}" in out

    def test_header_when_header_content_then_used_and_escaped(self, make_template):
        out = render_header_footer(make_template(header_content="Form #2"), 1, 1)
        assert r"\fancyhead[C]{\headerfontsize Form \#2}" in out

    def test_footer_when_footer_text_then_shares_centre_with_page_label(self, make_template):
        out = render_header_footer(make_template(footer_content="Good luck"), 3, 4)
        assert r"\fancyfoot[C]{\footerfontsize Good luck \quad Page 3 of 4}" in out

    def test_footer_when_no_footer_text_then_page_label_only(self, make_template):
        out = render_header_footer(make_template(), 1, 1)
        assert r"\fancyfoot[C]{\footerfontsize Page 1 of 1}" in out

    def test_footer_when_position_right_then_separate_field(self, make_template):
        config = HeaderConfig(page_number_position=PageNumberPosition.RIGHT)
        out = render_header_footer(make_template(footer_content="Ends"), 1, 2, config)
        assert r"\fancyfoot[C]{\footerfontsize Ends}" in out
        assert r"\fancyfoot[R]{\footerfontsize Page 1 of 2}" in out

    def test_footer_when_page_number_disabled_then_no_label(self, make_template):
        config = HeaderConfig(show_page_number_in_footer=False)
        assert "Page 1" not in render_header_footer(make_template(), 1, 1, config)

    def test_header_when_page_number_in_header_then_head_field(self, make_template):
        config = HeaderConfig(show_page_number_in_header=True, page_number_format=PageNumberFormat.NUMERIC)
        assert r"\fancyhead[C]{\headerfontsize 1/2}" in render_header_footer(make_template(), 1, 2, config)

    def test_odd_even_when_enabled_then_separate_fields(self, make_template):
        config = HeaderConfig(
            enable_odd_even_header_footer=True,
            odd_page_header="Odd",
            even_page_header="Even",
            page_number_position=PageNumberPosition.OUTSIDE,
        )
        out = render_header_footer(make_template(), 1, 2, config)
        assert r"\fancyhead[CO]{\headerfontsize Odd}" in out
        assert r"\fancyhead[CE]{\headerfontsize Even}" in out
        assert r"\fancyfoot[O]{\footerfontsize Page 1 of 2}" in out

    def test_render_when_template_none_then_raises(self):
        with pytest.raises(InvalidArgumentError):
            render_header_footer(None, 1, 1)

    def test_render_when_total_zero_then_raises(self, make_template):
        with pytest.raises(PageOutOfRangeError):
            render_header_footer(make_template(), 1, 0)
