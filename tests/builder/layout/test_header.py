"""
Unit tests for the title header and student info block.
"""

from decimal import Decimal

import pytest

from examtex.builder.layout import render_header, render_student_info
from examtex.core.models import (
    HeaderAlignment,
    HeaderConfig,
    HeaderFontSize,
    HeaderStyle,
    StudentInfoConfig,
    StudentInfoLayout,
)
from examtex.errors import InvalidArgumentError, PageOutOfRangeError


@pytest.fixture
def config() -> HeaderConfig:
    return HeaderConfig(
        exam_title="Final Exam",
        subject="Physics",
        exam_time=90,
        total_points=Decimal("100.0"),
        exam_date="2026-06-01",
    )


class TestHeaderStyles:

    def test_standard_when_rendered_then_title_and_metadata(self, config):
        out = render_header(config)
        assert r"\textbf{Final Exam}" in out
        assert "Subject: Physics" in out
        assert "Time: 90 minutes" in out
        assert "Total points: 100 " in out
        assert "Date: 2026-06-01" in out

    def test_simple_when_rendered_then_no_date(self, config):
        from dataclasses import replace

        out = render_header(replace(config, style=HeaderStyle.SIMPLE))
        assert "Subject: Physics" in out
        assert "Date:" not in out.split(r"\begin{tabular}")[0]

    def test_detailed_when_missing_school_then_blank(self, config):
        from dataclasses import replace

        out = render_header(replace(config, style=HeaderStyle.DETAILED, exam_location="Hall 3"))
        assert "Location: Hall 3" in out
        assert r"School: \underline{\hspace{3cm}}" in out

    def test_custom_when_template_then_tokens_substituted_and_escaped(self):
        config = HeaderConfig(
            style=HeaderStyle.CUSTOM,
            exam_title="R&D Quiz",
            school_name="Hill",
            custom_template=r"\section*{{EXAM_TITLE}} at {SCHOOL_NAME} ({EXAM_TIME} min)",
        )
        out = render_header(config)
        assert r"\section*{R\&D Quiz} at Hill (120 min)" in out

    def test_custom_when_template_then_student_info_ignored(self):
        config = HeaderConfig(style=HeaderStyle.CUSTOM, custom_template="X {SUBJECT}")
        assert "Name:" not in render_header(config)

    def test_custom_when_blank_template_then_standard(self, config):
        from dataclasses import replace

        out = render_header(replace(config, style=HeaderStyle.CUSTOM))
        assert "Subject: Physics" in out

    def test_title_when_escaped_then_specials_safe(self):
        out = render_header(HeaderConfig(exam_title="50% Quiz"))
        assert r"50\% Quiz" in out


class TestHeaderAppearance:

    @pytest.mark.parametrize(
        "alignment, env",
        [
            (HeaderAlignment.LEFT, "flushleft"),
            (HeaderAlignment.CENTER, "center"),
            (HeaderAlignment.RIGHT, "flushright"),
        ],
    )
    def test_alignment_when_set_then_environment(self, config, alignment, env):
        from dataclasses import replace

        out = render_header(replace(config, alignment=alignment))
        assert rf"\begin{{{env}}}" in out

    def test_font_size_when_extra_large_then_LARGE(self, config):
        from dataclasses import replace

        out = render_header(replace(config, title_font_size=HeaderFontSize.EXTRA_LARGE))
        assert r"{\LARGE \textbf{Final Exam}}" in out

    def test_title_bold_when_disabled_then_plain(self, config):
        from dataclasses import replace

        out = render_header(replace(config, title_bold=False))
        assert r"\textbf{Final Exam}" not in out

    def test_spacing_after_when_rendered_then_vspace(self, config):
        assert render_header(config).rstrip().endswith(r"\vspace{1cm}")


class TestHeaderPages:

    def test_header_when_later_page_and_first_only_then_empty(self, config):
        assert render_header(config, page_number=2) == ""

    def test_header_when_page_zero_then_raises(self, config):
        with pytest.raises(PageOutOfRangeError):
            render_header(config, page_number=0)

    def test_header_when_none_then_raises(self):
        with pytest.raises(InvalidArgumentError):
            render_header(None)

    def test_header_when_hidden_then_only_student_info(self, config):
        from dataclasses import replace

        out = render_header(replace(config, show_header=False))
        assert "Final Exam" not in out
        assert "Name:" in out


class TestStudentInfo:

    def test_horizontal_when_rendered_then_joined_with_quad(self):
        out = render_student_info(StudentInfoConfig(layout=StudentInfoLayout.HORIZONTAL))
        assert out.count(r"\quad") == 3

    def test_vertical_when_rendered_then_one_row_per_field(self):
        out = render_student_info(StudentInfoConfig(layout=StudentInfoLayout.VERTICAL))
        assert out.count(r"\\") == 4

    def test_grid_when_six_fields_then_two_ruled_rows(self):
        info = StudentInfoConfig(layout=StudentInfoLayout.GRID, show_school=True, show_subject=True)
        out = render_student_info(info)
        assert r"\begin{tabular}{|l|l|l|l|}" in out
        assert out.count(r"\\ \hline") == 2

    def test_two_column_when_rendered_then_pairs(self):
        out = render_student_info(StudentInfoConfig(layout=StudentInfoLayout.TWO_COLUMN))
        assert out.count(r"\\") == 2

    def test_underline_length_when_set_then_used(self):
        out = render_student_info(StudentInfoConfig(underline_length=Decimal("4.5")))
        assert r"Name:\underline{\hspace{4.5cm}}" in out

    def test_custom_field_when_label_blank_then_skipped(self):
        info = StudentInfoConfig(show_custom1=True, custom1_label="")
        assert len(info.enabled_fields()) == 4

    def test_student_info_when_all_disabled_then_empty(self):
        info = StudentInfoConfig(
            show_name=False, show_student_id=False, show_class=False, show_date=False
        )
        assert render_student_info(info) == ""


class TestDetailedHeaderWithStudentInfo:

    @pytest.fixture
    def detailed(self, config) -> HeaderConfig:
        from dataclasses import replace

        info = StudentInfoConfig(
            layout=StudentInfoLayout.VERTICAL,
            show_name=True,
            show_student_id=True,
            show_class=True,
            show_date=False,
        )
        return replace(config, style=HeaderStyle.DETAILED, show_student_info=True, student_info=info)

    def test_header_when_three_fields_vertical_then_three_labelled_rows(self, detailed):
        out = render_header(detailed)
        table = out.split(r"\begin{tabular}{l}")[1].split(r"\end{tabular}")[0]
        rows = [line for line in table.splitlines() if line.strip()]
        assert all(row.endswith(r"\underline{\hspace{3cm}} \\") for row in rows)
        assert [row.split(":")[0] for row in rows] == ["Name", "Student ID", "Class"]

    @pytest.mark.parametrize("show_seal_line, expected", [(True, 1), (False, 0)])
    def test_seal_line_when_toggled_then_follows_header_config(
        self, detailed, make_template, show_seal_line, expected
    ):
        from dataclasses import replace

        from examtex.builder.layout import render_seal_line
        from examtex.core.models import SealLinePosition

        template = make_template(seal_line=SealLinePosition.LEFT)
        out = render_seal_line(template, 1, 1, replace(detailed, show_seal_line=show_seal_line))
        assert out.count(r"\sealline{left}") == expected
