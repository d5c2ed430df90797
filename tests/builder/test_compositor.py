"""
Unit tests for single-page and multi-page composition.
"""

import re
from decimal import Decimal

import pytest

from examtex.builder.compositor import compose_multi_page, compose_single_page
from examtex.core.models import HeaderConfig, SealLinePosition
from examtex.errors import InvalidArgumentError


def _stream(document: str, name: str) -> str:
    """Extract a delimited stream from the conftest raw template."""
    return re.search(rf"{name}>>(.*?)<<", document, re.S).group(1)


class TestSinglePage:

    def test_compose_when_two_choice_questions_then_end_to_end(self, raw_template, make_template, choice_question):
        """Two 5-point multiple-choice questions in one section."""
        from dataclasses import replace

        q2 = replace(choice_question, id="mc2")
        template = make_template(["mc1", "mc2"])
        result = compose_single_page(raw_template, template, [choice_question, q2])

        body = _stream(result.document, "BODY")
        assert body.count(r"\section*{Part 1}") == 1
        assert r"\textbf{Question 1}" in body and r"\textbf{Question 2}" in body
        assert "POINTS=10\n" in result.document
        answers = _stream(result.document, "ANSWERS")
        assert answers.count(r"\underline{\hspace{2cm}}") == 2
        assert result.page_count == 1

    def test_compose_when_multiple_sections_then_numbering_restarts(self, raw_template, make_template, make_bank):
        bank = make_bank(4)
        template = make_template(["q1", "q2"], ["q3", "q4"])
        result = compose_single_page(raw_template, template, bank.questions)
        assert result.body.count(r"\textbf{Question 1}") == 2
        assert result.body.count(r"\textbf{Question 2}") == 2
        assert r"\textbf{Question 3}" not in result.body

    def test_compose_when_section_has_no_matches_then_heading_only(self, raw_template, make_template, make_bank):
        template = make_template(["q1"], ["missing"])
        result = compose_single_page(raw_template, template, make_bank(2).questions)
        part2 = result.body.split(r"\section*{Part 2}")[1]
        assert r"\textbf{Question" not in part2

    def test_compose_when_section_ids_reordered_then_question_list_order(self, raw_template, make_template, make_bank):
        template = make_template(["q3", "q1"])
        result = compose_single_page(raw_template, template, make_bank(3).questions)
        assert result.page_ranges[0].question_ids == ("q1", "q3")

    def test_compose_when_rendered_then_layout_has_header_and_footer(self, raw_template, make_template, make_bank):
        template = make_template(["q1"], seal_line=SealLinePosition.LEFT)
        result = compose_single_page(raw_template, template, make_bank(1).questions)
        layout = _stream(result.document, "LAYOUT")
        assert r"\sealline{left}" in layout
        assert r"\fancyhead[C]" in layout
        assert r"\textbf{Midterm}" in layout

    def test_compose_when_answer_sheet_text_then_parallel_document(self, raw_template, make_template, make_bank):
        template = make_template(["q1", "q2"])
        result = compose_single_page(
            raw_template, template, make_bank(2).questions,
            answer_sheet_text="AS:{ANSWER_SHEET_CONTENT}",
        )
        assert result.answer_sheet.startswith("AS:")
        assert result.answer_sheet.count(r"\textbf{Question") == 2

    def test_compose_when_no_answer_sheet_text_then_none(self, raw_template, make_template, make_bank):
        result = compose_single_page(raw_template, make_template(["q1"]), make_bank(1).questions)
        assert result.answer_sheet is None

    def test_compose_when_section_skips_question_then_total_counts_rendered_only(
        self, raw_template, make_template, make_question
    ):
        questions = [make_question(qid="q1", points=5), make_question(qid="q2", points=10)]
        result = compose_single_page(raw_template, make_template(["q1"]), questions)
        assert result.page_ranges[0].question_ids == ("q1",)
        assert result.total_points == Decimal(5)
        assert "POINTS=5\n" in result.document

    @pytest.mark.parametrize("arg", ["raw_text", "template", "questions"])
    def test_compose_when_required_arg_none_then_raises(self, raw_template, make_template, make_bank, arg):
        kwargs = {
            "raw_text": raw_template,
            "template": make_template(["q1"]),
            "questions": make_bank(1).questions,
        }
        kwargs[arg] = None
        with pytest.raises(InvalidArgumentError):
            compose_single_page(kwargs["raw_text"], kwargs["template"], kwargs["questions"])


class TestMultiPage:

    def test_compose_when_twelve_by_five_then_three_pages(self, raw_template, make_template, make_question):
        questions = [make_question(qid=f"q{i}", points=1) for i in range(1, 13)]
        result = compose_multi_page(raw_template, make_template(), questions, 5)

        assert result.page_count == 3
        assert [r.count for r in result.page_ranges] == [5, 5, 2]
        assert result.body.count(r"\newpage") == 2
        assert result.layout.count(r"\newpage") == 2
        assert result.total_points == Decimal(12)

    def test_compose_when_numbered_then_global_and_increasing(self, raw_template, make_template, make_question):
        questions = [make_question(qid=f"q{i}") for i in range(1, 8)]
        result = compose_multi_page(raw_template, make_template(), questions, 3)
        numbers = [int(n) for n in re.findall(r"\\textbf\{Question (\d+)\}", result.body)]
        assert numbers == list(range(1, 8))

    def test_compose_when_paginated_then_header_once_footer_per_page(self, raw_template, make_template, make_question):
        template = make_template(seal_line=SealLinePosition.ALTERNATE)
        questions = [make_question(qid=f"q{i}") for i in range(1, 7)]
        result = compose_multi_page(raw_template, template, questions, 2)
        assert result.layout.count(r"\textbf{Midterm}") == 1
        assert result.layout.count(r"\fancyhead[C]") == 3
        assert result.layout.count(r"\sealline{left}") == 2
        assert result.layout.count(r"\sealline{right}") == 1
        assert "Page 3 of 3" in result.layout

    def test_compose_when_no_questions_then_single_empty_page(self, raw_template, make_template):
        result = compose_multi_page(raw_template, make_template(), [], 5)
        assert result.page_count == 1
        assert r"\newpage" not in result.body
        assert r"\textbf{Question" not in result.body

    def test_compose_when_answer_entries_then_follow_global_numbers(self, raw_template, make_template, make_question):
        questions = [make_question(qid=f"q{i}") for i in range(1, 4)]
        result = compose_multi_page(raw_template, make_template(), questions, 2)
        answers = _stream(result.document, "ANSWERS")
        assert answers.count(r"\textbf{Question 3}") == 1

    def test_compose_when_header_config_hides_seal_line_then_none(self, raw_template, make_template, make_question):
        template = make_template(
            seal_line=SealLinePosition.LEFT,
            header_config=HeaderConfig(show_seal_line=False),
        )
        result = compose_multi_page(raw_template, template, [make_question()], 5)
        assert r"\sealline{" not in result.layout

    def test_compose_when_capacity_zero_then_raises(self, raw_template, make_template):
        with pytest.raises(InvalidArgumentError):
            compose_multi_page(raw_template, make_template(), [], 0)

    def test_compose_when_inputs_then_not_mutated(self, raw_template, make_template, make_question):
        questions = [make_question(qid=f"q{i}") for i in range(1, 4)]
        snapshot = list(questions)
        compose_multi_page(raw_template, make_template(), questions, 2)
        assert questions == snapshot

    @pytest.mark.parametrize("capacity", [1, 2, 3, 5, 11, 20])
    def test_compose_when_any_capacity_then_point_suffixes_sum_to_total(
        self, raw_template, make_template, make_question, capacity
    ):
        points = ["1", "2", "2.5", "0.5", "4", "1", "3", "6", "1.5", "2", "7"]
        questions = [make_question(qid=f"q{i}", points=p) for i, p in enumerate(points, start=1)]
        result = compose_multi_page(raw_template, make_template(), questions, capacity)

        suffixes = re.findall(r"\((\d+(?:\.\d+)?) points?\)", result.body)
        assert len(suffixes) == len(points)
        assert sum(Decimal(s) for s in suffixes) == result.total_points == Decimal("30.5")
