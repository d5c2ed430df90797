"""
Unit tests for template and question bank repositories.
"""

import pytest

from examtex.builder.loading import (
    InMemoryQuestionBankRepository,
    InMemoryTemplateRepository,
    JsonQuestionBankRepository,
    JsonTemplateRepository,
    LoaderError,
)
from examtex.core.utils.serialization import save_exam_template, save_question_bank


class TestInMemoryRepositories:

    def test_get_when_present_then_returns(self, make_template, make_bank):
        templates = InMemoryTemplateRepository([make_template()])
        banks = InMemoryQuestionBankRepository([make_bank()])
        assert templates.get_by_id("t1").name == "Midterm"
        assert banks.get_by_id("bank1").id == "bank1"

    def test_get_when_absent_then_none(self):
        assert InMemoryTemplateRepository().get_by_id("nope") is None


class TestJsonRepositories:

    def test_get_when_file_exists_then_loaded(self, tmp_path, make_template, make_bank):
        save_exam_template(make_template(["q1"]), tmp_path / "t1.json")
        save_question_bank(make_bank(2), tmp_path / "bank1.json")
        assert JsonTemplateRepository(tmp_path).get_by_id("t1").sections[0].question_ids == ("q1",)
        assert len(JsonQuestionBankRepository(tmp_path, strict=True).get_by_id("bank1")) == 2

    def test_get_when_file_missing_then_none(self, tmp_path):
        assert JsonTemplateRepository(tmp_path).get_by_id("missing") is None

    def test_get_when_id_escapes_root_then_none(self, tmp_path, make_template):
        root = tmp_path / "repo"
        root.mkdir()
        save_exam_template(make_template(), tmp_path / "outside.json")
        assert JsonTemplateRepository(root).get_by_id("../outside") is None

    def test_get_when_file_invalid_then_loader_error(self, tmp_path):
        (tmp_path / "bad.json").write_text('{"id": "bad"}', encoding="utf-8")
        with pytest.raises(LoaderError):
            JsonQuestionBankRepository(tmp_path).get_by_id("bad")

    def test_init_when_directory_missing_then_loader_error(self, tmp_path):
        with pytest.raises(LoaderError):
            JsonTemplateRepository(tmp_path / "missing")

    def test_ids_when_files_then_sorted_stems(self, tmp_path, make_bank):
        save_question_bank(make_bank(bank_id="b2"), tmp_path / "b2.json")
        save_question_bank(make_bank(bank_id="b1"), tmp_path / "b1.json")
        assert JsonQuestionBankRepository(tmp_path).ids() == ["b1", "b2"]
