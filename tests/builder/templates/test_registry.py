"""
Unit tests for the raw template registry.
"""

import pytest

from examtex.builder.templates import PLACEHOLDERS, TemplateRegistry, find_placeholders
from examtex.core.models import TemplateStyle
from examtex.errors import TemplateContentUnavailableError, UnsupportedStyleError


class TestDefaultRegistry:

    def test_default_when_loaded_then_basic_and_advanced(self):
        registry = TemplateRegistry.default()
        assert set(registry.styles) == {TemplateStyle.BASIC, TemplateStyle.ADVANCED}

    @pytest.mark.parametrize("style", [TemplateStyle.BASIC, TemplateStyle.ADVANCED])
    def test_default_when_style_then_text_has_content_token(self, style):
        text = TemplateRegistry.default().get(style)
        assert "{CONTENT}" in text
        assert "{LAYOUT_ELEMENTS}" in text

    def test_default_when_templates_then_only_known_tokens(self):
        registry = TemplateRegistry.default()
        for style in registry.styles:
            assert set(find_placeholders(registry.get(style))) <= set(PLACEHOLDERS)

    def test_default_when_answer_sheet_then_has_answer_token(self):
        assert "{ANSWER_SHEET_CONTENT}" in TemplateRegistry.default().get_answer_sheet()

    def test_get_when_custom_not_registered_then_unsupported(self):
        with pytest.raises(UnsupportedStyleError):
            TemplateRegistry.default().get(TemplateStyle.CUSTOM)


class TestExplicitRegistry:

    def test_get_when_literal_text_then_returned(self):
        registry = TemplateRegistry({TemplateStyle.CUSTOM: "{CONTENT}"})
        assert registry.get(TemplateStyle.CUSTOM) == "{CONTENT}"
        assert registry.get_answer_sheet() is None

    def test_get_when_blank_text_then_unavailable(self):
        registry = TemplateRegistry({TemplateStyle.BASIC: "   "})
        with pytest.raises(TemplateContentUnavailableError):
            registry.get(TemplateStyle.BASIC)

    def test_get_when_file_removed_then_unavailable(self, tmp_path):
        path = tmp_path / "basic.tex"
        path.write_text("{CONTENT}", encoding="utf-8")
        registry = TemplateRegistry({TemplateStyle.BASIC: path})
        path.unlink()
        with pytest.raises(TemplateContentUnavailableError):
            registry.get(TemplateStyle.BASIC)

    def test_from_directory_when_files_then_registered_by_style(self, tmp_path):
        (tmp_path / "custom.tex").write_text("X {CONTENT}", encoding="utf-8")
        (tmp_path / "answer_sheet.tex").write_text("{ANSWER_SHEET_CONTENT}", encoding="utf-8")
        registry = TemplateRegistry.from_directory(tmp_path)
        assert registry.styles == (TemplateStyle.CUSTOM,)
        assert registry.get(TemplateStyle.CUSTOM) == "X {CONTENT}"
        assert registry.get_answer_sheet() == "{ANSWER_SHEET_CONTENT}"

    def test_registry_when_source_mapping_mutated_then_unaffected(self):
        sources = {TemplateStyle.BASIC: "{CONTENT}"}
        registry = TemplateRegistry(sources)
        sources[TemplateStyle.ADVANCED] = "{CONTENT}"
        assert not registry.supports(TemplateStyle.ADVANCED)
