"""Tests for core/qa_export/normalizer.py — markdown to plain text."""

import pytest

from core.qa_export.normalizer import MarkdownNormalizer, to_plain_text


@pytest.fixture
def normalizer():
    return MarkdownNormalizer()


# ==================== Inline markup ====================


class TestInlineMarkup:
    """Emphasis, code, links and escapes keep only their text."""

    def test_bold(self, normalizer):
        assert normalizer.to_plain_text("**4**") == "4"

    def test_italic_and_bold_mixed(self, normalizer):
        md = "Highlight **important terms** and *key ideas*."
        assert normalizer.to_plain_text(md) == "Highlight important terms and key ideas."

    def test_bold_italic(self, normalizer):
        assert normalizer.to_plain_text("***both***") == "both"

    def test_underscore_emphasis(self, normalizer):
        assert normalizer.to_plain_text("__strong__ and _soft_") == "strong and soft"

    def test_snake_case_untouched(self, normalizer):
        assert normalizer.to_plain_text("call my_func_name now") == "call my_func_name now"

    def test_inline_code(self, normalizer):
        assert normalizer.to_plain_text("Use `pip install` here") == "Use pip install here"

    def test_strikethrough(self, normalizer):
        assert normalizer.to_plain_text("~~old~~ new") == "old new"

    def test_link_keeps_label(self, normalizer):
        assert normalizer.to_plain_text("See [the docs](https://example.com).") == "See the docs."

    def test_image_keeps_alt(self, normalizer):
        assert normalizer.to_plain_text("![Chloroplast](c.png)") == "Chloroplast"

    def test_escaped_asterisk(self, normalizer):
        assert normalizer.to_plain_text(r"2 \* 3 = 6") == "2 * 3 = 6"

    def test_html_entities_decoded(self, normalizer):
        assert normalizer.to_plain_text("salt &amp; pepper") == "salt & pepper"

    def test_multiplication_spacing_untouched(self, normalizer):
        assert normalizer.to_plain_text("2 * 3 * 4") == "2 * 3 * 4"

    def test_inequalities_kept(self, normalizer):
        text = "Acidic if pH < 7 and basic if pH > 7."
        assert normalizer.to_plain_text(text) == text
        assert normalizer.to_plain_text("a < b") == "a < b"
        assert normalizer.to_plain_text("x<3 and y>2") == "x<3 and y>2"

    def test_html_tags_dropped(self, normalizer):
        assert normalizer.to_plain_text("H<sub>2</sub>O<br/>") == "H2O"


# ==================== Block structure ====================


class TestBlocks:
    """Each block becomes one line of plain text."""

    def test_heading_and_paragraph(self, normalizer):
        md = "# Photosynthesis\n\nPlants make *glucose*."
        assert normalizer.to_plain_text(md) == "Photosynthesis\nPlants make glucose."

    def test_soft_wrapped_paragraph_joined(self, normalizer):
        md = "Line one\nline two\nline three"
        assert normalizer.to_plain_text(md) == "Line one line two line three"

    def test_bullet_list(self, normalizer):
        md = "- Light reaction\n- Calvin cycle"
        assert normalizer.to_plain_text(md) == "• Light reaction\n• Calvin cycle"

    def test_numbered_list(self, normalizer):
        md = "1. Absorb light\n2. Split water"
        assert normalizer.to_plain_text(md) == "1. Absorb light\n2. Split water"

    def test_nested_list_indented(self, normalizer):
        md = "- Parent\n  - Child"
        assert normalizer.to_paragraphs(md) == ["• Parent", "  • Child"]

    def test_list_item_emphasis_stripped(self, normalizer):
        assert normalizer.to_plain_text("- **ATP** synthase") == "• ATP synthase"

    def test_blockquote(self, normalizer):
        assert normalizer.to_plain_text("> quoted\n> text") == "quoted text"

    def test_code_block_verbatim(self, normalizer):
        md = "```python\nx = 2 * 3 * 4\nprint(**kw)\n```"
        assert normalizer.to_paragraphs(md) == ["x = 2 * 3 * 4", "print(**kw)"]

    def test_table_rows(self, normalizer):
        md = "| Feature | C3 |\n|---|---|\n| **Enzyme** | RuBisCO |"
        assert normalizer.to_paragraphs(md) == ["Feature | C3", "Enzyme | RuBisCO"]

    def test_table_directly_after_paragraph(self, normalizer):
        md = "Comparison:\n| a | b |\n|---|---|\n| 1 | 2 |"
        assert normalizer.to_paragraphs(md) == ["Comparison:", "a | b", "1 | 2"]

    def test_pipe_in_paragraph_is_text(self, normalizer):
        assert normalizer.to_plain_text("either a | b\nor c") == "either a | b or c"

    def test_horizontal_rule_dropped(self, normalizer):
        assert normalizer.to_plain_text("Above\n\n---\n\nBelow") == "Above\nBelow"

    def test_paragraphs(self, normalizer):
        md = "First.\n\nSecond.\n\n\nThird."
        assert normalizer.to_paragraphs(md) == ["First.", "Second.", "Third."]


# ==================== Malformed / empty input ====================


class TestMalformed:
    """Malformed markdown degrades to best-effort text."""

    def test_empty(self, normalizer):
        assert normalizer.to_plain_text("") == ""
        assert normalizer.to_paragraphs("") == []

    def test_unterminated_fence(self, normalizer):
        md = "Intro\n\n```\ncode line"
        assert normalizer.to_paragraphs(md) == ["Intro", "code line"]

    def test_unmatched_bold_left_literal(self, normalizer):
        assert normalizer.to_plain_text("**bold") == "**bold"

    def test_windows_newlines(self, normalizer):
        assert normalizer.to_plain_text("# A\r\n\r\nB") == "A\nB"

    def test_hash_without_space_is_text(self, normalizer):
        assert normalizer.to_plain_text("#hashtag") == "#hashtag"


def test_module_level_helper():
    assert to_plain_text("**4**") == "4"
