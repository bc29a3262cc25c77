"""Tests for config/settings.py — export settings and layout building."""

import pytest
from pydantic import ValidationError

from config.settings import Settings, get_settings, settings
from core.qa_export.composer import DocumentComposer
from core.qa_export.flow import OverflowPolicy


class TestDefaults:

    def test_a4_with_fifty_point_margins(self):
        layout = Settings().to_layout()
        assert layout.page.width == pytest.approx(595.28)
        assert layout.page.height == pytest.approx(841.89)
        assert layout.page.top_margin == layout.page.bottom_margin == 50
        assert layout.content_width == pytest.approx(495.28)

    def test_fonts(self):
        layout = Settings().to_layout()
        assert (layout.title_font.name, layout.title_font.size, layout.title_font.leading) == ("Helvetica-Bold", 24, 26)
        assert (layout.question_font.name, layout.question_font.size, layout.question_font.leading) == ("Helvetica-Bold", 12, 14)
        assert (layout.answer_font.name, layout.answer_font.size, layout.answer_font.leading) == ("Helvetica", 11, 12)
        assert layout.footer_font.size == 9

    def test_spacing(self):
        layout = Settings().to_layout()
        assert layout.title_top == 80
        assert layout.title_spacing == 40
        assert layout.question_spacing == 15
        assert layout.answer_spacing == 10
        assert layout.pair_spacing == 25
        assert layout.footer_y == pytest.approx(841.89 - 20)

    def test_get_settings_returns_global(self):
        assert get_settings() is settings


class TestEnvironment:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("QA_EXPORT_PAGE_MARGIN", "40")
        monkeypatch.setenv("QA_EXPORT_OVERFLOW_POLICY", "FAIL")
        s = Settings()
        assert s.page_margin == 40
        assert s.overflow_policy == "fail"
        assert s.to_layout().content_width == pytest.approx(595.28 - 80)

    def test_invalid_overflow_policy(self):
        with pytest.raises(ValidationError):
            Settings(overflow_policy="shrink")

    def test_negative_margin(self):
        with pytest.raises(ValidationError):
            Settings(page_margin=-1)

    def test_cors_origins_parsed(self):
        s = Settings(cors_origins="https://a.example, https://b.example")
        assert s.get_cors_origins() == ["https://a.example", "https://b.example"]


def test_composer_from_settings():
    composer = DocumentComposer.from_settings(
        Settings(overflow_policy="fail", split_answer_paragraphs=True)
    )
    assert composer.overflow_policy is OverflowPolicy.FAIL
    assert composer.split_answer_paragraphs is True
    assert composer.layout.page.left_margin == 50
