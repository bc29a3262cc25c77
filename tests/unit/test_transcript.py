"""Tests for core/qa_export/transcript.py and sink filename derivation."""

import json

import pytest

from core.qa_export.models import QAPair, Transcript
from core.qa_export.sink import derive_filename
from core.qa_export.transcript import (
    DEFAULT_TITLE,
    TranscriptStore,
    derive_chat_title,
    transcript_from_dict,
)


class TestDeriveChatTitle:

    def test_short_question_unchanged(self):
        assert derive_chat_title("What is ATP?") == "What is ATP?"

    def test_exactly_forty_chars(self):
        q = "x" * 40
        assert derive_chat_title(q) == q

    def test_truncated_with_ellipsis(self):
        assert derive_chat_title("x" * 45) == "x" * 40 + "..."

    def test_trims_whitespace(self):
        assert derive_chat_title("   Explain osmosis  ") == "Explain osmosis"

    def test_blank_question_uses_default(self):
        assert derive_chat_title("  ") == DEFAULT_TITLE
        assert derive_chat_title("", default="Untitled") == "Untitled"


class TestDeriveFilename:

    def test_every_unsafe_char_replaced(self):
        title = "Q1 (5 marks): Explain Photosynthesis..."
        assert derive_filename(title) == "q1__5_marks___explain_photosynthesis___.pdf"

    def test_lowercased(self):
        assert derive_filename("ATP") == "atp.pdf"

    def test_non_ascii_replaced_per_character(self):
        assert derive_filename("Café") == "caf_.pdf"

    def test_stable(self):
        title = "Biology: Revision #2"
        assert derive_filename(title) == derive_filename(title)

    def test_extension(self):
        assert derive_filename("Notes", extension="json") == "notes.json"


class TestTranscriptFromDict:

    def test_stored_shape(self):
        t = transcript_from_dict({"title": "Bio", "qaPairs": [{"q": "Q1", "a": "A1"}]})
        assert t.title == "Bio"
        assert t.pairs == [QAPair("Q1", "A1")]

    def test_missing_title_derived_from_first_question(self):
        question = "Explain the Krebs cycle in detail, with all eight steps"
        t = transcript_from_dict({"qaPairs": [{"q": question, "a": ""}]})
        assert t.title == question[:40] + "..."

    def test_empty_question_rejected(self):
        with pytest.raises(ValueError):
            transcript_from_dict({"title": "Bio", "qaPairs": [{"q": "  ", "a": "A"}]})

    def test_not_an_object(self):
        with pytest.raises(ValueError):
            transcript_from_dict(["not", "a", "dict"])

    @pytest.mark.parametrize("data", [
        {"title": "Bio", "qaPairs": ["oops"]},
        {"title": "Bio", "qaPairs": "oops"},
        {"title": "Bio", "qaPairs": {"q": "Q1", "a": "A1"}},
        {"title": 42, "qaPairs": [{"q": "Q1", "a": "A1"}]},
        {"title": "Bio", "qaPairs": [{"q": ["Q1"], "a": "A1"}]},
        {"title": "Bio", "qaPairs": [{"q": "Q1", "a": {"text": "A1"}}]},
    ])
    def test_malformed_shape_rejected(self, data):
        with pytest.raises(ValueError):
            transcript_from_dict(data)

    def test_exportable_pairs_skip_pending(self):
        t = Transcript("Bio", [QAPair("Q1", "A1"), QAPair("Q2", "")])
        assert t.exportable_pairs() == [QAPair("Q1", "A1")]


class TestTranscriptStore:

    @pytest.fixture
    def store(self, tmp_path):
        return TranscriptStore(tmp_path / "chat" / "exam-helper-chat.json")

    def test_load_missing_returns_none(self, store):
        assert store.load() is None

    def test_save_and_load(self, store):
        transcript = Transcript("Bio", [QAPair("Q1", "**A1**"), QAPair("Q2", "")])
        store.save(transcript)
        assert store.load() == transcript

    def test_saved_json_shape(self, store):
        store.save(Transcript("Bio", [QAPair("Q1", "A1")]))
        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data == {"title": "Bio", "qaPairs": [{"q": "Q1", "a": "A1"}]}

    def test_empty_transcript_clears(self, store):
        store.save(Transcript("Bio", [QAPair("Q1", "A1")]))
        store.save(Transcript("Bio", []))
        assert not store.path.exists()

    def test_clear_missing_is_noop(self, store):
        store.clear()
        assert store.load() is None
