"""
Transcript helpers: chat-title derivation and file-backed persistence.

The stored JSON keeps the shape used by the browser client:

    {"title": "...", "qaPairs": [{"q": "...", "a": "..."}]}
"""

import json
from pathlib import Path
from typing import Optional, Union

from config.logging_config import get_logger

from .models import QAPair, Transcript

logger = get_logger(__name__)

DEFAULT_TITLE = "Exam Answer Generator"
TITLE_MAX_CHARS = 40


def derive_chat_title(question: str, limit: int = TITLE_MAX_CHARS, default: str = DEFAULT_TITLE) -> str:
    """Title a chat after its first question, truncated with '...'."""
    question = question.strip()
    if not question:
        return default
    return question[:limit] + ("..." if len(question) > limit else "")


def transcript_from_dict(data: dict) -> Transcript:
    """Build a Transcript from the stored JSON shape."""
    if not isinstance(data, dict):
        raise ValueError("Transcript must be a JSON object")

    items = data.get("qaPairs") or []
    if not isinstance(items, list):
        raise ValueError("qaPairs must be a list")

    pairs = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Pair {i + 1} must be an object with 'q' and 'a'")
        question = item.get("q") or ""
        answer = item.get("a") or ""
        if not isinstance(question, str) or not isinstance(answer, str):
            raise ValueError(f"Pair {i + 1} must have text 'q' and 'a'")
        if not question.strip():
            raise ValueError(f"Pair {i + 1} has an empty question")
        pairs.append(QAPair(question=question.strip(), answer=answer))

    title = data.get("title")
    if title is not None and not isinstance(title, str):
        raise ValueError("title must be a string")
    title = title or (derive_chat_title(pairs[0].question) if pairs else DEFAULT_TITLE)
    return Transcript(title=title, pairs=pairs)


def transcript_to_dict(transcript: Transcript) -> dict:
    return {
        "title": transcript.title,
        "qaPairs": [{"q": p.question, "a": p.answer} for p in transcript.pairs],
    }


class TranscriptStore:
    """
    Persists one transcript as a JSON file.

    Usage:
        store = TranscriptStore("data/exam-helper-chat.json")
        transcript = store.load()
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Optional[Transcript]:
        """Return the saved transcript, or None when nothing is saved."""
        if not self.path.exists():
            return None

        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return transcript_from_dict(data)

    def save(self, transcript: Transcript) -> None:
        """Save ``transcript``; an empty transcript clears the store."""
        if not transcript.pairs:
            self.clear()
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(transcript_to_dict(transcript), f, ensure_ascii=False, indent=2)
        logger.debug(f"Saved transcript '{transcript.title}' to {self.path}")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
