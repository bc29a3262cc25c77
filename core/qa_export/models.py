"""
Data models for transcript export.
All models use dataclasses for simplicity.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .layout import BLACK, RGB, LayoutSpec


class Align(Enum):
    """Horizontal anchoring of a drawn line"""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class QAPair:
    """One question and its (markdown) answer"""
    question: str
    answer: str = ""

    @property
    def is_answered(self) -> bool:
        return bool(self.answer and self.answer.strip())


@dataclass
class Transcript:
    """A titled conversation"""
    title: str
    pairs: List[QAPair] = field(default_factory=list)

    def exportable_pairs(self) -> List[QAPair]:
        """Pairs with a question and a non-empty answer."""
        return [p for p in self.pairs if p.question.strip() and p.is_answered]


@dataclass(frozen=True)
class TextBlock:
    """Wrapped lines that are placed as one unit"""
    lines: Tuple[str, ...]
    height: float

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class DrawOp:
    """A single line of text at a fixed position (top-down y, baseline)"""
    text: str
    x: float
    y: float
    font_name: str
    font_size: float
    color: RGB = BLACK
    align: Align = Align.LEFT


@dataclass(frozen=True)
class Footer:
    """Running footer written by the stamping pass"""
    label: str
    page_number: int
    ops: Tuple[DrawOp, ...]


@dataclass
class Page:
    """A page of draw operations"""
    index: int  # 1-based
    ops: List[DrawOp] = field(default_factory=list)
    footer: Optional[Footer] = None
    finalized: bool = False

    def draw(self, op: DrawOp) -> None:
        self.ops.append(op)

    @property
    def lines(self) -> List[str]:
        """Text of the content lines in drawing order (footer excluded)."""
        return [op.text for op in self.ops]


@dataclass
class Document:
    """An in-memory paginated document"""
    title: str
    layout: LayoutSpec
    pages: List[Page] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page(self, index: int) -> Page:
        """Return the page with the given 1-based index."""
        return self.pages[index - 1]
