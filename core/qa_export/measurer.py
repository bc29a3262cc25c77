"""
Text measurement and word wrapping backed by ReportLab font metrics.
"""

import re
from typing import Callable, List, Optional

from reportlab.pdfbase.pdfmetrics import stringWidth

from .layout import FontSpec
from .models import TextBlock


WidthFunc = Callable[[str, str, float], float]

_WHITESPACE = re.compile(r'[ \t\f\v]+')


class TextMeasurer:
    """
    Wraps text into lines that fit a maximum width.

    Lines break only at whitespace; a word wider than the available width is
    kept whole on its own line. Explicit newlines are hard breaks, so blank
    lines inside the text survive as empty lines.
    """

    def __init__(self, width_func: Optional[WidthFunc] = None):
        """
        Args:
            width_func: ``(text, font_name, font_size) -> width``; defaults to
                ReportLab's ``stringWidth``
        """
        self._width = width_func or stringWidth

    def text_width(self, text: str, font: FontSpec) -> float:
        return self._width(text, font.name, font.size)

    def wrap(self, text: str, font: FontSpec, max_width: float) -> List[str]:
        """Split ``text`` into the fewest lines no wider than ``max_width``."""
        if not text or not text.strip():
            return []

        lines: List[str] = []
        for paragraph in text.strip('\n').split('\n'):
            lines.extend(self._wrap_paragraph(paragraph, font, max_width))
        return lines

    def _wrap_paragraph(self, paragraph: str, font: FontSpec, max_width: float) -> List[str]:
        words = [w for w in _WHITESPACE.split(paragraph.strip()) if w]
        if not words:
            return ['']

        # Leading indentation (nested list items) stays on the first line
        indent = paragraph[:len(paragraph) - len(paragraph.lstrip(' '))]
        lines = []
        current = indent + words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if self.text_width(candidate, font) <= max_width:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
        return lines

    def block_height(self, lines: List[str], font: FontSpec) -> float:
        return len(lines) * font.leading

    def measure(self, text: str, font: FontSpec, max_width: float) -> TextBlock:
        """Wrap ``text`` and return the lines with the height they occupy."""
        lines = self.wrap(text, font, max_width)
        return TextBlock(lines=tuple(lines), height=self.block_height(lines, font))
