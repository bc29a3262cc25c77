"""
Markdown Normalizer - Convert answer markdown to plain renderable text.

Only the text survives: emphasis markers, link targets, code fences and table
separators are dropped; list items keep a bullet or number prefix so that the
exported answer still reads as a list.
"""

import html
import re
from typing import List, Tuple

from config.logging_config import get_logger

logger = get_logger(__name__)

BULLET = "•"

_BULLET_ITEM = re.compile(r'^(\s*)[\-\*\+]\s+(.*)$')
_NUMBERED_ITEM = re.compile(r'^(\s*)(\d+)[\.\)]\s+(.*)$')
_HEADING = re.compile(r'^\s{0,3}(#{1,6})\s+(.*?)\s*#*\s*$')
_RULE = re.compile(r'^\s{0,3}([\-\*_])(\s*\1){2,}\s*$')
_TABLE_SEPARATOR = re.compile(r'^[\|\s\-:]+$')
_FENCE = re.compile(r'^\s{0,3}(```|~~~)')

# Order matters: check longer patterns first
_INLINE = [
    (re.compile(r'!\[([^\]]*)\]\([^\)]*\)'), r'\1'),        # Image ![alt](src)
    (re.compile(r'\[([^\]]+)\]\([^\)]*\)'), r'\1'),         # Link [text](href)
    (re.compile(r'</?[A-Za-z][^<>\n]*>'), ''),               # Inline HTML tags
    (re.compile(r'`([^`]+)`'), r'\1'),                       # Inline code `text`
    (re.compile(r'\*\*\*(.+?)\*\*\*'), r'\1'),               # Bold+Italic ***text***
    (re.compile(r'\*\*(.+?)\*\*'), r'\1'),                   # Bold **text**
    (re.compile(r'(?<!\w)__(.+?)__(?!\w)'), r'\1'),          # Bold __text__
    (re.compile(r'(?<![\*\w])\*(?!\s)(.+?)(?<!\s)\*(?!\*)'), r'\1'),  # Italic *text*
    (re.compile(r'(?<!\w)_(?!\s)(.+?)(?<!\s)_(?!\w)'), r'\1'),        # Italic _text_
    (re.compile(r'~~(.+?)~~'), r'\1'),                       # Strikethrough ~~text~~
]


class MarkdownNormalizer:
    """
    Converts markdown into plain text, one output line per block.

    Malformed markdown never raises: unterminated fences run to the end of the
    input and unmatched emphasis markers are left as literal characters.

    Usage:
        normalizer = MarkdownNormalizer()
        text = normalizer.to_plain_text("**4**")  # "4"
    """

    def to_plain_text(self, markdown: str) -> str:
        """Return the plain text of ``markdown`` with blocks separated by newlines."""
        return '\n'.join(self.to_paragraphs(markdown))

    def to_paragraphs(self, markdown: str) -> List[str]:
        """Return the plain text of each block in document order."""
        if not markdown:
            return []
        text = markdown.replace('\r\n', '\n').replace('\r', '\n')
        return [self._strip_inline(t) if kind != 'code' else t
                for kind, t in self._parse_markdown(text)]

    def _parse_markdown(self, content: str) -> List[Tuple[str, str]]:
        """
        Split markdown into (kind, raw text) blocks.
        Handles: headings, paragraphs, lists, code blocks, quotes, tables, rules.
        """
        blocks = []
        lines = content.split('\n')
        i = 0

        while i < len(lines):
            line = lines[i]

            if not line.strip() or _RULE.match(line):
                i += 1
                continue

            match = _HEADING.match(line)
            if match:
                blocks.append(('heading', match.group(2)))
                i += 1
                continue

            if _FENCE.match(line):
                code_lines, consumed = self._parse_code_block(lines, i)
                blocks.extend(('code', code) for code in code_lines)
                i += consumed
                continue

            if line.lstrip().startswith('>'):
                quote, consumed = self._parse_blockquote(lines, i)
                blocks.append(('quote', quote))
                i += consumed
                continue

            if _BULLET_ITEM.match(line) or _NUMBERED_ITEM.match(line):
                items, consumed = self._parse_list(lines, i)
                blocks.extend(('item', item) for item in items)
                i += consumed
                continue

            if self._is_table_start(lines, i):
                rows, consumed = self._parse_table(lines, i)
                blocks.extend(('row', row) for row in rows)
                i += consumed
                continue

            paragraph, consumed = self._parse_paragraph(lines, i)
            blocks.append(('paragraph', paragraph))
            i += consumed

        return blocks

    @staticmethod
    def _is_table_start(lines: List[str], i: int) -> bool:
        """A table starts at a row with pipes followed by a --- separator row."""
        return ('|' in lines[i] and i + 1 < len(lines)
                and _TABLE_SEPARATOR.match(lines[i + 1].strip()) is not None
                and '-' in lines[i + 1])

    def _parse_code_block(self, lines: List[str], start: int) -> Tuple[List[str], int]:
        """Parse a fenced code block; an unterminated fence runs to the end."""
        fence = _FENCE.match(lines[start]).group(1)
        code_lines = []
        i = start + 1

        while i < len(lines):
            if lines[i].lstrip().startswith(fence):
                i += 1
                break
            code_lines.append(lines[i].rstrip())
            i += 1
        else:
            logger.debug("Unterminated code fence at line %d", start + 1)

        return code_lines, i - start

    def _parse_blockquote(self, lines: List[str], start: int) -> Tuple[str, int]:
        """Parse a blockquote"""
        quote_lines = []
        i = start

        while i < len(lines) and lines[i].lstrip().startswith('>'):
            quote_lines.append(lines[i].lstrip().lstrip('>').strip())
            i += 1

        return ' '.join(q for q in quote_lines if q), i - start

    def _parse_list(self, lines: List[str], start: int) -> Tuple[List[str], int]:
        """Parse a list (bullet or numbered, nesting kept as indentation)"""
        items: List[str] = []
        i = start

        while i < len(lines):
            line = lines[i]
            bullet = _BULLET_ITEM.match(line)
            numbered = _NUMBERED_ITEM.match(line)

            if bullet:
                indent = '  ' * (len(bullet.group(1).expandtabs(4)) // 2)
                items.append(f"{indent}{BULLET} {bullet.group(2).strip()}")
            elif numbered:
                indent = '  ' * (len(numbered.group(1).expandtabs(4)) // 2)
                items.append(f"{indent}{numbered.group(2)}. {numbered.group(3).strip()}")
            elif line.startswith('  ') and line.strip() and items:
                # Continuation of previous item
                items[-1] += ' ' + line.strip()
            else:
                break
            i += 1

        return items, i - start

    def _parse_table(self, lines: List[str], start: int) -> Tuple[List[str], int]:
        """Parse a markdown table into one line per row"""
        rows = []
        i = start

        while i < len(lines) and '|' in lines[i]:
            line = lines[i].strip()
            i += 1

            # Skip separator line
            if _TABLE_SEPARATOR.match(line):
                continue

            cells = [c.strip() for c in line.strip('|').split('|')]
            rows.append(' | '.join(cells))

        return rows, i - start

    def _parse_paragraph(self, lines: List[str], start: int) -> Tuple[str, int]:
        """Parse a paragraph (consecutive non-empty lines)"""
        para_lines = []
        i = start

        while i < len(lines):
            line = lines[i]

            # Stop at empty line or special syntax
            if not line.strip():
                break
            if i > start and (_HEADING.match(line) or _FENCE.match(line)
                              or line.lstrip().startswith('>')
                              or _BULLET_ITEM.match(line) or _NUMBERED_ITEM.match(line)
                              or self._is_table_start(lines, i)):
                break

            para_lines.append(line.strip())
            i += 1

        return ' '.join(para_lines), max(1, i - start)

    def _strip_inline(self, text: str) -> str:
        """Drop inline markup, keeping the text it wraps."""
        for pattern, replacement in _INLINE:
            text = pattern.sub(replacement, text)
        text = re.sub(r'\\([\\`*_{}\[\]()#+\-.!|>~])', r'\1', text)  # Escapes
        return html.unescape(text)


_default_normalizer = MarkdownNormalizer()


def to_plain_text(markdown: str) -> str:
    """Module-level convenience wrapper around MarkdownNormalizer."""
    return _default_normalizer.to_plain_text(markdown)
