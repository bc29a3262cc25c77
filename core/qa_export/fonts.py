"""
Fonts used by the layout.

Names of the 14 built-in PDF fonts (Helvetica, Times-Roman, ...) need no file.
Any other name in the layout is looked up as ``<name>.ttf`` in the font
directories and registered with ReportLab before the first measurement.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from config.logging_config import get_logger

from .errors import FontNotFoundError

logger = get_logger(__name__)


STANDARD_FONTS = frozenset([
    "Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique",
    "Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique",
    "Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic",
    "Symbol", "ZapfDingbats",
])

# System locations checked after the configured font_dir
SYSTEM_FONT_DIRS = (
    Path('/usr/share/fonts/truetype'),
    Path('/usr/share/fonts/TTF'),
    Path('/usr/local/share/fonts'),
    Path(os.path.expanduser('~/.fonts')),
    Path('/Library/Fonts'),
)


class FontManager:
    """
    Resolves layout font names to something ReportLab can measure.

    Usage:
        fonts = FontManager(font_dirs=["assets/fonts"])
        fonts.ensure_fonts(["Helvetica", "NotoSans-Bold"])
    """

    def __init__(self, font_dirs: Optional[Iterable] = None, include_system: bool = True):
        self.font_dirs: List[Path] = [Path(d) for d in font_dirs or []]
        if include_system:
            self.font_dirs.extend(SYSTEM_FONT_DIRS)
        self._ttf_paths: Dict[str, Path] = {}

    def locate(self, font_name: str) -> Optional[Path]:
        """Return the first ``<font_name>.ttf`` in the font directories."""
        filename = f"{font_name}.ttf"
        for directory in self.font_dirs:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
        return None

    def is_available(self, font_name: str) -> bool:
        return (
            font_name in STANDARD_FONTS
            or font_name in self._ttf_paths
            or font_name in pdfmetrics.getRegisteredFontNames()
        )

    def ensure_font(self, font_name: str) -> str:
        """
        Make ``font_name`` usable for measuring and drawing.

        Raises:
            FontNotFoundError: No built-in font and no matching .ttf file
        """
        if self.is_available(font_name):
            return font_name

        path = self.locate(font_name)
        if path is None:
            raise FontNotFoundError(font_name, [str(d) for d in self.font_dirs])

        pdfmetrics.registerFont(TTFont(font_name, str(path)))
        self._ttf_paths[font_name] = path
        logger.info(f"Registered font {font_name} from {path}")
        return font_name

    def ensure_fonts(self, font_names: Iterable[str]) -> None:
        for name in dict.fromkeys(font_names):
            self.ensure_font(name)
