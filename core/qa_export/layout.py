"""
Layout constants for transcript export.

All measurements are in PDF points with the origin at the top-left corner of
the page; the sink converts to ReportLab's bottom-up coordinates.
"""

from dataclasses import dataclass, field
from typing import Tuple

from reportlab.lib.pagesizes import A4


RGB = Tuple[float, float, float]

BLACK: RGB = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class PageSpec:
    """Page layout specification"""
    width: float       # in points
    height: float      # in points
    top_margin: float
    right_margin: float
    bottom_margin: float
    left_margin: float

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @property
    def content_width(self) -> float:
        return self.width - self.left_margin - self.right_margin

    @property
    def content_bottom(self) -> float:
        """Lowest y a block may reach."""
        return self.height - self.bottom_margin

    @property
    def usable_height(self) -> float:
        return self.height - self.top_margin - self.bottom_margin

    @classmethod
    def a4(cls, margin: float = 50) -> 'PageSpec':
        """A4 portrait with the same margin on every side"""
        return cls(
            width=A4[0], height=A4[1],
            top_margin=margin, right_margin=margin,
            bottom_margin=margin, left_margin=margin
        )


@dataclass(frozen=True)
class FontSpec:
    """Font specification for one kind of block"""
    name: str            # ReportLab font name (standard Type1 or registered TTF)
    size: float          # Font size in points
    leading: float       # Line height in points
    color: RGB = BLACK


@dataclass(frozen=True)
class LayoutSpec:
    """Fixed configuration for one export run."""
    page: PageSpec = field(default_factory=PageSpec.a4)

    title_font: FontSpec = field(default_factory=lambda: FontSpec("Helvetica-Bold", 24, 26))
    question_font: FontSpec = field(default_factory=lambda: FontSpec("Helvetica-Bold", 12, 14))
    answer_font: FontSpec = field(default_factory=lambda: FontSpec(
        "Helvetica", 11, 12, color=(50 / 255, 50 / 255, 50 / 255)
    ))
    footer_font: FontSpec = field(default_factory=lambda: FontSpec(
        "Helvetica", 9, 9, color=(150 / 255, 150 / 255, 150 / 255)
    ))

    title_top: float = 80
    title_spacing: float = 40
    question_spacing: float = 15
    answer_spacing: float = 10
    pair_spacing: float = 25
    footer_offset: float = 20

    @property
    def content_width(self) -> float:
        return self.page.content_width

    @property
    def footer_y(self) -> float:
        return self.page.height - self.footer_offset
