"""
Document Composer - lays out a titled question/answer transcript as pages.

Layout runs in two passes:

1. Content pass: the title block, then for every answered pair a question
   block and an answer block, each placed through the PageFlowController.
2. Footer pass: once the page count is final, every page gets the document
   title at the bottom-left and its page number at the bottom-right.
"""

from typing import Iterable, List, Optional

from config.logging_config import get_logger

from .errors import ContentRenderError, EmptyTranscriptError, InternalLayoutError
from .flow import OverflowPolicy, PageFlowController
from .fonts import FontManager
from .layout import FontSpec, LayoutSpec
from .measurer import TextMeasurer
from .models import Align, Document, DrawOp, Footer, QAPair, TextBlock
from .normalizer import MarkdownNormalizer

logger = get_logger(__name__)


class DocumentComposer:
    """
    Composes transcript documents.

    A composer only holds configuration; every compose() call builds its own
    flow controller and page list, so one instance can serve many exports.

    Usage:
        composer = DocumentComposer()
        document = composer.compose("Biology revision", [QAPair("What is ATP?", "**Energy** ...")])
    """

    def __init__(
        self,
        layout: Optional[LayoutSpec] = None,
        measurer: Optional[TextMeasurer] = None,
        normalizer: Optional[MarkdownNormalizer] = None,
        font_manager: Optional[FontManager] = None,
        overflow_policy: str = OverflowPolicy.ACCEPT.value,
        split_answer_paragraphs: bool = False,
    ):
        """
        Args:
            layout: Layout constants; defaults to A4 with 50pt margins
            measurer: Text measurer; defaults to ReportLab font metrics
            normalizer: Markdown to plain text converter for answers
            font_manager: Registers non-standard fonts before measuring
            overflow_policy: 'accept' or 'fail' for blocks taller than a page
            split_answer_paragraphs: Place each answer paragraph as its own block
        """
        self.layout = layout or LayoutSpec()
        self.measurer = measurer or TextMeasurer()
        self.normalizer = normalizer or MarkdownNormalizer()
        self.font_manager = font_manager or FontManager()
        self.overflow_policy = OverflowPolicy(overflow_policy)
        self.split_answer_paragraphs = split_answer_paragraphs

    @classmethod
    def from_settings(cls, settings) -> 'DocumentComposer':
        """Build a composer from a config.settings.Settings instance."""
        font_dirs = [settings.font_dir] if settings.font_dir else None
        return cls(
            layout=settings.to_layout(),
            font_manager=FontManager(font_dirs=font_dirs),
            overflow_policy=settings.overflow_policy,
            split_answer_paragraphs=settings.split_answer_paragraphs,
        )

    def compose(self, title: str, pairs: Iterable[QAPair]) -> Document:
        """
        Lay out ``pairs`` under ``title``.

        Pairs without an answer yet are left out.

        Raises:
            EmptyTranscriptError: No pair has both a question and an answer
            ContentRenderError: An answer could not be normalized
            BlockTooLargeError: A block is taller than a page under the 'fail' policy
            InternalLayoutError: The page flow reached an impossible state
            FontNotFoundError: A layout font is not built in and has no .ttf file
        """
        pairs = list(pairs)
        exportable = [p for p in pairs if p.question.strip() and p.is_answered]
        if not exportable:
            raise EmptyTranscriptError(
                f"Nothing to export: {len(pairs)} pair(s), none answered"
            )
        if len(exportable) < len(pairs):
            logger.info(f"Skipping {len(pairs) - len(exportable)} unanswered pair(s)")

        layout = self.layout
        self.font_manager.ensure_fonts(
            f.name for f in (layout.title_font, layout.question_font,
                             layout.answer_font, layout.footer_font)
        )

        flow = PageFlowController(
            layout.page,
            start_y=layout.title_top,
            overflow_policy=self.overflow_policy,
        )

        # Title, centered
        title_block = self.measurer.measure(title, layout.title_font, layout.content_width)
        self._place(flow, title_block, layout.title_font,
                    x=layout.page.width / 2, align=Align.CENTER,
                    spacing=layout.title_spacing)

        for number, pair in enumerate(exportable, start=1):
            question_block = self.measurer.measure(
                pair.question, layout.question_font, layout.content_width
            )
            self._place(flow, question_block, layout.question_font,
                        x=layout.page.left_margin, spacing=layout.question_spacing)

            for text in self._answer_texts(pair, number):
                answer_block = self.measurer.measure(
                    text, layout.answer_font, layout.content_width
                )
                self._place(flow, answer_block, layout.answer_font,
                            x=layout.page.left_margin, spacing=layout.answer_spacing)

            flow.skip(layout.pair_spacing)

        document = Document(title=title, layout=layout, pages=flow.finish())
        self.stamp_footers(document)

        logger.info(
            f"Composed '{title}': {len(exportable)} pair(s) on {document.page_count} page(s)"
        )
        return document

    def stamp_footers(self, document: Document) -> None:
        """Write the title and page number onto every finalized page."""
        layout = document.layout
        font = layout.footer_font
        y = layout.footer_y

        for page in document.pages:
            if not page.finalized:
                raise InternalLayoutError(f"Page {page.index} stamped before it was finalized")
            if page.footer is not None:
                raise InternalLayoutError(f"Page {page.index} already has a footer")

            page.footer = Footer(
                label=document.title,
                page_number=page.index,
                ops=(
                    self._op(document.title, layout.page.left_margin, y, font, Align.LEFT),
                    self._op(str(page.index), layout.page.width - layout.page.right_margin,
                             y, font, Align.RIGHT),
                ),
            )

    def _answer_texts(self, pair: QAPair, number: int) -> List[str]:
        try:
            if self.split_answer_paragraphs:
                texts = [t for t in self.normalizer.to_paragraphs(pair.answer) if t.strip()]
            else:
                texts = [self.normalizer.to_plain_text(pair.answer)]
        except Exception as e:
            raise ContentRenderError(
                f"Could not render answer {number}: {e}", pair_index=number - 1
            ) from e

        if not all(isinstance(t, str) for t in texts):
            raise ContentRenderError(
                f"Normalizer returned non-text for answer {number}", pair_index=number - 1
            )
        return texts

    def _place(
        self,
        flow: PageFlowController,
        block: TextBlock,
        font: FontSpec,
        x: float,
        spacing: float,
        align: Align = Align.LEFT,
    ) -> None:
        # Nothing to draw: no reservation, so no page break for an empty page
        if block.is_empty:
            return
        flow.reserve(block.height)
        page = flow.current_page
        for i, line in enumerate(block.lines):
            page.draw(self._op(line, x, flow.cursor + i * font.leading, font, align))
        flow.advance(block.height, spacing)

    @staticmethod
    def _op(text: str, x: float, y: float, font: FontSpec, align: Align) -> DrawOp:
        return DrawOp(
            text=text, x=x, y=y,
            font_name=font.name, font_size=font.size,
            color=font.color, align=align,
        )


def compose(title: str, pairs: Iterable[QAPair], **kwargs) -> Document:
    """Compose with a default-configured DocumentComposer."""
    return DocumentComposer(**kwargs).compose(title, pairs)
