"""
Transcript PDF export.

Lays out a titled list of question/answer pairs (answers in markdown) as A4
pages with a centered title, automatic page breaks and a footer carrying the
title and page number on every page.

Usage:
    from core.qa_export import DocumentComposer, PdfSink, QAPair

    document = DocumentComposer().compose(
        "Biology revision",
        [QAPair("What is 2+2?", "**4**")],
    )
    path = PdfSink().write(document, "data/output")

Key components:
- MarkdownNormalizer: answer markdown to plain text
- TextMeasurer: word wrapping with ReportLab font metrics
- PageFlowController: cursor and page-break decisions
- DocumentComposer: content pass plus footer-stamping pass
- PdfSink: PDF serialization and filename derivation
"""

from .composer import DocumentComposer, compose
from .errors import (
    BlockTooLargeError,
    ContentRenderError,
    EmptyTranscriptError,
    ExportError,
    FontNotFoundError,
    InternalLayoutError,
    SinkError,
)
from .flow import FlowState, OverflowPolicy, PageFlowController
from .fonts import FontManager
from .layout import FontSpec, LayoutSpec, PageSpec
from .measurer import TextMeasurer
from .models import Align, Document, DrawOp, Footer, Page, QAPair, TextBlock, Transcript
from .normalizer import MarkdownNormalizer, to_plain_text
from .sink import PdfSink, derive_filename
from .transcript import DEFAULT_TITLE, TranscriptStore, derive_chat_title


__all__ = [
    # Composition
    'DocumentComposer',
    'compose',
    'PageFlowController',
    'FlowState',
    'OverflowPolicy',
    'TextMeasurer',
    'MarkdownNormalizer',
    'to_plain_text',
    'FontManager',

    # Layout and models
    'LayoutSpec',
    'PageSpec',
    'FontSpec',
    'QAPair',
    'Transcript',
    'TextBlock',
    'DrawOp',
    'Align',
    'Footer',
    'Page',
    'Document',

    # Output
    'PdfSink',
    'derive_filename',

    # Transcript helpers
    'DEFAULT_TITLE',
    'TranscriptStore',
    'derive_chat_title',

    # Errors
    'ExportError',
    'EmptyTranscriptError',
    'ContentRenderError',
    'FontNotFoundError',
    'InternalLayoutError',
    'BlockTooLargeError',
    'SinkError',
]


__version__ = '1.0.0'
