"""
PDF sink - serialize a composed Document with the ReportLab canvas.
"""

import io
import os
import re
import tempfile
from pathlib import Path
from typing import Union

from reportlab.pdfgen import canvas as rl_canvas

from config.logging_config import get_logger

from .errors import SinkError
from .models import Align, Document, DrawOp

logger = get_logger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r'[^a-z0-9]', re.IGNORECASE)


def derive_filename(title: str, extension: str = "pdf") -> str:
    """
    Build a download filename from a document title.

    Every character outside [a-z0-9] (case-insensitively) becomes '_' and the
    result is lower-cased:

        "Q1 (5 marks): Explain Photosynthesis..." -> "q1__5_marks___explain_photosynthesis___.pdf"
    """
    return f"{_UNSAFE_FILENAME_CHARS.sub('_', title).lower()}.{extension}"


class PdfSink:
    """Writes documents as PDF files."""

    def __init__(self, author: str = "", creator: str = "Exam Answer Generator"):
        self.author = author
        self.creator = creator

    def render(self, document: Document) -> bytes:
        """Return the PDF bytes for ``document``."""
        missing = [p.index for p in document.pages if p.footer is None]
        if missing or not document.pages:
            raise SinkError(
                f"Document '{document.title}' is not finalized; pages without footer: {missing}"
            )

        buffer = io.BytesIO()
        page_size = document.layout.page.size
        try:
            pdf = rl_canvas.Canvas(buffer, pagesize=page_size)
            pdf.setTitle(document.title)
            pdf.setAuthor(self.author)
            pdf.setCreator(self.creator)

            for page in document.pages:
                for op in page.ops:
                    self._draw(pdf, op, page_size[1])
                for op in page.footer.ops:
                    self._draw(pdf, op, page_size[1])
                pdf.showPage()

            pdf.save()
        except Exception as e:
            raise SinkError(f"Failed to render PDF for '{document.title}': {e}") from e

        return buffer.getvalue()

    def write(self, document: Document, output_dir: Union[str, Path]) -> Path:
        """
        Write ``document`` into ``output_dir`` under its derived filename.

        The file appears only once it is complete.
        """
        data = self.render(document)

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output = output_dir / derive_filename(document.title)

        fd, tmp_name = tempfile.mkstemp(dir=output_dir, suffix=".part")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, output)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise SinkError(f"Failed to write {output}: {e}") from e

        logger.info(f"PDF written: {output} ({document.page_count} page(s))")
        return output

    @staticmethod
    def _draw(pdf, op: DrawOp, page_height: float) -> None:
        pdf.setFont(op.font_name, op.font_size)
        pdf.setFillColorRGB(*op.color)
        y = page_height - op.y
        if op.align is Align.CENTER:
            pdf.drawCentredString(op.x, y, op.text)
        elif op.align is Align.RIGHT:
            pdf.drawRightString(op.x, y, op.text)
        else:
            pdf.drawString(op.x, y, op.text)
