"""
Transcript export endpoints: PDF download and page-plan preview.

Thin routing layer; layout lives in core/qa_export/.
"""

from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from api.models import ExportPreview, ExportRequest, PagePreview
from config.logging_config import get_logger
from config.settings import settings
from core.qa_export import (
    BlockTooLargeError,
    ContentRenderError,
    Document,
    DocumentComposer,
    EmptyTranscriptError,
    FontNotFoundError,
    InternalLayoutError,
    PdfSink,
    QAPair,
    SinkError,
    derive_chat_title,
    derive_filename,
)

logger = get_logger(__name__)

router = APIRouter(tags=["Export"])


def _resolve_title(request: ExportRequest) -> str:
    if request.title and request.title.strip():
        return request.title.strip()
    if request.qa_pairs:
        return derive_chat_title(
            request.qa_pairs[0].question,
            limit=settings.title_max_chars,
            default=settings.default_title,
        )
    return settings.default_title


def _compose(request: ExportRequest) -> Document:
    """Compose the request, mapping export errors to HTTP errors."""
    title = _resolve_title(request)
    pairs: List[QAPair] = [QAPair(p.question, p.answer) for p in request.qa_pairs]

    try:
        return DocumentComposer.from_settings(settings).compose(title, pairs)
    except EmptyTranscriptError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (ContentRenderError, BlockTooLargeError) as e:
        logger.warning(f"Export rejected for '{title}': {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except InternalLayoutError as e:
        logger.error(f"Layout failure for '{title}': {e}")
        raise HTTPException(status_code=500, detail=f"Layout failed: {e}")
    except FontNotFoundError as e:
        logger.error(f"Font configuration error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/api/export/pdf")
async def export_pdf(request: ExportRequest):
    """Export the transcript as a PDF download."""
    document = _compose(request)

    try:
        data = PdfSink().render(document)
    except SinkError as e:
        logger.error(f"PDF rendering failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    filename = derive_filename(document.title)
    return Response(
        content=data,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/api/export/preview", response_model=ExportPreview)
async def export_preview(request: ExportRequest):
    """Return the page plan (lines per page) without rendering a PDF."""
    document = _compose(request)

    return ExportPreview(
        title=document.title,
        filename=derive_filename(document.title),
        page_count=document.page_count,
        pages=[
            PagePreview(
                index=page.index,
                lines=page.lines,
                footer=[op.text for op in page.footer.ops],
            )
            for page in document.pages
        ],
    )
