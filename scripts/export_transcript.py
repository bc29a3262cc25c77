#!/usr/bin/env python3
"""
Transcript Export: write a saved question/answer transcript as a PDF.

Reads the JSON transcript format ({"title": ..., "qaPairs": [{"q": ..., "a": ...}]})
and writes <output-dir>/<derived filename>.pdf.

Usage:
    python -m scripts.export_transcript                          # saved transcript
    python -m scripts.export_transcript chat.json                # explicit file
    python -m scripts.export_transcript chat.json --title "Biology" --output-dir out/
    python -m scripts.export_transcript chat.json --overflow-policy fail
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.logging_config import get_logger, setup_logging
from config.settings import settings
from core.qa_export import (
    DocumentComposer,
    ExportError,
    PdfSink,
    TranscriptStore,
)

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Exam Answer Generator - Transcript PDF Export")
    parser.add_argument("transcript", nargs="?", type=Path, default=None,
                        help="Transcript JSON file (defaults to the saved transcript)")
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory for the PDF")
    parser.add_argument("--title", type=str, default=None, help="Override the document title")
    parser.add_argument("--overflow-policy", choices=["accept", "fail"], default=None,
                        help="Handling of blocks taller than a page")
    parser.add_argument("--split-paragraphs", action="store_true",
                        help="Paginate answers paragraph by paragraph")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)

    source = args.transcript or settings.transcript_path
    try:
        transcript = TranscriptStore(source).load()
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        print(f"Invalid transcript {source}: {e}", file=sys.stderr)
        return 2
    if transcript is None:
        print(f"No transcript found at {source}", file=sys.stderr)
        return 2

    overrides = {}
    if args.overflow_policy:
        overrides["overflow_policy"] = args.overflow_policy
    if args.split_paragraphs:
        overrides["split_answer_paragraphs"] = True
    run_settings = settings.model_copy(update=overrides)

    title = args.title or transcript.title
    try:
        document = DocumentComposer.from_settings(run_settings).compose(title, transcript.pairs)
        path = PdfSink().write(document, args.output_dir or run_settings.output_dir)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        print(f"Export failed: {e}", file=sys.stderr)
        return 1

    print(f"PDF created: {path} ({document.page_count} page(s))")
    return 0


if __name__ == "__main__":
    sys.exit(main())
