"""Typed exceptions for transcript export."""


class ExportError(Exception):
    """Base class for export errors."""


class EmptyTranscriptError(ExportError):
    """Raised when export is invoked without any exportable question/answer pair."""


class ContentRenderError(ExportError):
    """Raised when an answer cannot be converted to plain text."""

    def __init__(self, message: str, pair_index: int = -1):
        super().__init__(message)
        self.pair_index = pair_index


class InternalLayoutError(ExportError):
    """Raised when the page flow reaches an impossible state."""


class BlockTooLargeError(ExportError):
    """Raised when a block is taller than a page and overflow is not accepted."""

    def __init__(self, block_height: float, usable_height: float):
        super().__init__(
            f"Block of height {block_height:.1f}pt exceeds usable page height "
            f"{usable_height:.1f}pt"
        )
        self.block_height = block_height
        self.usable_height = usable_height


class SinkError(ExportError):
    """Raised when a finished document cannot be serialized."""


class FontNotFoundError(ExportError):
    """Raised when a configured font is neither built in nor found on disk."""

    def __init__(self, font_name: str, searched: list):
        super().__init__(f"No {font_name}.ttf found for font '{font_name}' (searched {len(searched)} dir(s))")
        self.font_name = font_name
        self.searched = searched
