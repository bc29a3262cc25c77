"""
Page Flow Controller - owns the vertical cursor and every page-break decision.

Callers place each block in two steps:

    page_index = flow.reserve(block.height)   # may start a new page
    ... draw the block at flow.cursor on flow.current_page ...
    flow.advance(block.height, spacing)

A block is never split: it either fits below the cursor or moves whole to a
new page.
"""

from enum import Enum
from typing import List, Optional

from config.logging_config import get_logger

from .errors import BlockTooLargeError, InternalLayoutError
from .layout import PageSpec
from .models import Page

logger = get_logger(__name__)


class FlowState(Enum):
    """Page flow states"""
    ON_PAGE = "on_page"        # the current page already holds a block
    JUST_BROKE = "just_broke"  # the current page is still empty


class OverflowPolicy(str, Enum):
    """What to do with a block taller than the usable page height"""
    ACCEPT = "accept"  # draw it from the top of a fresh page and let it overflow
    FAIL = "fail"      # raise BlockTooLargeError


class PageFlowController:
    """
    Tracks the cursor on the current page and adds pages as blocks demand.

    The cursor is the baseline of the next block's first line, measured from
    the top edge of the page.
    """

    def __init__(
        self,
        page_spec: PageSpec,
        start_y: Optional[float] = None,
        block_spacing: float = 0,
        overflow_policy: OverflowPolicy = OverflowPolicy.ACCEPT,
    ):
        """
        Args:
            page_spec: Page size and margins
            start_y: Cursor position on the first page (defaults to the top margin)
            block_spacing: Spacing added by advance() when none is given
            overflow_policy: Handling of blocks taller than a page
        """
        self.page_spec = page_spec
        self.block_spacing = block_spacing
        self.overflow_policy = OverflowPolicy(overflow_policy)

        self.cursor: float = page_spec.top_margin if start_y is None else start_y
        self.state = FlowState.JUST_BROKE
        self.pages: List[Page] = [Page(index=1)]
        self.finalized_pages: List[int] = []

        self._reserved: Optional[float] = None
        self._overflowing = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def current_page(self) -> Page:
        return self.pages[-1]

    @property
    def top(self) -> float:
        return self.page_spec.top_margin

    @property
    def bottom(self) -> float:
        return self.page_spec.content_bottom

    @property
    def usable_height(self) -> float:
        return self.page_spec.usable_height

    def reserve(self, block_height: float) -> int:
        """
        Make room for a block of ``block_height`` points.

        Starts a new page when the block does not fit below the cursor.
        An empty page is never abandoned: a block that does not fit on it is
        an oversized block and is handled by the overflow policy.

        Returns:
            1-based index of the page the block will be drawn on
        """
        if block_height < 0:
            raise InternalLayoutError(f"Negative block height: {block_height}")
        if self._reserved is not None:
            raise InternalLayoutError("reserve() called twice without advance()")

        if block_height > self.usable_height and self.overflow_policy is OverflowPolicy.FAIL:
            raise BlockTooLargeError(block_height, self.usable_height)

        if self.cursor + block_height > self.bottom and self.state is FlowState.ON_PAGE:
            self._break_page()

        self._overflowing = self.cursor + block_height > self.bottom
        if self._overflowing:
            if self.overflow_policy is OverflowPolicy.FAIL:
                raise BlockTooLargeError(block_height, self.bottom - self.cursor)
            logger.warning(
                f"Block of {block_height:.1f}pt overflows page {self.page_count} "
                f"(usable height {self.usable_height:.1f}pt)"
            )

        self._reserved = block_height
        return self.page_count

    def advance(self, block_height: float, spacing: Optional[float] = None) -> float:
        """
        Move the cursor past a placed block plus the spacing that follows it.

        Returns:
            The new cursor position
        """
        if self._reserved is None:
            raise InternalLayoutError("advance() called without reserve()")

        block_bottom = self.cursor + block_height
        if self.cursor < self.top or (block_bottom > self.bottom and not self._overflowing):
            raise InternalLayoutError(
                f"Block [{self.cursor:.2f}, {block_bottom:.2f}] on page {self.page_count} "
                f"leaves the content area [{self.top:.2f}, {self.bottom:.2f}]"
            )

        self.cursor = block_bottom + (self.block_spacing if spacing is None else spacing)
        self.state = FlowState.ON_PAGE
        self._reserved = None
        self._overflowing = False
        return self.cursor

    def skip(self, amount: float) -> float:
        """Add vertical space that belongs to no block."""
        if self._reserved is not None:
            raise InternalLayoutError("skip() called between reserve() and advance()")
        self.cursor += amount
        return self.cursor

    def finish(self) -> List[Page]:
        """Finalize the last page and return every page in order."""
        if self._reserved is not None:
            raise InternalLayoutError("finish() called with a block still reserved")
        self._finalize(self.current_page)
        return list(self.pages)

    def _break_page(self) -> None:
        self._finalize(self.current_page)
        self.pages.append(Page(index=self.page_count + 1))
        self.cursor = self.top
        self.state = FlowState.JUST_BROKE
        logger.debug(f"Page break: now on page {self.page_count}")

    def _finalize(self, page: Page) -> None:
        if page.finalized:
            return
        page.finalized = True
        self.finalized_pages.append(page.index)
