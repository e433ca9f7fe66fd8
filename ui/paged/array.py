import logging
from typing import Any, Callable, Optional, Sequence, TypeVar, Union

import disnake

from ui.errors import ConfigurationError, InvalidArgument, OutOfRange
from utils import config, constants
from utils.functions import truncate
from utils.pagination import ArraySegment, get_page_segment, get_total_pages
from .page import Page
from .provider import PageContext, PageProvider

log = logging.getLogger(__name__)

T = TypeVar("T")
PageFormatter = Callable[[PageContext, ArraySegment], Union[Page, str, disnake.Embed]]


class DefaultPageFormatter:
    """
    Formats a segment as a numbered list in an embed description, with a page number footer.

    Each item slot gets an equal share of *max_length*, based on the number of items per page rather than
    the number of items actually on the page, so the same item is cut the same way on every page. Items
    that do not fit their share are cut and marked with an ellipsis.
    """

    def __init__(self, items_per_page: int, max_length: int = constants.EMBED_DESC_MAX):
        self.items_per_page = items_per_page
        self.max_length = max_length

    def max_item_length(self, prefix: str) -> int:
        # 2: the ellipsis and the newline
        return self.max_length // self.items_per_page - len(prefix) - 2

    def format_item(self, number: int, item: Any) -> str:
        prefix = f"{number}. "
        max_item_length = self.max_item_length(prefix)
        if max_item_length <= 0:
            raise ConfigurationError(
                "There are too many items per page. Set a lower amount or provide a custom page formatter."
            )
        return f"{prefix}{truncate(str(item), max_item_length)}"

    def __call__(self, context: PageContext, segment: ArraySegment) -> Page:
        lines = [self.format_item(number, item) for number, item in enumerate(segment, start=segment.offset + 1)]
        embed = disnake.Embed(description="\n".join(lines))
        embed.set_footer(text=f"Page {context.current_page_index + 1}/{context.page_count}")
        return Page(embed=embed)


class ArrayPageProvider(PageProvider):
    """
    Creates pages from windows of an in-memory sequence.

    The sequence is shared, not copied. Nothing here synchronizes access to it, so callers must not mutate
    it while the menu is live.
    """

    def __init__(
        self,
        array: Sequence[T],
        formatter: Optional[PageFormatter] = None,
        items_per_page: int = config.DEFAULT_ITEMS_PER_PAGE,
    ):
        if array is None:
            raise InvalidArgument("array")
        if isinstance(items_per_page, bool) or not isinstance(items_per_page, int):
            raise OutOfRange("items_per_page", items_per_page)
        if not 0 < items_per_page <= len(array):
            raise OutOfRange("items_per_page", items_per_page)

        self._array = array
        self._items_per_page = items_per_page
        self._formatter = formatter if formatter is not None else DefaultPageFormatter(items_per_page)
        log.debug(f"Created array page provider: {len(array)} items, {items_per_page} per page")

    @property
    def array(self) -> Sequence[T]:
        return self._array

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @property
    def formatter(self) -> PageFormatter:
        return self._formatter

    @property
    def page_count(self) -> int:
        return get_total_pages(self._array, self._items_per_page)

    def get_segment(self, page: int) -> ArraySegment:
        """Returns the window of the array shown on the given page."""
        return get_page_segment(self._array, page, self._items_per_page)

    async def get_page(self, context: PageContext) -> Page:
        segment = self.get_segment(context.current_page_index)
        return Page.from_value(self._formatter(context, segment))
