from typing import Sequence, Union

import disnake

from ui.errors import InvalidArgument, OutOfRange
from .page import Page
from .provider import PageContext, PageProvider


class ListPageProvider(PageProvider):
    """Serves a fixed list of pages that were built ahead of time."""

    def __init__(self, pages: Sequence[Union[Page, str, disnake.Embed]]):
        if pages is None:
            raise InvalidArgument("pages")
        if not pages:
            raise OutOfRange("pages", msg="There must be at least one page.")
        self.pages = pages

    @property
    def page_count(self) -> int:
        return len(self.pages)

    async def get_page(self, context: PageContext) -> Page:
        return Page.from_value(self.pages[context.current_page_index])
