import abc
from typing import NamedTuple

from .page import Page


class PageContext(NamedTuple):
    """The state of the menu a page is being requested for."""

    current_page_index: int
    page_count: int


class PageProvider(abc.ABC):
    """
    Something that can turn a page index into a page.

    The menu owns navigation and only ever asks for indices in ``[0, page_count)``; providers do not check
    the index again. Pages may be requested in any order, any number of times.
    """

    @property
    @abc.abstractmethod
    def page_count(self) -> int:
        """The number of pages this provider can produce."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_page(self, context: PageContext) -> Page:
        """Returns the page at ``context.current_page_index``."""
        raise NotImplementedError
