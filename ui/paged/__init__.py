from .array import ArrayPageProvider, DefaultPageFormatter
from .page import Page
from .pages import ListPageProvider
from .provider import PageContext, PageProvider

pass  # the menu depends on everything above

from .menu import PagedMenu  # noqa E402
