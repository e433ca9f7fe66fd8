import logging
from typing import TYPE_CHECKING, Mapping

import disnake

from ui.errors import OutOfRange
from ui.menu import MenuBase
from utils import config
from .provider import PageContext, PageProvider

log = logging.getLogger(__name__)


class PagedMenu(MenuBase):
    """
    A menu that shows one page of a page provider at a time, with buttons to move between pages.

    The menu owns the current page index and is the only thing that validates it; providers trust the
    indices they are given.
    """

    def __init__(
        self,
        owner: disnake.User,
        page_provider: PageProvider,
        *args,
        start_index: int = 0,
        timeout: float = config.MENU_TIMEOUT,
        **kwargs,
    ):
        super().__init__(owner, *args, timeout=timeout, **kwargs)
        if not 0 <= start_index < page_provider.page_count:
            raise OutOfRange("start_index", start_index)
        self.page_provider = page_provider
        self.current_page_index = start_index
        self._update_buttons()

    @property
    def page_context(self) -> PageContext:
        return PageContext(self.current_page_index, self.page_provider.page_count)

    # ==== navigation ====
    async def go_to_page(self, index: int, interaction: disnake.Interaction):
        """Shows the page at *index*. Indices outside of the provider's pages are ignored."""
        page_count = self.page_provider.page_count
        if not 0 <= index < page_count:
            log.debug(f"Ignoring navigation to page {index} of {page_count}")
            return
        self.current_page_index = index
        self._update_buttons()
        await self.refresh_content(interaction)

    def _update_buttons(self):
        if TYPE_CHECKING:
            self.first_page: disnake.ui.Button
            self.previous_page: disnake.ui.Button
            self.next_page: disnake.ui.Button
            self.last_page: disnake.ui.Button

        on_first = self.current_page_index <= 0
        on_last = self.current_page_index >= self.page_provider.page_count - 1
        self.first_page.disabled = on_first
        self.previous_page.disabled = on_first
        self.next_page.disabled = on_last
        self.last_page.disabled = on_last

    @disnake.ui.button(emoji="⏮️", style=disnake.ButtonStyle.secondary)
    async def first_page(self, _: disnake.ui.Button, interaction: disnake.Interaction):
        await self.go_to_page(0, interaction)

    @disnake.ui.button(emoji="◀️", style=disnake.ButtonStyle.secondary)
    async def previous_page(self, _: disnake.ui.Button, interaction: disnake.Interaction):
        await self.go_to_page(self.current_page_index - 1, interaction)

    @disnake.ui.button(emoji="⏹️", style=disnake.ButtonStyle.danger)
    async def stop_menu(self, _: disnake.ui.Button, interaction: disnake.Interaction):
        self.stop()
        await interaction.response.edit_message(view=None)

    @disnake.ui.button(emoji="▶️", style=disnake.ButtonStyle.secondary)
    async def next_page(self, _: disnake.ui.Button, interaction: disnake.Interaction):
        await self.go_to_page(self.current_page_index + 1, interaction)

    @disnake.ui.button(emoji="⏭️", style=disnake.ButtonStyle.secondary)
    async def last_page(self, _: disnake.ui.Button, interaction: disnake.Interaction):
        await self.go_to_page(self.page_provider.page_count - 1, interaction)

    # ==== content ====
    async def _before_send(self):
        # nothing to navigate between
        if self.page_provider.page_count <= 1:
            for button in (self.first_page, self.previous_page, self.next_page, self.last_page):
                self.remove_item(button)

    async def get_content(self) -> Mapping:
        page = await self.page_provider.get_page(self.page_context)
        return page.to_message_kwargs()
