from contextlib import suppress
from typing import Mapping, Optional

import disnake


class MenuBase(disnake.ui.View):
    """
    A view that belongs to one user and renders its own message content.

    Subclasses provide the message kwargs through ``get_content``; the base class takes care of sending,
    re-rendering after an interaction and cleaning up the components when the view times out.
    """

    def __init__(self, owner: disnake.User, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.owner = owner
        self.message: Optional[disnake.Message] = None

    async def interaction_check(self, interaction: disnake.Interaction) -> bool:
        if interaction.user.id == self.owner.id:
            return True
        await interaction.response.send_message(
            "This menu belongs to someone else. Run the command yourself to get your own.", ephemeral=True
        )
        return False

    async def on_timeout(self):
        # the message may have been deleted in the meantime
        if self.message is not None:
            with suppress(disnake.HTTPException):
                await self.message.edit(view=None)

    async def get_content(self) -> Mapping:
        """The kwargs the menu's message is sent and edited with."""
        return {}

    async def _before_send(self):
        """
        Runs once, right before the first send. Items removed here are never shown.

        disnake.ui.View replaces each decorated callback with its Item instance during __init__, so
        the Items are available as attributes by now.
        """

    async def send_to(self, destination: disnake.abc.Messageable, **kwargs) -> disnake.Message:
        await self._before_send()
        self.message = await destination.send(view=self, **await self.get_content(), **kwargs)
        return self.message

    async def refresh_content(self, interaction: disnake.Interaction):
        """Re-renders the menu into the message the interaction came from."""
        content = await self.get_content()
        if interaction.response.is_done():
            await interaction.edit_original_message(view=self, **content)
        else:
            await interaction.response.edit_message(view=self, **content)
