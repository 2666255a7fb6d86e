"""Discord UI views for the voidstats bot."""

import logging
from typing import TYPE_CHECKING, List

import discord
from discord.ui import Select, View

from .states import LookupState
from .stats import MODES

if TYPE_CHECKING:
    from .controller import VoidController

logger = logging.getLogger("voidstats")

MENU_TIMEOUT = 300


def build_mode_options(selected: str = "overall") -> List[discord.SelectOption]:
    """One option per mode, with ``selected`` marked as the default."""
    return [
        discord.SelectOption(label=label, value=key, default=key == selected)
        for key, label in MODES.items()
    ]


class ModeSelectView(View):
    """Mode selector attached to a void stats card."""

    def __init__(
        self,
        controller: "VoidController",
        username: str,
        selected: str = "overall",
        timeout: float = MENU_TIMEOUT,
    ) -> None:
        super().__init__(timeout=timeout)
        self.controller = controller
        self.username = username
        self.selected = selected
        self.state = LookupState.INTERACTIVE

        self.mode_select = Select(
            custom_id="mode_select",
            placeholder="Select Mode",
            options=build_mode_options(selected),
        )
        self.mode_select.callback = self.on_select
        self.add_item(self.mode_select)

    def set_selected(self, mode: str) -> None:
        self.selected = mode
        self.mode_select.options = build_mode_options(mode)

    async def on_select(self, interaction: discord.Interaction) -> None:
        await self.controller.handle_select(interaction, self, self.mode_select.values[0])

    async def on_timeout(self) -> None:
        self.state = LookupState.EXPIRED
        self.clear_items()
        if self.message is None:
            return
        try:
            await self.message.edit(view=self)
        except discord.HTTPException as e:
            # The card may have been deleted while the menu was live.
            logger.debug(f"Could not strip menu from card of {self.username}: {e}")
