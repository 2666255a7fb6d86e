"""Handling of /void commands and mode selections."""

import logging

import discord

from .cache import StatsCache
from .cooldowns import CooldownTracker
from .embeds import build_cooldown_embed, build_void_embed
from .errors import PlayerNotFound
from .states import LookupState
from .views import MENU_TIMEOUT, ModeSelectView

logger = logging.getLogger("voidstats")

NOT_FOUND_MESSAGE = "Player not found."
ERROR_MESSAGE = "Error occurred"
REFETCH_FAILED_MESSAGE = "Refetch failed"
SELECT_ERROR_MESSAGE = "Error"


class VoidController:
    """
    Drives a lookup from the slash command to the interactive card.

    ``handle_command`` walks RECEIVED -> COOLDOWN, or RECEIVED -> DEFERRED ->
    NOT_FOUND / FAILED / INTERACTIVE. ``handle_select`` keeps a card
    INTERACTIVE; the view moves itself to EXPIRED when its timeout fires.
    Both entry points answer the interaction on every path.
    """

    def __init__(
        self,
        cache: StatsCache,
        cooldowns: CooldownTracker,
        menu_timeout: float = MENU_TIMEOUT,
    ) -> None:
        self.cache = cache
        self.cooldowns = cooldowns
        self.menu_timeout = menu_timeout

    async def handle_command(self, ctx: discord.ApplicationContext, player: str) -> LookupState:
        remaining = self.cooldowns.check(ctx.author.id)
        if remaining > 0:
            await ctx.respond(embed=build_cooldown_embed(ctx.command.name, remaining))
            return LookupState.COOLDOWN

        await ctx.defer()
        try:
            stats = await self.cache.get_or_fetch(player)
            view = ModeSelectView(self, player, timeout=self.menu_timeout)
            message = await ctx.edit(embed=build_void_embed(player, "overall", stats), view=view)
        except PlayerNotFound:
            logger.info(f"[void] player not found: {player}")
            await ctx.edit(content=NOT_FOUND_MESSAGE)
            return LookupState.NOT_FOUND
        except Exception:
            logger.exception(f"[void] lookup failed for {player}")
            await ctx.edit(content=ERROR_MESSAGE)
            return LookupState.FAILED

        if view.message is None:
            view.message = message
        return LookupState.INTERACTIVE

    async def handle_select(
        self, interaction: discord.Interaction, view: ModeSelectView, mode: str
    ) -> LookupState:
        previous = view.selected
        try:
            stats = await self.cache.get_or_fetch(view.username)
            view.set_selected(mode)
            await interaction.response.edit_message(
                embed=build_void_embed(view.username, mode, stats), view=view
            )
        except PlayerNotFound:
            view.set_selected(previous)
            await self._notify(interaction, REFETCH_FAILED_MESSAGE)
        except Exception:
            # The message still shows the previous card.
            view.set_selected(previous)
            logger.exception(f"[void] mode switch to {mode} failed for {view.username}")
            await self._notify(interaction, SELECT_ERROR_MESSAGE)
        return view.state

    @staticmethod
    async def _notify(interaction: discord.Interaction, content: str) -> None:
        if interaction.response.is_done():
            await interaction.followup.send(content, ephemeral=True)
        else:
            await interaction.response.send_message(content, ephemeral=True)
